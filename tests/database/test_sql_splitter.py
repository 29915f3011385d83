from __future__ import annotations

from pathlib import Path

from src.workforce_dashboard.workforce_dashboard.database.bootstrap import REQUIRED_TABLES, iter_sql_statements

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_splits_on_semicolons_outside_quotes():
    sql = """
    -- comment; with a semicolon
    INSERT INTO t (a) VALUES ('x;y');
    INSERT INTO t (a) VALUES ('It''s');
    SELECT 1
    """

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t (a) VALUES ('x;y')",
        "INSERT INTO t (a) VALUES ('It''s')",
        "SELECT 1",
    ]


def test_schema_creates_every_required_table():
    schema = (REPO_ROOT / "database" / "schema.sql").read_text(encoding="utf-8")
    statements = list(iter_sql_statements(schema))

    for table in REQUIRED_TABLES:
        assert any(s.startswith(f"CREATE TABLE IF NOT EXISTS {table} (") for s in statements), table


def test_seed_statements_parse():
    seed = (REPO_ROOT / "database" / "seed.sql").read_text(encoding="utf-8")

    statements = list(iter_sql_statements(seed))

    assert len(statements) == 7
    assert all(s.startswith("INSERT IGNORE INTO") for s in statements)
