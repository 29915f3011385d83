from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

from .connection import DBConfig

logger = logging.getLogger(__name__)

REQUIRED_TABLES = (
    "areas",
    "positions",
    "departments",
    "holidays",
    "timetables",
    "shifts",
    "employees",
    "auth_users",
)

DEMO_EMAIL = "admin@example.com"
DEMO_PASSWORD = "admin123"
DEMO_BADGE = "EMP001"


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in _strip_comments(sql):
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _run_file(db_config: dict, path: str | Path) -> None:
    target = DBConfig.from_mapping(db_config)
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_mapping(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _run_file(db_config, schema_path)
    logger.info("Schema applied from %s", schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _run_file(db_config, seed_path)
    logger.info("Seed data applied from %s", seed_path)


def ensure_demo_login(db_config: dict) -> str:
    """Create (or reset) the demo account and link it to the demo employee.

    Returns the auth user id.
    """
    target = DBConfig.from_mapping(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)

        cur.execute("SELECT id FROM auth_users WHERE email=%s", (DEMO_EMAIL,))
        existing = cur.fetchone()
        password_hash = generate_password_hash(DEMO_PASSWORD)
        if existing:
            user_id = str(existing["id"])
            cur.execute(
                "UPDATE auth_users SET password_hash=%s, is_active=1 WHERE id=%s",
                (password_hash, user_id),
            )
        else:
            user_id = str(uuid.uuid4())
            cur.execute(
                "INSERT INTO auth_users (id, email, password_hash) VALUES (%s, %s, %s)",
                (user_id, DEMO_EMAIL, password_hash),
            )

        cur.execute("UPDATE employees SET user_id=%s WHERE badge_number=%s", (user_id, DEMO_BADGE))
        if cur.rowcount <= 0:
            logger.warning("Demo employee %s not found; login will have no profile", DEMO_BADGE)

        conn.commit()
        return user_id
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_mapping(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def list_missing_tables(db_config: dict, required: Iterable[str] = REQUIRED_TABLES) -> list[str]:
    present = {t.lower() for t in list_tables(db_config)}
    return [t for t in required if t.lower() not in present]
