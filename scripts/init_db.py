from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.workforce_dashboard.workforce_dashboard.database.bootstrap import apply_schema, list_missing_tables
from src.workforce_dashboard.workforce_dashboard.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    missing = list_missing_tables(db_config)
    target = DBConfig.from_mapping(db_config).describe()
    if missing:
        raise SystemExit(f"Schema applied to {target} but tables are still missing: {', '.join(missing)}")
    print(f"OK: Applied schema.sql -> {target}")


if __name__ == "__main__":
    main()
