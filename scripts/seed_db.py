from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.workforce_dashboard.workforce_dashboard.database.bootstrap import (
    DEMO_EMAIL,
    DEMO_PASSWORD,
    apply_seed_sql,
    ensure_demo_login,
)
from src.workforce_dashboard.workforce_dashboard.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_login(db_config)

    print(f"OK: Seeded database -> {DBConfig.from_mapping(db_config).describe()}")
    print(f"    demo login: {DEMO_EMAIL} / {DEMO_PASSWORD}")


if __name__ == "__main__":
    main()
