from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_EMPLOYEE_PAGE_SIZE, DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_login, list_missing_tables, list_tables
from .database.connection import DBConfig
from .auth.controller import register as register_auth
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .resources.controller import register_resource

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"

# (container attribute, url prefix) for pages that need nothing beyond plain CRUD
RESOURCE_PAGES = (
    ("areas", "/employees/areas"),
    ("positions", "/employees/positions"),
    ("departments", "/employees/departments"),
    ("holidays", "/employees/holidays"),
    ("timetables", "/employees/timetables"),
    ("shifts", "/employees/shifts"),
    ("users", "/system/users"),
)


def _prepare_database(app: Flask, settings, db_config: dict) -> None:
    auto_init_db = bool(getattr(settings, "AUTO_INIT_DB", False))
    auto_seed_db = bool(getattr(settings, "AUTO_SEED_DB", False))
    if auto_init_db:
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        if app.config["DEBUG"]:
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if auto_seed_db:
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        ensure_demo_login(db_config)
        if app.config["DEBUG"]:
            app.logger.info("demo seed ready")

    try:
        for table in list_missing_tables(db_config):
            logger.warning("Required table %r is missing; run scripts/init_db.py", table)
    except mysql.connector.Error as e:
        logger.warning("Could not check tables on %s: %s", DBConfig.from_mapping(db_config).describe(), e)


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Passing ``container`` skips every database step, which is how tests run
    the app over in-memory repositories.
    """
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))
    page_size = int(getattr(settings, "EMPLOYEE_PAGE_SIZE", DEFAULT_EMPLOYEE_PAGE_SIZE))

    if container is None:
        # Helpful startup info to avoid "connected but no tables" confusion.
        if app.config["DEBUG"]:
            app.logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())
        _prepare_database(app, settings, db_config)
        container = build_container(db_config=db_config, page_size=page_size)

    app.extensions["workforce_container"] = container

    register_auth(app, container)
    register_employees(app, container)
    for attr, url_prefix in RESOURCE_PAGES:
        register_resource(app, getattr(container, attr), url_prefix=url_prefix)
    register_leaves(app, container)

    return app
