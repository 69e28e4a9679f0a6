from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .auth.controller import register as register_auth
from .common.http_errors import register as register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_TOKEN_PREFIX, DEFAULT_TOKENINFO_TIMEOUT, DEFAULT_TOKENINFO_URL
from .core.enums import RegistrationPolicy
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.debug("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.debug("schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            logger.debug("demo seed ready")

        container = build_container(
            db_config=db_config,
            registration_policy=getattr(settings, "REGISTRATION_POLICY", RegistrationPolicy.GUEST.value),
            tokeninfo_url=getattr(settings, "GOOGLE_TOKENINFO_URL", DEFAULT_TOKENINFO_URL),
            tokeninfo_timeout=float(getattr(settings, "GOOGLE_TOKENINFO_TIMEOUT", DEFAULT_TOKENINFO_TIMEOUT)),
            token_prefix=getattr(settings, "DEMO_TOKEN_PREFIX", DEFAULT_TOKEN_PREFIX),
        )

    app.extensions["container"] = container

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_error_handlers(app)
    register_employees(app, container)
    register_auth(app, container)

    return app
