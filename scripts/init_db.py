from __future__ import annotations

import importlib
import logging
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.school_hrms.school_hrms.database.bootstrap import apply_schema, ensure_admin_user, list_tables
from src.school_hrms.school_hrms.database.connection import DBConfig

logger = logging.getLogger("init_db")


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(db_config, schema_path=schema_path)
    tables = list_tables(db_config)
    logger.info("Applied schema.sql -> %s (tables=%d)", DBConfig.from_mapping(db_config).describe(), len(tables))

    admin_password = os.getenv("ADMIN_PASSWORD")
    if admin_password:
        username = os.getenv("ADMIN_USERNAME", "admin")
        ensure_admin_user(db_config, username=username, password=admin_password)
        logger.info("Admin user %r ready", username)
    else:
        logger.info("ADMIN_PASSWORD not set; skipping admin user")


if __name__ == "__main__":
    main()
