from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.crew_payroll.crew_payroll.database.bootstrap import apply_schema, list_tables
from src.crew_payroll.crew_payroll.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    apply_schema(conn, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = list_tables(conn)
    cfg = conn.config
    logging.getLogger("init_db").info(
        "Applied schema.sql -> %s@%s:%s/%s (tables=%d)", cfg.user, cfg.host, cfg.port, cfg.database, len(tables)
    )


if __name__ == "__main__":
    main()
