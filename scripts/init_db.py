from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.attendance_payroll.attendance_payroll.database.bootstrap import apply_schema, list_tables
from src.attendance_payroll.attendance_payroll.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = load_settings()
    conn = DatabaseConnection(DBConfig.from_mapping(settings.DB_CONFIG))

    schema_path = REPO_ROOT / "database" / "schema.sql"
    executed = apply_schema(conn, schema_path=schema_path)
    tables = list_tables(conn)
    cfg = conn.config
    print(
        "OK: Applied schema.sql -> "
        f"{cfg.user}@{cfg.host}:{cfg.port}/{cfg.database} (statements={executed}, tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
