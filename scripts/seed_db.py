from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.attendance_payroll.attendance_payroll.database.bootstrap import apply_seed_sql
from src.attendance_payroll.attendance_payroll.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = load_settings()
    conn = DatabaseConnection(DBConfig.from_mapping(settings.DB_CONFIG))

    apply_seed_sql(conn, seed_path=REPO_ROOT / "database" / "seed.sql")
    cfg = conn.config
    print(f"OK: Seeded department rules -> {cfg.user}@{cfg.host}:{cfg.port}/{cfg.database}")


if __name__ == "__main__":
    main()
