import os

from .config import OVERTIME_DEPARTMENTS, RECALC_MAX_ATTEMPTS, db_config_from_env, env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env(default_password="")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app applies database/schema.sql on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_bool("AUTO_INIT_DB", True)

__all__ = [
    "SECRET_KEY",
    "DB_CONFIG",
    "DEBUG",
    "LOG_LEVEL",
    "AUTO_INIT_DB",
    "OVERTIME_DEPARTMENTS",
    "RECALC_MAX_ATTEMPTS",
]
