import os

from .config import OVERTIME_DEPARTMENTS, RECALC_MAX_ATTEMPTS, db_config_from_env, env_bool

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_password=os.getenv("DB_PASSWORD", "12345"))

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = env_bool("AUTO_INIT_DB", False)

__all__ = [
    "SECRET_KEY",
    "DB_CONFIG",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "AUTO_INIT_DB",
    "OVERTIME_DEPARTMENTS",
    "RECALC_MAX_ATTEMPTS",
]
