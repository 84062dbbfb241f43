import os

from .config import OVERTIME_DEPARTMENTS, RECALC_MAX_ATTEMPTS, db_config_from_env, env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_bool("AUTO_INIT_DB", False)

__all__ = [
    "SECRET_KEY",
    "DB_CONFIG",
    "DEBUG",
    "LOG_LEVEL",
    "AUTO_INIT_DB",
    "OVERTIME_DEPARTMENTS",
    "RECALC_MAX_ATTEMPTS",
]
