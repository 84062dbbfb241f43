"""Shared helpers for the per-environment settings modules."""

import os


def env_bool(name: str, default: bool) -> bool:
    return bool(int(os.getenv(name, "1" if default else "0")))


def env_list(name: str, default: str) -> tuple:
    return tuple(item.strip() for item in os.getenv(name, default).split(",") if item.strip())


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "attendance_payroll"),
    }


# Departments whose attendance tracks overtime/undertime hours.
OVERTIME_DEPARTMENTS = env_list("OVERTIME_DEPARTMENTS", "Workshop,Enamel")
RECALC_MAX_ATTEMPTS = int(os.getenv("RECALC_MAX_ATTEMPTS", "3"))
