"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import Department

# Only these departments track overtime/undertime hours.
OVERTIME_DEPARTMENTS = frozenset({Department.WORKSHOP.value, Department.ENAMEL.value})

# Workshop's regular shift when no shift-specific hours are configured.
WORKSHOP_STANDARD_HOURS = 8.5
DEFAULT_STANDARD_HOURS = 8.0
DEFAULT_MAX_OVERTIME_PER_DAY = 4.0

MINUTES_PER_DAY = 24 * 60

DEFAULT_RECALC_MAX_ATTEMPTS = 3
DEFAULT_RECALC_FAILURES_KEPT = 100
DEFAULT_ERRORS_SURFACED = 3
