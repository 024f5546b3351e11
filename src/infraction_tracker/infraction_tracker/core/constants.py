"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EMPLOYEES_KEY = "attendance_tracker_v_final"
STORES_KEY = "attendance_tracker_stores_v_final"
THEME_MODE_KEY = "attendance_tracker_theme_mode_v1"

DEFAULT_RETENTION_DAYS = 180
DEFAULT_SWEEP_INTERVAL_SECONDS = 60 * 60

DEFAULT_EMPLOYEE_NAME = "Employee"

FIRST_WARNING_POINTS = 6
FINAL_WARNING_POINTS = 8
TERMINATION_POINTS = 12
