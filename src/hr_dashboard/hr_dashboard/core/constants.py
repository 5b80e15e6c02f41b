"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

WEEKLY_PERIOD_DAYS = 7
MONTHLY_PERIOD_MONTHS = 1
DEPARTMENT_HOURS_DAYS = 7
DASHBOARD_TREND_DAYS = 7
MAX_TREND_DAYS = 90
RECENT_EMPLOYEES_LIMIT = 5

UNKNOWN_LABEL = "Unknown"
EXPORT_SHEET_NAME = "Attendance"
EXPORT_FILENAME_PREFIX = "Attendance"
EXPORT_EXTENSION = ".xlsx"

EMPLOYEE_ID_PREFIX = "EMP-"
EMPLOYEE_ID_START = 1000

ISO_DATE_FORMAT = "%Y-%m-%d"
MONTH_LABEL_FORMAT = "%Y-%m"
