"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# School days in the attendance window (roughly three months).
TOTAL_SCHOOL_DAYS = 90

STUDENTS_COLLECTION = "students"

FIELD_ROLL_NUMBER = "rollNumber"
FIELD_NAME = "name"
FIELD_CHECKIN = "checkin"
FIELD_CHECKOUT = "checkout"

# Accepted check-in string layouts, tried in order after ISO 8601.
CHECKIN_FORMATS = (
    "%m/%d/%Y, %I:%M:%S %p",
    "%d/%m/%Y, %H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%m/%d/%Y %I:%M:%S %p",
)

DEFAULT_CHECKOUT_TIME_FORMAT = "%I:%M:%S %p"
