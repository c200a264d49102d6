"""Domain constants shared by deterministic logic."""

from openhours.domain.enums import Weekday

DEFAULT_TIMEZONE = "America/Vancouver"

MINUTES_PER_DAY = 24 * 60
LAST_MINUTE_OF_DAY = MINUTES_PER_DAY - 1
CLOSING_SOON_MINUTES = 30

ALL_DAYS = frozenset(Weekday)
MONDAY_TO_FRIDAY = frozenset(
    {
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
    }
)

STATUS_OPEN_24_7 = "Open 24/7"
STATUS_CLOSED = "Closed"
STATUS_MEAL_SCHEDULE = "Open daily - see hours for meal times"
STATUS_OPEN_WEEKDAYS = "Open weekdays"
STATUS_OPEN_TODAY = "Open today"

OTHER_SERVICES_GROUP = "Other Services"
