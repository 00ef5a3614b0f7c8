from zoneinfo import ZoneInfo
import pint

ureg = pint.UnitRegistry()

# ln(2) as a literal, not np.log(2), so results are reproducible bit for bit
LN2 = 0.69314718056

# attached to naive datetimes
DEFAULT_TZINFO = ZoneInfo("UTC")
DATE_FORMAT = "%m/%d/%Y %H:%M:%S"

# one entry per minute
WIDGET_TIMELINE_MINUTES = 15

ALERT_ACTIVITY_FORMAT = "{:.2f}"
