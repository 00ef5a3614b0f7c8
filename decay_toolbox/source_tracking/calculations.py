import datetime
from typing import Optional

from .settings import DEFAULT_TZINFO, DATE_FORMAT
from .decay_math import (
    activity_at,
    initial_activity_for,
    time_to_reach,
    get_decay_factor,
)


def convert_to_datetime(time, tzinfo=DEFAULT_TZINFO) -> datetime.datetime:
    """Returns a timezone aware datetime.

    Args:
        time: a string formatted as ``DATE_FORMAT``, a datetime.date or a
            datetime.datetime. Dates are taken at midnight.
        tzinfo: timezone added when ``time`` has none

    Returns:
        the datetime
    """
    if isinstance(time, str):
        datetime_obj = datetime.datetime.strptime(time, DATE_FORMAT)
    elif isinstance(time, datetime.datetime):
        datetime_obj = time
    elif isinstance(time, datetime.date):
        datetime_obj = datetime.datetime.combine(time, datetime.time.min)
    else:
        raise ValueError(
            "Time is neither a string, a datetime.date nor a datetime.datetime object."
        )
    # Check if timezone info is included
    if datetime_obj.tzinfo is None:
        datetime_obj = datetime_obj.replace(tzinfo=tzinfo)
    return datetime_obj


def get_now() -> datetime.datetime:
    return datetime.datetime.now(tz=DEFAULT_TZINFO)


def delay_time(start, end) -> float:
    """Returns the time in seconds between ``start`` and ``end``.
    Negative if ``end`` is before ``start``."""
    return (convert_to_datetime(end) - convert_to_datetime(start)).total_seconds()


def get_remaining_activity(isotope, activity: float, reference_date, target_date):
    """Activity left at ``target_date`` for a source measured at ``reference_date``"""
    elapsed = delay_time(reference_date, target_date)
    return activity_at(activity, isotope.half_life, elapsed)


def get_decay_factor_between(isotope, reference_date, target_date):
    elapsed = delay_time(reference_date, target_date)
    return get_decay_factor(isotope.half_life, elapsed)


def get_required_activity(isotope, target_activity: float, start_date, target_date):
    """
    Activity to order for ``start_date`` so that ``target_activity`` is left
    at ``target_date``.

    Args:
        isotope: the isotope of the source
        target_activity: the activity wanted at ``target_date``
        start_date: the date the source is available
        target_date: the date the activity is needed

    Returns:
        the required activity, in the same unit as ``target_activity``
    """
    duration = delay_time(start_date, target_date)
    return initial_activity_for(target_activity, isotope.half_life, duration)


def add_seconds(date, seconds: float) -> datetime.datetime:
    """Returns ``date`` shifted by ``seconds``. Dates past the last
    representable datetime are clamped to it."""
    try:
        return date + datetime.timedelta(seconds=float(seconds))
    except OverflowError:
        if seconds < 0:
            return datetime.datetime.min.replace(tzinfo=date.tzinfo)
        return datetime.datetime.max.replace(tzinfo=date.tzinfo)


def get_time_to_target(
    isotope, current_activity: float, target_activity: float, date=None
) -> Optional[datetime.datetime]:
    """Returns the date at which ``current_activity`` (measured at ``date``)
    decays to ``target_activity``, or None if the target is not strictly
    positive or not below the current activity."""
    if target_activity <= 0 or current_activity <= target_activity:
        return None
    if date is None:
        date = get_now()
    seconds = time_to_reach(current_activity, target_activity, isotope.half_life)
    return add_seconds(convert_to_datetime(date), seconds)
