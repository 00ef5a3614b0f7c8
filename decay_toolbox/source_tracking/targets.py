from typing import List, NamedTuple, Optional
import datetime

from .decay_math import activity_at, convert, time_to_reach
from .calculations import add_seconds, convert_to_datetime, delay_time, get_now
from .reference import Reference, Target


class NextTarget(NamedTuple):
    """The next target reached by a reference.
    Either all fields are set or all are None."""

    name: Optional[str]
    activity: Optional[float]
    date: Optional[datetime.datetime]


NO_TARGET = NextTarget(None, None, None)


class PendingTarget(NamedTuple):
    target: Target
    activity: float  # in the reference unit
    seconds: float
    date: datetime.datetime


def get_pending_targets(reference: Reference, date=None) -> List[PendingTarget]:
    """
    Returns the targets of a reference that are not reached yet at ``date``,
    in the order of the reference target list.

    A target is pending when the activity at ``date`` is strictly above the
    target activity (converted to the reference unit).

    Args:
        reference: the reference
        date: the query date, defaults to now

    Returns:
        the pending targets with their activity in the reference unit, the
        time left in seconds and the date they are reached
    """
    if date is None:
        date = get_now()
    date = convert_to_datetime(date)

    half_life = reference.isotope.half_life
    current_activity = activity_at(
        reference.calibration_activity,
        half_life,
        delay_time(reference.calibration_date, date),
    )

    pending = []
    for target in reference.targets:
        target_activity = convert(target.target_activity, target.unit, reference.unit)
        if current_activity <= target_activity:
            # already reached
            continue
        seconds = time_to_reach(current_activity, target_activity, half_life)
        pending.append(
            PendingTarget(
                target=target,
                activity=target_activity,
                seconds=seconds,
                date=add_seconds(date, seconds),
            )
        )
    return pending


def find_next_target(reference: Reference, date=None) -> NextTarget:
    """
    Finds the closest target the reference has not reached yet.

    When two targets are reached at the same date, the one listed first
    in the reference wins.

    Args:
        reference: the reference
        date: the query date, defaults to now

    Returns:
        the name of the target, its activity in the reference unit and the
        date it is reached, or ``NO_TARGET``
    """
    closest = None
    for pending in get_pending_targets(reference, date):
        if closest is None or pending.date < closest.date:
            closest = pending

    if closest is None:
        return NO_TARGET
    return NextTarget(closest.target.name, closest.activity, closest.date)
