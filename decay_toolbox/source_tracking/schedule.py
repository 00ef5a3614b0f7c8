from dataclasses import dataclass
from typing import List
import datetime
import uuid

from .settings import ALERT_ACTIVITY_FORMAT
from .calculations import convert_to_datetime, get_now
from .reference import Reference, Target
from .targets import get_pending_targets


@dataclass
class Alert:
    """A local notification to schedule when a target is reached"""

    identifier: str
    title: str
    body: str
    fire_date: datetime.datetime
    target_id: uuid.UUID


def get_alert_prefix(reference: Reference) -> str:
    """All alert identifiers of a reference start with this prefix"""
    return str(reference.id)


def get_alert_identifier(reference: Reference, target: Target) -> str:
    return f"{get_alert_prefix(reference)}-{target.id}"


def plan_alerts(reference: Reference, date=None) -> List[Alert]:
    """
    Plans one alert per target that is not reached yet.

    Every pending target gets its own alert, not only the closest one.
    Targets that are already reached, or that would fire at ``date`` or
    before, are skipped.

    Args:
        reference: the reference
        date: the date the alerts are planned at, defaults to now

    Returns:
        the alerts, in the order of the reference target list
    """
    if date is None:
        date = get_now()
    date = convert_to_datetime(date)

    alerts = []
    for p in get_pending_targets(reference, date):
        if p.date <= date:
            continue
        activity = ALERT_ACTIVITY_FORMAT.format(p.target.target_activity)
        alerts.append(
            Alert(
                identifier=get_alert_identifier(reference, p.target),
                title=f"Target Reached: {p.target.name}",
                body=f"{reference.isotope.symbol} has decayed to {activity} {p.target.unit.label}.",
                fire_date=p.date,
                target_id=p.target.id,
            )
        )
    return alerts
