from dataclasses import dataclass
from typing import List, Optional
import datetime
import numpy as np
import pandas as pd

from .settings import WIDGET_TIMELINE_MINUTES
from .decay_math import activity_at
from .calculations import convert_to_datetime, delay_time, get_now
from .reference import Reference
from .targets import find_next_target


@dataclass
class LiveState:
    """What the live activity shows for a reference at a given date"""

    date: datetime.datetime
    current_activity: float
    unit: str
    isotope_name: str
    isotope_symbol: str
    reference_name: str
    next_target_name: Optional[str] = None
    next_target_activity: Optional[float] = None
    next_target_date: Optional[datetime.datetime] = None


def find_pinned_reference(references: List[Reference]) -> Optional[Reference]:
    for reference in references:
        if reference.is_pinned:
            return reference
    return None


def find_live_reference(references: List[Reference]) -> Optional[Reference]:
    for reference in references:
        if reference.is_live:
            return reference
    return None


def get_activity_timeline(
    reference: Reference, start=None, minutes: int = WIDGET_TIMELINE_MINUTES
) -> pd.DataFrame:
    """
    Computes the activity of a reference every minute, starting at ``start``.

    Args:
        reference: the reference
        start: date of the first entry, defaults to now
        minutes: number of entries

    Returns:
        a DataFrame with columns "date" and "activity" (in the reference unit)
    """
    if start is None:
        start = get_now()
    start = convert_to_datetime(start)

    offsets = 60.0 * np.arange(minutes)
    elapsed = delay_time(reference.calibration_date, start) + offsets
    activities = activity_at(
        reference.calibration_activity, reference.isotope.half_life, elapsed
    )
    dates = pd.date_range(start=start, periods=minutes, freq="min")
    return pd.DataFrame({"date": dates, "activity": activities})


def get_live_state(reference: Reference, date=None) -> LiveState:
    """Current activity of a reference and the closest target it will reach"""
    if date is None:
        date = get_now()
    date = convert_to_datetime(date)

    next_target = find_next_target(reference, date)
    return LiveState(
        date=date,
        current_activity=reference.get_current_activity(date),
        unit=reference.unit.label,
        isotope_name=reference.isotope.name,
        isotope_symbol=reference.isotope.symbol,
        reference_name=reference.reference_name,
        next_target_name=next_target.name,
        next_target_activity=next_target.activity,
        next_target_date=next_target.date,
    )
