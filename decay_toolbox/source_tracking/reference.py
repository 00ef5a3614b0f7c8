from dataclasses import dataclass, field
from typing import List, Optional
import datetime
import uuid

from .decay_math import ActivityUnit, convert, activity_at
from .calculations import convert_to_datetime, delay_time, get_now
from .isotopes import Isotope


@dataclass
class Target:
    """An activity threshold to be notified about.

    Attributes
    ----------
    name :
        Label of the target (eg. "Disposal Limit").
    target_activity :
        The activity to reach, in ``unit``.
    unit :
        Unit of ``target_activity``, can differ from the reference unit.
    """

    name: str
    target_activity: float
    unit: ActivityUnit
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def get_activity_in(self, unit: ActivityUnit) -> float:
        return convert(self.target_activity, self.unit, unit)


@dataclass
class Reference:
    """
    A calibrated source followed in real time.

    Attributes
    ----------
    isotope :
        The isotope of the source. The isotope is held by value: editing
        the isotope library afterwards does not change the reference.
    calibration_activity :
        The activity measured at ``calibration_date``, in ``unit``.
    unit :
        The unit the reference is displayed in.
    calibration_date :
        The date of the calibration. Naive datetimes, dates and strings
        are converted to timezone aware datetimes.
    reference_name :
        Optional label of the source.
    targets :
        The targets of the source, in insertion order.
    is_pinned :
        Whether the reference is shown on the home screen widget.
    is_live :
        Whether the reference is followed by the live activity.
    """

    isotope: Isotope
    calibration_activity: float
    unit: ActivityUnit
    calibration_date: datetime.datetime
    reference_name: str = ""
    targets: List[Target] = field(default_factory=list)
    is_pinned: bool = False
    is_live: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self):
        if self.calibration_activity < 0:
            raise ValueError(
                f"Calibration activity cannot be negative, got {self.calibration_activity}"
            )
        self.calibration_date = convert_to_datetime(self.calibration_date)

    def get_display_name(self) -> str:
        return self.reference_name if self.reference_name else "Unnamed Source"

    def get_elapsed_seconds(self, date=None) -> float:
        """Seconds since calibration (negative before calibration)"""
        if date is None:
            date = get_now()
        return delay_time(self.calibration_date, date)

    def get_current_activity(self, date=None) -> float:
        """
        Calculates the activity of the source at a given date.

        Args:
            date: the date, defaults to now

        Returns:
            the activity in the reference unit
        """
        return activity_at(
            self.calibration_activity,
            self.isotope.half_life,
            self.get_elapsed_seconds(date),
        )

    def change_unit(self, unit: ActivityUnit) -> None:
        """Changes the unit of the reference. The calibration activity is
        expressed in the new unit, not measured again."""
        if unit == self.unit:
            return
        self.calibration_activity = convert(self.calibration_activity, self.unit, unit)
        self.unit = unit

    def add_target(
        self, name: str, target_activity: float, unit: Optional[ActivityUnit] = None
    ) -> Target:
        """
        Adds a target at the end of the target list.

        Args:
            name: label of the target, cannot be empty
            target_activity: the activity to reach, strictly positive
            unit: unit of ``target_activity``, defaults to the reference unit

        Returns:
            the new target
        """
        if not name:
            raise ValueError("Target name cannot be empty.")
        if target_activity is None or not target_activity > 0:
            raise ValueError(f"Target activity must be strictly positive, got {target_activity}")
        if unit is None:
            unit = self.unit
        target = Target(name=name, target_activity=target_activity, unit=unit)
        self.targets.append(target)
        return target

    def remove_target(self, target_id: uuid.UUID) -> None:
        self.targets = [t for t in self.targets if t.id != target_id]
