from enum import Enum
import numpy as np

from .settings import ureg, LN2


class ActivityUnit(Enum):
    """Units of radioactivity.

    The value of each member is its display label, which is also a unit
    string understood by pint.
    """

    Ci = "Ci"
    mCi = "mCi"
    uCi = "uCi"
    GBq = "GBq"
    MBq = "MBq"
    kBq = "kBq"
    Bq = "Bq"

    @property
    def label(self) -> str:
        return self.value

    @property
    def factor(self) -> float:
        """Number of MBq in one of this unit."""
        return MBQ_PER_UNIT[self]

    def to_quantity(self, value) -> ureg.Quantity:
        """Returns ``value`` expressed in this unit as a pint.Quantity"""
        return ureg.Quantity(value, self.value)


# conversion factors to the canonical unit (MBq)
MBQ_PER_UNIT = {
    ActivityUnit.Ci: 37000.0,
    ActivityUnit.mCi: 37.0,
    ActivityUnit.uCi: 0.037,
    ActivityUnit.GBq: 1000.0,
    ActivityUnit.MBq: 1.0,
    ActivityUnit.kBq: 1e-3,
    ActivityUnit.Bq: 1e-6,
}


def convert(value: float, from_unit: ActivityUnit, to_unit: ActivityUnit) -> float:
    """Converts an activity from one unit to another through MBq.

    Args:
        value: the activity expressed in ``from_unit``
        from_unit: unit of ``value``
        to_unit: unit to convert to

    Returns:
        the activity expressed in ``to_unit``. If both units are the same,
        ``value`` is returned untouched.
    """
    if from_unit == to_unit:
        return value
    return value * from_unit.factor / to_unit.factor


def get_decay_constant(half_life: float) -> float:
    """Returns the decay constant (in 1/s) for a half-life in seconds"""
    return LN2 / half_life


def activity_at(A0, half_life: float, elapsed_seconds):
    """
    Calculates the activity of a source after some time.

    .. math:: A(t) = A_0 e^{-\\lambda t}

    where :math:`\\lambda = \\ln 2 / T_{1/2}`.

    Args:
        A0: activity at the calibration time (any unit)
        half_life: half-life in seconds, must be strictly positive
            (not checked)
        elapsed_seconds: time since calibration in seconds, can be negative
            or a numpy array

    Returns:
        the activity in the same unit as ``A0``
    """
    decay_constant = get_decay_constant(half_life)
    return A0 * np.exp(-decay_constant * elapsed_seconds)


def initial_activity_for(target_activity, half_life: float, duration_seconds):
    """
    Calculates the activity needed now to have ``target_activity``
    left after ``duration_seconds``.

    .. math:: A_0 = A_{target} e^{\\lambda t}

    A negative duration (target time before the start) gives a value lower
    than ``target_activity``.
    """
    decay_constant = get_decay_constant(half_life)
    return target_activity * np.exp(decay_constant * duration_seconds)


def time_to_reach(
    current_activity: float, target_activity: float, half_life: float
) -> float:
    """
    Calculates the time needed for a source to decay from
    ``current_activity`` down to ``target_activity``.

    .. math:: t = -\\frac{\\ln(A_{target} / A_{current})}{\\lambda}

    Both activities have to be in the same unit.

    Args:
        current_activity: the activity now
        target_activity: the activity to reach
        half_life: half-life in seconds

    Returns:
        the time in seconds. A negative value means the target activity
        was already reached in the past. 0 is returned if one of the
        activities is not strictly positive.
    """
    if current_activity <= 0 or target_activity <= 0:
        return 0.0
    decay_constant = get_decay_constant(half_life)
    return -np.log(target_activity / current_activity) / decay_constant


def get_decay_factor(half_life: float, elapsed_seconds):
    """Returns the fraction of activity left after ``elapsed_seconds``"""
    return activity_at(1.0, half_life, elapsed_seconds)
