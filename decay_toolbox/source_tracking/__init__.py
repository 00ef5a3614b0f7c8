from . import settings, decay_math, calculations
from .decay_math import (
    ActivityUnit,
    convert,
    activity_at,
    initial_activity_for,
    time_to_reach,
)
from .isotopes import Isotope, IsotopeLibrary, DEFAULT_ISOTOPES
from .reference import Reference, Target
from .targets import NextTarget, NO_TARGET, find_next_target, get_pending_targets

from . import schedule, timeline
