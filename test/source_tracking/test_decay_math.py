import pytest
import numpy as np

from decay_toolbox.source_tracking import decay_math
from decay_toolbox.source_tracking.decay_math import ActivityUnit
from decay_toolbox.source_tracking.settings import ureg

all_units = list(ActivityUnit)


@pytest.mark.parametrize("from_unit", all_units)
@pytest.mark.parametrize("to_unit", all_units)
@pytest.mark.parametrize("value", [0.0, 1e-3, 1.0, 42.5, 3.7e7])
def test_convert_round_trip(from_unit, to_unit, value):
    converted = decay_math.convert(value, from_unit, to_unit)
    back = decay_math.convert(converted, to_unit, from_unit)
    assert np.isclose(back, value, rtol=1e-9, atol=0)


@pytest.mark.parametrize("unit", all_units)
@pytest.mark.parametrize("value", [0.0, 0.1, 123.456789, 1e12])
def test_convert_same_unit_is_identity(unit, value):
    assert decay_math.convert(value, unit, unit) == value


def test_convert_mci_to_mbq():
    assert decay_math.convert(100, ActivityUnit.mCi, ActivityUnit.MBq) == 3700.0


def test_convert_mbq_to_mci():
    assert np.isclose(decay_math.convert(3700, ActivityUnit.MBq, ActivityUnit.mCi), 100)


@pytest.mark.parametrize("unit", all_units)
def test_factors_are_positive(unit):
    assert unit.factor > 0


@pytest.mark.parametrize("unit", all_units)
def test_factors_agree_with_pint(unit):
    """
    The fixed conversion factors should be the same as the ones
    pint derives from the definition of the curie and becquerel
    """
    quantity = unit.to_quantity(1.0)
    assert np.isclose(quantity.to(ureg.MBq).magnitude, unit.factor, rtol=1e-12)


@pytest.mark.parametrize("A0", [1.0, 100.0, 5e4])
@pytest.mark.parametrize("half_life", [60.0, 21624.0, 8.02 * 86400])
def test_activity_at_one_half_life(A0, half_life):
    computed = decay_math.activity_at(A0, half_life, half_life)
    assert np.isclose(computed, A0 / 2, rtol=1e-9, atol=0)


def test_activity_at_technetium():
    # BUILD
    A0 = 100
    half_life = 21624  # s, Tc-99m

    # RUN
    computed = decay_math.activity_at(A0, half_life, elapsed_seconds=21624)

    # TEST
    assert np.isclose(computed, 50.0)


@pytest.mark.parametrize("n_half_lives", [0, 1, 2, 3, 4, 5])
def test_activity_at_n_half_lives(n_half_lives):
    half_life = 10 * 24 * 3600
    activity = 500
    computed = decay_math.activity_at(activity, half_life, n_half_lives * half_life)
    assert np.isclose(computed, activity / 2**n_half_lives, rtol=1e-9)


def test_activity_is_monotonically_decreasing():
    times = np.linspace(-1e5, 1e5, num=200)
    activities = decay_math.activity_at(100.0, 3600.0, times)
    assert np.all(np.diff(activities) < 0)


def test_activity_in_the_past_is_higher():
    assert decay_math.activity_at(10.0, 3600.0, -3600.0) == pytest.approx(20.0)


@pytest.mark.parametrize("elapsed", [-1e6, 0, 1, 1e6])
def test_zero_activity_stays_zero(elapsed):
    assert decay_math.activity_at(0.0, 3600.0, elapsed) == 0


@pytest.mark.parametrize("A0", [0.5, 100.0, 2e6])
@pytest.mark.parametrize("half_life", [109.77 * 60, 6.647 * 86400])
@pytest.mark.parametrize("t", [-5e5, -10.0, 0.0, 3600.0, 2e6])
def test_initial_activity_is_inverse_of_activity_at(A0, half_life, t):
    remaining = decay_math.activity_at(A0, half_life, t)
    computed = decay_math.initial_activity_for(remaining, half_life, t)
    assert np.isclose(computed, A0, rtol=1e-6, atol=0)


def test_initial_activity_negative_duration():
    required = decay_math.initial_activity_for(10.0, 3600.0, -3600.0)
    assert required == pytest.approx(5.0)


@pytest.mark.parametrize("A0", [1.0, 100.0, 3.7e4])
@pytest.mark.parametrize("fraction", [0.999, 0.5, 0.1, 1e-6])
@pytest.mark.parametrize("half_life", [67.71 * 60, 72.91 * 3600])
def test_time_to_reach_round_trip(A0, fraction, half_life):
    target = A0 * fraction
    seconds = decay_math.time_to_reach(A0, target, half_life)
    assert seconds > 0
    computed = decay_math.activity_at(A0, half_life, seconds)
    assert np.isclose(computed, target, rtol=1e-6, atol=0)


def test_time_to_reach_one_half_life():
    half_life = 21624.0
    assert np.isclose(decay_math.time_to_reach(100, 50, half_life), half_life)


def test_time_to_reach_target_above_current_is_negative():
    """A target higher than the current activity was reached in the past"""
    seconds = decay_math.time_to_reach(50, 100, 3600.0)
    assert np.isclose(seconds, -3600.0)


@pytest.mark.parametrize(
    "current, target",
    [(0, 10), (10, 0), (-1, 10), (10, -1), (0, 0), (-5, -5)],
)
def test_time_to_reach_non_positive_activity_returns_zero(current, target):
    assert decay_math.time_to_reach(current, target, 3600.0) == 0


def test_decay_factor():
    assert np.isclose(decay_math.get_decay_factor(3600.0, 7200.0), 0.25)


def test_decay_constant_uses_fixed_ln2():
    assert decay_math.get_decay_constant(1.0) == 0.69314718056
