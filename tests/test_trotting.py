import numpy as np
import pytest

from quadwalk.trotting import (
    TrottingCommand,
    limit_body_accel,
    saturation,
    step_needed,
)


@pytest.fixture
def command():
    return TrottingCommand((-0.4, 0.4), (-0.3, 0.3), (-0.5, 0.5), 0.002)


@pytest.mark.parametrize(
    "value, lower, upper, expected",
    [
        (0.5, -1.0, 1.0, 0.5),
        (1.5, -1.0, 1.0, 1.0),
        (-2.0, -1.0, 1.0, -1.0),
        (1.5, 1.0, -1.0, 1.0),
        (-2.0, 1.0, -1.0, -1.0),
    ],
)
def test_saturation(value, lower, upper, expected):
    assert saturation(value, lower, upper) == expected


def test_step_not_needed_at_rest():
    assert step_needed([0, 0, 0], [0, 0, 0], [0, 0, 0], 0.0) is False


@pytest.mark.parametrize(
    "v, p, e, w",
    [
        ([0.04, 0, 0], [0, 0, 0], [0, 0, 0], 0.0),
        ([0, -0.04, 0], [0, 0, 0], [0, 0, 0], 0.0),
        ([0, 0, 0], [0.09, 0, 0], [0, 0, 0], 0.0),
        ([0, 0, 0], [0, -0.09, 0], [0, 0, 0], 0.0),
        ([0, 0, 0], [0, 0, 0], [0.06, 0, 0], 0.0),
        ([0, 0, 0], [0, 0, 0], [0, -0.06, 0], 0.0),
        ([0, 0, 0], [0, 0, 0], [0, 0, 0], -0.25),
    ],
)
def test_step_needed_triggers(v, p, e, w):
    assert step_needed(v, p, e, w) is True


def test_step_ignores_vertical_components():
    assert step_needed([0, 0, 5], [0, 0, 5], [0, 0, 5], 0.1) is False


def test_limit_body_accel_clamps_each_axis():
    linear, angular = limit_body_accel([10, -10, 10], [100, -100, 100])
    assert np.allclose(linear, [3, -3, 5])
    assert np.allclose(angular, [40, -40, 10])


def test_limit_body_accel_passes_small_values():
    linear, angular = limit_body_accel([1, -2, 4], [30, -5, 9])
    assert np.allclose(linear, [1, -2, 4])
    assert np.allclose(angular, [30, -5, 9])


def test_from_user_centred_sticks_give_zero(command):
    v, w = command.from_user(0.0, 0.0, 0.0)
    assert np.allclose(v, [0, 0, 0])
    assert w == 0.0


def test_from_user_full_sticks_reach_limits(command):
    v, _ = command.from_user(1.0, 1.0, 0.0)
    assert v[0] == pytest.approx(0.4)
    assert v[1] == pytest.approx(-0.3)
    assert v[2] == 0.0


def test_from_user_yaw_rate_is_smoothed(command):
    _, first = command.from_user(0.0, 0.0, 1.0)
    assert -0.5 < first < 0.0
    rates = [command.from_user(0.0, 0.0, 1.0)[1] for _ in range(200)]
    assert all(b < a for a, b in zip([first] + rates, rates))
    assert rates[-1] == pytest.approx(-0.5, abs=1e-6)
    assert command.dyaw_cmd == rates[-1]


def test_set_high_cmd_is_not_smoothed(command):
    command.set_high_cmd(0.2, -0.1, 0.3)
    assert np.allclose(command.v_cmd_body, [0.2, -0.1, 0.0])
    assert command.dyaw_cmd == 0.3


def test_advance_yaw(command):
    command.set_high_cmd(0.0, 0.0, 0.0)
    assert command.advance_yaw(1.0) == 1.0
    command.set_high_cmd(0.0, 0.0, 0.5)
    assert command.advance_yaw(1.0) == pytest.approx(1.001)
    command.set_high_cmd(0.0, 0.0, -0.5)
    assert command.advance_yaw(1.0) < 1.0