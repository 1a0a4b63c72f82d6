"""Velocity command handling for the trotting gait."""

from __future__ import annotations

import math

import numpy as np

from quadwalk.fsm import inv_normalize

_YAW_RATE_SMOOTHING = 0.9

_STEP_VEL_CMD = 0.03
_STEP_POS_ERROR = 0.08
_STEP_VEL_ERROR = 0.05
_STEP_YAW_RATE = 0.20

_LINEAR_ACCEL_LIMITS = ((-3.0, 3.0), (-3.0, 3.0), (-5.0, 5.0))
_ANGULAR_ACCEL_LIMITS = ((-40.0, 40.0), (-40.0, 40.0), (-10.0, 10.0))


def saturation(value: float, lower: float, upper: float) -> float:
    """Limit ``value`` to the range spanned by the two bounds, in either order."""
    low, high = (lower, upper) if lower <= upper else (upper, lower)
    if value < low:
        return low
    if value > high:
        return high
    return value


def step_needed(v_cmd_body, pos_error, vel_error, dyaw_cmd: float) -> bool:
    """True when the commands or tracking errors are large enough to require stepping."""
    v = np.asarray(v_cmd_body, dtype=float).reshape(-1)
    p = np.asarray(pos_error, dtype=float).reshape(-1)
    e = np.asarray(vel_error, dtype=float).reshape(-1)
    return bool(
        math.fabs(v[0]) > _STEP_VEL_CMD
        or math.fabs(v[1]) > _STEP_VEL_CMD
        or math.fabs(p[0]) > _STEP_POS_ERROR
        or math.fabs(p[1]) > _STEP_POS_ERROR
        or math.fabs(e[0]) > _STEP_VEL_ERROR
        or math.fabs(e[1]) > _STEP_VEL_ERROR
        or math.fabs(dyaw_cmd) > _STEP_YAW_RATE
    )


def limit_body_accel(dd_pcd, dw_bd) -> tuple[np.ndarray, np.ndarray]:
    """Clamp the desired linear and angular body accelerations, axis by axis."""
    linear = np.asarray(dd_pcd, dtype=float).reshape(3)
    angular = np.asarray(dw_bd, dtype=float).reshape(3)
    limited_linear = np.array(
        [saturation(float(a), lo, hi) for a, (lo, hi) in zip(linear, _LINEAR_ACCEL_LIMITS)]
    )
    limited_angular = np.array(
        [saturation(float(a), lo, hi) for a, (lo, hi) in zip(angular, _ANGULAR_ACCEL_LIMITS)]
    )
    return limited_linear, limited_angular


class TrottingCommand:
    """Body velocity and yaw-rate command for trotting.

    Commands come either from the operator's sticks (scaled to the robot's
    velocity limits, with the yaw rate smoothed) or directly as a body twist.
    """

    def __init__(self, vx_limit, vy_limit, wyaw_limit, dt: float) -> None:
        self.vx_limit = tuple(float(v) for v in np.asarray(vx_limit, dtype=float).reshape(2))
        self.vy_limit = tuple(float(v) for v in np.asarray(vy_limit, dtype=float).reshape(2))
        self.wyaw_limit = tuple(
            float(v) for v in np.asarray(wyaw_limit, dtype=float).reshape(2)
        )
        self.dt = float(dt)
        self.v_cmd_body = np.zeros(3)
        self.dyaw_cmd = 0.0
        self._dyaw_cmd_past = 0.0

    def set_high_cmd(self, vx: float, vy: float, wz: float) -> None:
        """Command a body twist directly, without smoothing."""
        self.v_cmd_body = np.array([float(vx), float(vy), 0.0])
        self.dyaw_cmd = float(wz)

    def from_user(self, lx: float, ly: float, rx: float) -> tuple[np.ndarray, float]:
        """Set the command from stick values in [-1, 1]; return ``(v_cmd_body, dyaw_cmd)``."""
        vx = inv_normalize(ly, self.vx_limit[0], self.vx_limit[1])
        vy = -inv_normalize(lx, self.vy_limit[0], self.vy_limit[1])
        self.v_cmd_body = np.array([vx, vy, 0.0])

        raw = -inv_normalize(rx, self.wyaw_limit[0], self.wyaw_limit[1])
        self.dyaw_cmd = (
            _YAW_RATE_SMOOTHING * self._dyaw_cmd_past + (1.0 - _YAW_RATE_SMOOTHING) * raw
        )
        self._dyaw_cmd_past = self.dyaw_cmd
        return self.v_cmd_body.copy(), self.dyaw_cmd

    def advance_yaw(self, yaw_cmd: float) -> float:
        """Integrate the commanded yaw over one control period."""
        return float(yaw_cmd) + self.dyaw_cmd * self.dt