"""Single-joint servo command shaping for a legged-robot motor controller."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import IntEnum

import numpy as np

POS_STOP_F = 2.146e9
"""Position target that switches position control off."""

VEL_STOP_F = 16000.0
"""Velocity target that switches velocity control off."""

_STOP_TOLERANCE = 0.00001
_BRAKE_VEL_STIFFNESS = 20.0


class MotorMode(IntEnum):
    """Motor operating modes understood by the joint controller."""

    BRAKE = 0x00
    PMSM = 0x0A


@dataclass
class MotorCommand:
    """A command for one motor as received from a higher-level controller."""

    mode: int = MotorMode.BRAKE
    q: float = 0.0
    dq: float = 0.0
    tau: float = 0.0
    kp: float = 0.0
    kd: float = 0.0


@dataclass
class MotorState:
    """Reported state of one motor."""

    q: float = 0.0
    dq: float = 0.0
    tau_est: float = 0.0


@dataclass(frozen=True)
class ServoCommand:
    """Limited targets and gains handed to the joint's torque law."""

    mode: int = 0
    pos: float = 0.0
    pos_stiffness: float = 0.0
    vel: float = 0.0
    vel_stiffness: float = 0.0
    torque: float = 0.0


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit ``value`` to the closed range [lower, upper]; clamp(1.5, -1, 1) == 1."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


@dataclass(frozen=True)
class JointLimits:
    """Position, velocity and effort limits of one joint."""

    lower: float
    upper: float
    velocity: float
    effort: float

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(
                f"lower position limit {self.lower} exceeds upper limit {self.upper}"
            )
        if self.velocity < 0 or self.effort < 0:
            raise ValueError("velocity and effort limits must not be negative")

    def clamp_position(self, position: float) -> float:
        """Limit a position to [lower, upper]."""
        return clamp(position, self.lower, self.upper)

    def clamp_velocity(self, velocity: float) -> float:
        """Limit a velocity to [-velocity, velocity]."""
        return clamp(velocity, -self.velocity, self.velocity)

    def clamp_effort(self, effort: float) -> float:
        """Limit an effort to [-effort, effort]."""
        return clamp(effort, -self.effort, self.effort)


def _is_stop(value: float, stop: float) -> bool:
    # Message fields and stop markers are single precision.
    diff = float(np.float32(value)) - float(np.float32(stop))
    return math.fabs(diff) < _STOP_TOLERANCE


def servo_command(
    command: MotorCommand,
    limits: JointLimits,
    previous: ServoCommand | None = None,
) -> ServoCommand:
    """Turn a motor command into a limited servo command.

    In PMSM mode the targets are clamped to the joint limits, and the stop
    markers zero the matching stiffness. In BRAKE mode the joint is damped.
    Any other mode leaves ``previous`` unchanged.
    """
    if previous is None:
        previous = ServoCommand()

    if command.mode == MotorMode.PMSM:
        pos_stiffness = 0.0 if _is_stop(command.q, POS_STOP_F) else float(command.kp)
        vel_stiffness = 0.0 if _is_stop(command.dq, VEL_STOP_F) else float(command.kd)
        return replace(
            previous,
            pos=limits.clamp_position(float(command.q)),
            pos_stiffness=pos_stiffness,
            vel=limits.clamp_velocity(float(command.dq)),
            vel_stiffness=vel_stiffness,
            torque=limits.clamp_effort(float(command.tau)),
        )

    if command.mode == MotorMode.BRAKE:
        return replace(
            previous,
            pos_stiffness=0.0,
            vel=0.0,
            vel_stiffness=_BRAKE_VEL_STIFFNESS,
            torque=limits.clamp_effort(0.0),
        )

    return previous