"""Finite-state machine bookkeeping for the locomotion controller."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

import numpy as np

from quadwalk.joint_control import MotorCommand, MotorMode


class FSMStateName(Enum):
    """Controller states, each with its display label."""

    INVALID = "invalid"
    PASSIVE = "passive"
    FIXEDSTAND = "fixed stand"
    FREESTAND = "free stand"
    TROTTING = "trotting"
    MOVE_BASE = "move_base"
    BALANCETEST = "balanceTest"
    SWINGTEST = "swingTest"
    STEPTEST = "stepTest"

    @property
    def label(self) -> str:
        """Human-readable name of the state."""
        return self.value


class UserCommand(Enum):
    """Button combinations on the operator's controller."""

    NONE = "none"
    START = "start"
    L2_A = "l2_a"
    L2_B = "l2_b"
    L2_X = "l2_x"
    L2_Y = "l2_y"
    L1_X = "l1_x"
    L1_A = "l1_a"
    L1_Y = "l1_y"


class FSMMode(Enum):
    """Whether the machine runs a state or is switching between two."""

    NORMAL = "normal"
    CHANGE = "change"


class CtrlPlatform(Enum):
    """Where the controller runs."""

    GAZEBO = "gazebo"
    REALROBOT = "realrobot"


_S = FSMStateName
_U = UserCommand

_TEST_EXITS = {_U.L2_B: _S.PASSIVE, _U.L2_A: _S.FIXEDSTAND}


class TransitionTable:
    """Which state follows a state for a given user command."""

    def __init__(self, move_base: bool = False) -> None:
        self.move_base = bool(move_base)
        fixed_stand = {
            _U.L2_B: _S.PASSIVE,
            _U.L2_X: _S.FREESTAND,
            _U.START: _S.TROTTING,
            _U.L1_X: _S.BALANCETEST,
            _U.L1_A: _S.SWINGTEST,
            _U.L1_Y: _S.STEPTEST,
        }
        if self.move_base:
            fixed_stand[_U.L2_Y] = _S.MOVE_BASE
        table = {
            _S.PASSIVE: {_U.L2_A: _S.FIXEDSTAND},
            _S.FIXEDSTAND: fixed_stand,
            _S.FREESTAND: {
                _U.L2_A: _S.FIXEDSTAND,
                _U.L2_B: _S.PASSIVE,
                _U.START: _S.TROTTING,
            },
            _S.TROTTING: dict(_TEST_EXITS),
            _S.BALANCETEST: dict(_TEST_EXITS),
            _S.SWINGTEST: dict(_TEST_EXITS),
            _S.STEPTEST: dict(_TEST_EXITS),
        }
        if self.move_base:
            table[_S.MOVE_BASE] = dict(_TEST_EXITS)
        self._table = MappingProxyType(
            {state: MappingProxyType(moves) for state, moves in table.items()}
        )

    @property
    def states(self) -> frozenset[FSMStateName]:
        """States the machine can be in."""
        return frozenset(self._table)

    def next_state(self, current: FSMStateName, command: UserCommand) -> FSMStateName:
        """The state requested from ``current`` by ``command``; unknown commands stay put."""
        try:
            moves = self._table[current]
        except KeyError:
            raise ValueError(f"{current.name} is not an available state") from None
        return moves.get(command, current)


def is_safe(rot_mat) -> bool:
    """True while the body's z axis is within 60 degrees of vertical."""
    return bool(np.asarray(rot_mat, dtype=float).reshape(3, 3)[2, 2] >= 0.5)


def passive_damping(platform: CtrlPlatform) -> list[MotorCommand]:
    """Motor commands for the passive state: pure damping on all twelve joints."""
    if platform is CtrlPlatform.GAZEBO:
        kd = 8.0
    elif platform is CtrlPlatform.REALROBOT:
        kd = 3.0
    else:
        raise ValueError(f"unknown control platform: {platform!r}")
    return [
        MotorCommand(mode=MotorMode.PMSM, q=0.0, dq=0.0, tau=0.0, kp=0.0, kd=kd)
        for _ in range(12)
    ]


def fixed_stand_targets(start, target, percent: float) -> np.ndarray:
    """Joint targets blended from ``start`` to ``target``; ``percent`` is capped at 1."""
    start_arr = np.asarray(start, dtype=float).reshape(12)
    target_arr = np.asarray(target, dtype=float).reshape(12)
    p = min(float(percent), 1.0)
    return (1.0 - p) * start_arr + p * target_arr


def inv_normalize(
    value: float,
    min_out: float,
    max_out: float,
    min_in: float = -1.0,
    max_in: float = 1.0,
) -> float:
    """Map ``value`` linearly from [min_in, max_in] onto [min_out, max_out]."""
    if max_in == min_in:
        raise ValueError("the input range must not be empty")
    return (value - min_in) * (max_out - min_out) / (max_in - min_in) + min_out