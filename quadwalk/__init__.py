"""Low-pass filtering, joint servo shaping, state-machine logic and trotting commands for quadruped control."""

__version__ = "0.1.0"

__all__ = [
    "lowpass",
    "joint_control",
    "fsm",
    "trotting",
]