# quadwalk

Control logic for a four-legged walking robot: a first-order low-pass
filter, single-joint servo command shaping with joint limits, the
operating-mode state machine with its helpers, and the velocity and yaw
command used while trotting. Everything is plain Python on top of numpy.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `quadwalk.lowpass`

`LowPassFilter(sample_period, cut_frequency)` smooths a scalar signal.
`add_value(x)` feeds one sample (the first sample after creation or after
`clear()` seeds the filter), and the `value` property holds the filtered
result. The smoothing factor is available as `weight`.

### `quadwalk.joint_control`

- `MotorMode` – `PMSM` (0x0A) and `BRAKE` (0x00).
- `MotorCommand` – `mode`, `q`, `dq`, `tau`, `kp`, `kd` for one motor.
- `MotorState` – `q`, `dq`, `tau_est`.
- `ServoCommand` – frozen record of `mode`, `pos`, `pos_stiffness`, `vel`,
  `vel_stiffness`, `torque`.
- `JointLimits(lower, upper, velocity, effort)` – rejects a lower limit above
  the upper one and negative velocity or effort limits (`ValueError`);
  `clamp_position`, `clamp_velocity` and `clamp_effort` apply the limits.
- `clamp(value, lower, upper)` – limits a value to a closed range.
- `servo_command(command, limits, previous=None)` – in `PMSM` mode clamps
  position, velocity and torque to the limits, and zeroes the position or
  velocity stiffness when the target equals the stop marker `POS_STOP_F` or
  `VEL_STOP_F`; in `BRAKE` mode returns a damping command (velocity 0,
  velocity stiffness 20, torque 0); any other mode returns `previous`
  unchanged.

```python
from quadwalk.joint_control import JointLimits, MotorCommand, MotorMode, servo_command

limits = JointLimits(lower=-0.863, upper=0.863, velocity=30.1, effort=23.7)
cmd = MotorCommand(mode=MotorMode.PMSM, q=1.2, kp=20.0, kd=1.0, tau=30.0)
servo = servo_command(cmd, limits)
# servo.pos == 0.863, servo.torque == 23.7
```

### `quadwalk.fsm`

- `FSMStateName` – the controller states (passive, fixed stand, free stand,
  trotting, move_base, balance/swing/step tests, invalid); `label` gives the
  display name.
- `UserCommand` – operator button combinations (`START`, `L2_A`, `L2_B`, ...).
- `FSMMode` and `CtrlPlatform` – normal/change mode and simulation/real robot.
- `TransitionTable(move_base=False)` – `next_state(current, command)` returns
  the state a command leads to, or `current` if the command does nothing
  there; asking from a state that is not available raises `ValueError`.
  With `move_base=True`, `L2_Y` from fixed stand leads to `MOVE_BASE`.
  `states` lists the available states.
- `is_safe(rot_mat)` – true while the body's z axis is within 60 degrees of
  vertical.
- `passive_damping(platform)` – twelve damping-only motor commands
  (`kd` 8 in simulation, 3 on the real robot).
- `fixed_stand_targets(start, target, percent)` – blends twelve joint angles,
  with `percent` capped at 1.
- `inv_normalize(value, min_out, max_out, min_in=-1, max_in=1)` – linear
  mapping from one range onto another.

```python
from quadwalk.fsm import FSMStateName, TransitionTable, UserCommand

table = TransitionTable(move_base=False)
table.next_state(FSMStateName.PASSIVE, UserCommand.L2_A)  # FSMStateName.FIXEDSTAND
```

### `quadwalk.trotting`

- `TrottingCommand(vx_limit, vy_limit, wyaw_limit, dt)` – `from_user(lx, ly, rx)`
  scales stick values in [-1, 1] to body velocity and a smoothed yaw rate and
  returns `(v_cmd_body, dyaw_cmd)`; `set_high_cmd(vx, vy, wz)` sets a body
  twist directly; `advance_yaw(yaw_cmd)` integrates the yaw over one period.
- `saturation(value, lower, upper)` – clamps to the range between two bounds.
- `step_needed(v_cmd_body, pos_error, vel_error, dyaw_cmd)` – whether the legs
  should step rather than all stand.
- `limit_body_accel(dd_pcd, dw_bd)` – clamps desired linear acceleration to
  ±3, ±3, ±5 and angular acceleration to ±40, ±40, ±10.

## What this package does not do

It holds no leg or whole-body kinematics (no forward or inverse kinematics,
Jacobians or joint torques from foot forces), no robot models, no timing of
leg contact and phase, no foothold placement or swing trajectories, and no
balance force distribution. It does not talk to hardware, simulators or
messaging middleware, and it has no command-line program: it is a library
of the pieces listed above.