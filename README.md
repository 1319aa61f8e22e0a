# laneplan

Straight-lane motion planning scenes for a simulated car. A car drives up a
vertical road and adjusts its speed for each situation using uniform
acceleration profiles:

- **stop-obs**: brake so the car stops a safe distance in front of a cone.
- **station**: slow down to a stop at a station, wait, then accelerate to
  the road's speed limit.
- **follow**: close in on a slower car ahead and match its speed at a safe
  following distance.
- **crosswalk**: slow down ahead of a pedestrian crossing, stop while people
  are on it, cross at a reduced speed, then speed up again.

## Installation

```
pip install .
```

## Running a scene

```
laneplan
```

With no arguments the crosswalk scene runs in a pygame window, waiting for
Enter before the run starts and again after it ends. Options:

- `--scene {crosswalk,follow,station,stop-obs}`: which scene to run.
- `--no-pause`: do not wait for Enter.
- `-v`, `--verbose`: log the car's state while it drives.

On success the command prints `process success!`.

## Using the library

The scenes live in `laneplan.scenes`: `StraightStopOBS`, `StraightStation`,
`StraightFollow` and `StraightCrosswalk`. Each takes an optional canvas, an
optional `pause` callable (called once after the first frame is drawn) and
an optional `realtime` flag. `planning_process()` runs the whole manoeuvre
and returns whether it was carried out; `StraightFollow` returns `False`
when the car ahead is already too close or pulling away faster.

`laneplan.cli.process` picks a scene by `PlanType` and runs it:

```python
from laneplan.cli import PlanType, process
from laneplan.render import Canvas

canvas = Canvas()
ok = process(PlanType.STRAIGHT_FOLLOW, canvas)
print(ok, canvas.frames)
```

An unknown plan type raises `ValueError`.

`laneplan.render.Canvas` opens no window: it keeps the shapes of the current
frame in `shapes` and counts presented frames in `frames`, so scenes run
headless and, unless `realtime=True` is given, without frame delays.
`PygameCanvas` shows each frame in a pygame window and paces the scene in
real time; it can be used as a context manager to close the window.

The building blocks can also be used on their own:

- `laneplan.geometry.Point`: a point that moves and turns about a centre.
- `laneplan.car.CarNormal`: a rectangular car with its corner and midpoint
  points, straight-line stepping and turning about a centre.
- `laneplan.road.RoadNormal` and `RoadCrosswalk`: road layouts.
- `laneplan.traffic.Cone` and `Person`: obstacles and pedestrians.
- `laneplan.scene_base.SceneBase`: base class for scenes, with the uniform
  motion profiles `uniform_straight`, `uniform_acc_by_speed`,
  `uniform_acc_by_dis` and `uniform_acc_by_time`.

Screen coordinates have x to the right and y downwards, so a car driving up
the screen has a negative `speed_y`. Speeds and accelerations are per frame.

## Limitations

All scenes are on a straight road. Cars can turn about a centre
(`CarBase.turn_step`), but no scene steers, changes lanes or parks, and the
gear (`Shift`) is recorded but not used.

## Tests

```
pip install .[test]
pytest
```