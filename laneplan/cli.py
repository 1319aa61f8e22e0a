"""Command line entry: run one of the straight-road planning scenes."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from enum import IntEnum

from laneplan.render import Canvas, PygameCanvas
from laneplan.scene_base import SceneBase
from laneplan.scenes import (
    StraightCrosswalk,
    StraightFollow,
    StraightStation,
    StraightStopOBS,
)


class PlanType(IntEnum):
    STRAIGHT_STOP_OBS = 0
    STRAIGHT_STATION = 1
    STRAIGHT_FOLLOW = 2
    STRAIGHT_CROSSWALK = 3


_SCENES: dict[PlanType, type[SceneBase]] = {
    PlanType.STRAIGHT_STOP_OBS: StraightStopOBS,
    PlanType.STRAIGHT_STATION: StraightStation,
    PlanType.STRAIGHT_FOLLOW: StraightFollow,
    PlanType.STRAIGHT_CROSSWALK: StraightCrosswalk,
}

_NAMES = {
    "stop-obs": PlanType.STRAIGHT_STOP_OBS,
    "station": PlanType.STRAIGHT_STATION,
    "follow": PlanType.STRAIGHT_FOLLOW,
    "crosswalk": PlanType.STRAIGHT_CROSSWALK,
}


def process(plan_type: PlanType | int, canvas: Canvas | None = None,
            pause: Callable[[], object] | None = None) -> bool:
    """Build the scene of the given type and run its planning."""
    try:
        kind = PlanType(plan_type)
    except ValueError:
        raise ValueError("plan type is not right!") from None
    scene = _SCENES[kind](canvas, pause)
    return scene.planning_process()


def _pause() -> None:
    input("Press Enter to continue . . .")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="laneplan",
                                     description="Animate a straight-road planning scene.")
    parser.add_argument("--scene", choices=sorted(_NAMES), default="crosswalk",
                        help="scene to run (default: crosswalk)")
    parser.add_argument("--no-pause", action="store_true",
                        help="do not wait for Enter before and after the run")
    parser.add_argument("-v", "--verbose", action="store_true", help="log car state")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    pause = None if args.no_pause else _pause

    with PygameCanvas() as canvas:
        if process(_NAMES[args.scene], canvas, pause):
            print("process success!")
        if pause is not None:
            pause()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())