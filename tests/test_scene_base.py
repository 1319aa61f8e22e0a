import pytest

from laneplan.car import CarNormal
from laneplan.render import Canvas, Color, ShapeKind
from laneplan.road import RoadNormal
from laneplan.scene_base import SceneBase


class _Scene(SceneBase):
    def __init__(self):
        super().__init__(RoadNormal(), CarNormal(600.0, 1130.0), Canvas())
        self.obs_steps = 0

    def obs_move_step(self):
        self.obs_steps += 1

    def planning_process(self):
        return True


def test_in_memory_canvas_is_not_realtime():
    scene = _Scene()
    SceneBase.show_scene(scene)
    assert scene.realtime is False
    assert scene.canvas.frames == 1


def test_scene_base_is_abstract():
    with pytest.raises(TypeError):
        SceneBase(RoadNormal(), CarNormal(600.0, 1130.0))


def test_show_scene_draws_car_outline_and_presents():
    scene = _Scene()
    SceneBase.show_scene(scene)
    assert scene.canvas.frames == 1
    endpoints = {(s.coords[0], s.coords[1]) for s in scene.canvas.shapes
                 if s.kind is ShapeKind.LINE}
    for corner in scene.car.corners:
        assert (corner.x, corner.y) in endpoints
    assert all(s.color is Color.BLACK for s in scene.canvas.shapes)


def test_show_scene_clears_previous_frame():
    scene = _Scene()
    SceneBase.show_scene(scene)
    first = len(scene.canvas.shapes)
    SceneBase.show_scene(scene)
    assert len(scene.canvas.shapes) == first
    assert scene.canvas.frames == 2


def test_uniform_straight_covers_distance():
    scene = _Scene()
    scene.car.speed = -3.0
    start = scene.car.pmid.y
    SceneBase.uniform_straight(scene, 30.0)
    assert scene.car.pmid.y == pytest.approx(start - 30.0)
    assert scene.obs_steps == 10
    assert scene.canvas.frames == scene.obs_steps
    assert scene.car.p_center is None


def test_uniform_straight_rejects_zero_speed():
    scene = _Scene()
    with pytest.raises(ValueError):
        SceneBase.uniform_straight(scene, 10.0)


def test_uniform_acc_by_speed_stops():
    scene = _Scene()
    scene.car.speed_y = -2.0
    scene.car.a_y = 0.5
    start = scene.car.pmid.y
    SceneBase.uniform_acc_by_speed(scene, 0.0)
    assert scene.car.speed_y == 0.0
    assert scene.car.a_y == 0.0
    assert scene.canvas.frames == 3
    assert start - scene.car.pmid.y == pytest.approx(5.0)


def test_uniform_acc_by_dis_stops_near_distance():
    scene = _Scene()
    scene.car.speed_y = -5.0
    start = scene.car.pmid.y
    SceneBase.uniform_acc_by_dis(scene, 100.0, 0.0)
    assert scene.car.speed_y == 0.0
    assert abs((start - scene.car.pmid.y) - 100.0) < 5.0


def test_uniform_acc_by_dis_zero_distance():
    scene = _Scene()
    scene.car.speed_y = -5.0
    with pytest.raises(ZeroDivisionError):
        SceneBase.uniform_acc_by_dis(scene, 0.0, 0.0)


def test_uniform_acc_by_time_reaches_target():
    scene = _Scene()
    SceneBase.uniform_acc_by_time(scene, scene.speed_limit, 2.0)
    assert scene.car.speed_y == scene.speed_limit
    assert scene.car.a_y == 0.0
    assert scene.car.pmidr.y <= 0.0