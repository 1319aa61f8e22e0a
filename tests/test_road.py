import pytest

from laneplan.render import SHEIGHT, SWIDTH, Canvas, ShapeKind
from laneplan.road import RoadBase, RoadCrosswalk, RoadNormal


def test_road_base_is_abstract():
    with pytest.raises(TypeError):
        RoadBase()


@pytest.mark.parametrize("width", [200.0, 100.0])
def test_normal_road_centred(width):
    road = RoadNormal(width)
    assert road.right_boundary - road.left_boundary == pytest.approx(2 * width)
    assert (road.left_boundary + road.right_boundary) / 2 == pytest.approx(SWIDTH / 2)


def test_normal_road_has_no_crossing_lines():
    road = RoadNormal()
    assert (road.up_line(), road.mid_line(), road.down_line()) == (0.0, 0.0, 0.0)


def test_normal_road_draws_two_sides():
    canvas = Canvas()
    RoadNormal().show(canvas)
    assert len(canvas.shapes) == 2
    assert all(s.coords[1] == 0.0 and s.coords[3] == SHEIGHT for s in canvas.shapes)


def test_crosswalk_lines_consistent():
    road = RoadCrosswalk()
    assert road.down_line() - road.up_line() == pytest.approx(road.width)
    assert road.mid_line() == pytest.approx((road.up_line() + road.down_line()) / 2)
    assert road.mid_line() < SHEIGHT / 2


def test_crosswalk_stripes_inside_road():
    road = RoadCrosswalk()
    stripes = list(road.stripes())
    assert len(stripes) == 10
    for left, top, right, bottom in stripes:
        assert road.left_boundary < left < right <= road.right_boundary
        assert right - left == pytest.approx(road.stripe_gap)
        assert top == pytest.approx(road.up_line() + road.stripe_gap)
        assert bottom == pytest.approx(road.down_line() - road.stripe_gap)
    lefts = [s[0] for s in stripes]
    for a, b in zip(lefts, lefts[1:]):
        assert b - a == pytest.approx(2 * road.stripe_gap)
    assert stripes[-1][2] + 2 * road.stripe_gap > road.right_boundary


def test_crosswalk_show():
    road = RoadCrosswalk()
    canvas = Canvas()
    road.show(canvas)
    kinds = [s.kind for s in canvas.shapes]
    assert kinds.count(ShapeKind.LINE) == 4
    assert kinds.count(ShapeKind.RECTANGLE) == len(list(road.stripes()))