from __future__ import annotations

import math

import pytest

from projection.engine import RenderingEngine
from projection.polygons import Polygon3D
from projection.primitives import make_cube
from projection.vector import Vector3


@pytest.fixture
def engine(surface) -> RenderingEngine:
    return RenderingEngine(surface, 800, 800)


def _segment(x: float) -> Polygon3D:
    return Polygon3D.from_points([(x, -10, 0), (x, 10, 0)])


def test_defaults(engine: RenderingEngine) -> None:
    display = engine.display
    assert display.focal_length == pytest.approx(300.0)
    assert display.center == Vector3(0.0, 0.0, 0.0)
    assert (display.roll_angle, display.pitch_angle, display.yaw_angle) == (0.0, 0.0, 0.0)
    assert engine.polygons == ()


def test_explicit_focal_length(surface) -> None:
    assert RenderingEngine(surface, 640, 480, focal_length=120.0).display.focal_length == 120.0


@pytest.mark.parametrize("focal_length", [0.0, -5.0])
def test_construction_rejects_non_positive_focal_length(surface, focal_length: float) -> None:
    with pytest.raises(ValueError):
        RenderingEngine(surface, 800, 800, focal_length=focal_length)


def test_every_mutator_redraws(engine: RenderingEngine, surface) -> None:
    engine.add_polygon(_segment(100.0))
    engine.move_camera(Vector3(1.0, 0.0, 0.0))
    engine.change_camera_angles(1.0, 2.0, 3.0)
    engine.change_focal_length(5.0)
    engine.set_camera_angles(0.0, 0.0, 0.0)
    engine.set_focal_length(250.0)
    engine.resize(640, 480)
    assert surface.redraw_count() == 7


def test_added_polygons_project_in_order(engine: RenderingEngine) -> None:
    polygons = [_segment(100.0), Polygon3D.from_points([(200, 0, 0), (200, 5, 5), (200, -5, 5)])]
    for polygon in polygons:
        engine.add_polygon(polygon)

    assert engine.polygons == tuple(polygons)
    assert [len(p) for p in engine.projected] == [2, 3]
    assert engine.projected[0].vertices[1].x == pytest.approx(30.0)


def test_move_camera_is_relative_to_facing(engine: RenderingEngine) -> None:
    engine.change_camera_angles(0.0, 0.0, 90.0)
    engine.move_camera(Vector3(10.0, 0.0, 0.0))
    center = engine.display.center
    assert center.x == pytest.approx(0.0, abs=1e-9)
    assert center.y == pytest.approx(10.0)
    assert center.z == pytest.approx(0.0, abs=1e-9)


def test_move_camera_accumulates(engine: RenderingEngine) -> None:
    engine.move_camera(Vector3(10.0, 0.0, 0.0))
    engine.move_camera(Vector3(0.0, -4.0, 2.0))
    assert engine.display.center == Vector3(10.0, -4.0, 2.0)


def test_moving_forward_brings_points_closer(engine: RenderingEngine) -> None:
    engine.add_polygon(_segment(200.0))
    before = engine.projected[0].vertices[1].x
    engine.move_camera(Vector3(100.0, 0.0, 0.0))
    assert engine.projected[0].vertices[1].x > before


@pytest.mark.parametrize(
    "deltas",
    [(370.0, -10.0, 720.0), (-0.5, -359.5, -1e-20), (1e6, -1e6, 359.999)],
)
def test_angles_stay_wrapped(engine: RenderingEngine, deltas) -> None:
    for _ in range(3):
        engine.change_camera_angles(*deltas)
        display = engine.display
        for angle in (display.roll_angle, display.pitch_angle, display.yaw_angle):
            assert 0.0 <= angle < 360.0


def test_change_camera_angles_adds_deltas(engine: RenderingEngine) -> None:
    engine.change_camera_angles(10.0, 20.0, 30.0)
    engine.change_camera_angles(-20.0, 345.0, 0.0)
    display = engine.display
    assert display.roll_angle == pytest.approx(350.0)
    assert display.pitch_angle == pytest.approx(5.0)
    assert display.yaw_angle == pytest.approx(30.0)


def test_focal_length_cannot_reach_zero(engine: RenderingEngine, surface) -> None:
    engine.add_polygon(_segment(100.0))
    redraws = surface.redraw_count()
    with pytest.raises(ValueError, match="strictly positive"):
        engine.change_focal_length(-300.0)
    with pytest.raises(ValueError):
        engine.change_focal_length(-1000.0)
    assert engine.display.focal_length == pytest.approx(300.0)
    assert surface.redraw_count() == redraws


def test_set_focal_length_rejects_non_positive(engine: RenderingEngine) -> None:
    with pytest.raises(ValueError):
        engine.set_focal_length(0.0)
    assert engine.display.focal_length == pytest.approx(300.0)


@pytest.mark.parametrize(
    "call",
    [
        lambda e: e.move_camera(Vector3(math.nan, 0.0, 0.0)),
        lambda e: e.change_camera_angles(0.0, math.inf, 0.0),
        lambda e: e.change_focal_length(math.nan),
        lambda e: e.set_camera_angles(math.nan, 0.0, 0.0),
        lambda e: e.resize(0, 100),
    ],
)
def test_invalid_input_leaves_state_untouched(engine: RenderingEngine, surface, call) -> None:
    before = engine.display
    with pytest.raises(ValueError):
        call(engine)
    assert engine.display == before
    assert surface.redraw_count() == 0


def test_move_camera_rejects_overflowing_center(engine: RenderingEngine, surface) -> None:
    engine.add_polygon(_segment(100.0))
    engine.move_camera(Vector3(1e308, 0.0, 0.0))
    before = engine.display
    redraws = surface.redraw_count()

    with pytest.raises(ValueError):
        engine.move_camera(Vector3(1e308, 0.0, 0.0))

    assert engine.display == before
    assert surface.redraw_count() == redraws
    for polygon in engine.projected:
        for vertex in polygon.vertices:
            assert math.isfinite(vertex.x) and math.isfinite(vertex.y)
    assert all(math.isfinite(value) for point in surface.points() for value in point)


def test_add_polygon_rejects_non_polygons(engine: RenderingEngine) -> None:
    with pytest.raises(TypeError):
        engine.add_polygon([(0, 0, 0), (1, 1, 1)])  # type: ignore[arg-type]
    assert engine.polygons == ()


def test_display_is_a_copy(engine: RenderingEngine) -> None:
    display = engine.display
    display.focal_length = 1.0
    assert engine.display.focal_length == pytest.approx(300.0)


def test_projected_polygons_do_not_alias_the_scene(engine: RenderingEngine) -> None:
    engine.add_polygon(_segment(100.0))
    projected = engine.projected
    engine.move_camera(Vector3(50.0, 0.0, 0.0))
    assert projected != engine.projected


def test_cube_scenario_fits_and_is_symmetric(engine: RenderingEngine, surface) -> None:
    for polygon in make_cube(Vector3(300.0, 0.0, 0.0), Vector3(100.0, 100.0, 100.0)):
        engine.add_polygon(polygon)

    assert len(engine.projected) == 6
    assert [len(p) for p in engine.projected] == [4, 4, 2, 2, 2, 2]

    points = surface.points()
    for x, y in points:
        assert 0.0 <= x <= 800.0
        assert 0.0 <= y <= 800.0

    rounded = {(round(x, 6), round(y, 6)) for x, y in points}
    mirrored = {(round(800.0 - x, 6), round(800.0 - y, 6)) for x, y in points}
    assert rounded == mirrored
    assert (340.0, 340.0) in rounded
    assert (460.0, 460.0) in rounded
