import math

import pytest

from raycast2d.scene import (
    HEIGHT,
    KEY_A,
    KEY_D,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_W,
    MOVE_STEP,
    TURN_ANGLE,
    WIDTH,
    Camera,
    Circle,
    Polygon,
    Scene,
    Vec2,
    default_scene,
    find_hit,
    hit_circle,
    hit_polygon,
    rotate,
)

SQUARE = Polygon((Vec2(0, 0), Vec2(10, 0), Vec2(10, 10), Vec2(0, 10)), 0x00FF00)


def test_rotate_by_zero_is_identity():
    v = Vec2(3.0, -7.5)
    assert rotate(v, 0.0) == v


def test_rotate_preserves_length():
    v = Vec2(3.0, 4.0)
    for angle in (0.1, 1.0, 2.5, -0.7):
        assert rotate(v, angle).length() == pytest.approx(v.length())


def test_rotate_round_trip():
    v = Vec2(0.3, 0.4)
    back = rotate(rotate(v, 0.8), -0.8)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_hit_circle_point_lies_on_circle_and_ray():
    circle = Circle(Vec2(10, 0), 2, 0xFF0000)
    camera = Camera(Vec2(0, 0), Vec2(1, 0))
    hit = hit_circle(circle, camera)
    assert (hit - circle.center).length() == pytest.approx(circle.radius)
    assert hit.y == pytest.approx(0.0)
    assert (hit - camera.position).length() < (circle.center - camera.position).length()


def test_hit_circle_miss():
    circle = Circle(Vec2(0, 10), 2, 0xFF0000)
    assert hit_circle(circle, Camera(Vec2(0, 0), Vec2(1, 0))) is None


def test_hit_circle_behind_camera():
    circle = Circle(Vec2(-10, 0), 2, 0xFF0000)
    assert hit_circle(circle, Camera(Vec2(0, 0), Vec2(1, 0))) is None


def test_hit_circle_from_inside_hits_in_front():
    circle = Circle(Vec2(0, 0), 5, 0xFF0000)
    camera = Camera(Vec2(1, 1), Vec2(0.3, 0.4))
    hit = hit_circle(circle, camera)
    assert (hit - circle.center).length() == pytest.approx(circle.radius)
    assert (hit - camera.position).dot(camera.direction) > 0


def test_hit_circle_zero_direction_raises():
    with pytest.raises(ValueError):
        hit_circle(Circle(Vec2(0, 0), 5, 0), Camera(Vec2(1, 1), Vec2(0, 0)))


def test_hit_polygon_from_outside():
    camera = Camera(Vec2(-5, 5), Vec2(1, 0))
    assert hit_polygon(SQUARE, camera) == Vec2(0.0, 5.0)


def test_hit_polygon_from_inside():
    camera = Camera(Vec2(5, 5), Vec2(1, 0))
    assert hit_polygon(SQUARE, camera) == Vec2(10.0, 5.0)


def test_hit_polygon_pointing_away():
    camera = Camera(Vec2(-5, 5), Vec2(-1, 0))
    assert hit_polygon(SQUARE, camera) is None


def test_hit_polygon_ignores_far_hits():
    far = Polygon((Vec2(20000, 0), Vec2(20010, 0), Vec2(20010, 10), Vec2(20000, 10)), 1)
    assert hit_polygon(far, Camera(Vec2(0, 5), Vec2(1, 0))) is None


def test_find_hit_dispatches():
    camera = Camera(Vec2(-5, 5), Vec2(1, 0))
    circle = Circle(Vec2(10, 5), 2, 0)
    assert find_hit(SQUARE, camera) == hit_polygon(SQUARE, camera)
    assert find_hit(circle, camera) == hit_circle(circle, camera)


def test_find_hit_unknown_object():
    with pytest.raises(TypeError):
        find_hit(object(), Camera(Vec2(0, 0), Vec2(1, 0)))


@pytest.mark.parametrize(
    "key, delta",
    [
        (KEY_S, Vec2(0, MOVE_STEP)),
        (KEY_W, Vec2(0, -MOVE_STEP)),
        (KEY_D, Vec2(MOVE_STEP, 0)),
        (KEY_A, Vec2(-MOVE_STEP, 0)),
    ],
)
def test_handle_key_moves_camera(key, delta):
    scene = Scene(Camera(Vec2(100.0, 100.0), Vec2(0.3, 0.4)))
    assert scene.handle_key(key) is True
    assert scene.camera.position == Vec2(100.0, 100.0) + delta
    assert scene.camera.direction == Vec2(0.3, 0.4)


@pytest.mark.parametrize("key, angle", [(KEY_RIGHT, TURN_ANGLE), (KEY_LEFT, -TURN_ANGLE)])
def test_handle_key_turns_camera(key, angle):
    scene = Scene(Camera(Vec2(100.0, 100.0), Vec2(0.3, 0.4)))
    assert scene.handle_key(key) is True
    expected = rotate(Vec2(0.3, 0.4), angle)
    assert scene.camera.direction.x == pytest.approx(expected.x)
    assert scene.camera.direction.y == pytest.approx(expected.y)
    assert scene.camera.position == Vec2(100.0, 100.0)


def test_handle_key_escape_closes():
    scene = Scene(Camera(Vec2(1.0, 2.0), Vec2(0.3, 0.4)))
    assert scene.handle_key(KEY_ESCAPE) is False
    assert scene.camera == Camera(Vec2(1.0, 2.0), Vec2(0.3, 0.4))


def test_handle_key_unknown_key_changes_nothing():
    scene = Scene(Camera(Vec2(1.0, 2.0), Vec2(0.3, 0.4)))
    assert scene.handle_key(ord("q")) is True
    assert scene.camera == Camera(Vec2(1.0, 2.0), Vec2(0.3, 0.4))


def test_default_scene():
    scene = default_scene()
    assert scene.camera.position == Vec2(WIDTH / 2, HEIGHT / 2)
    assert scene.camera.direction == Vec2(0.3, 0.4)
    assert [obj.color for obj in scene.objects] == [0xFF0000, 0xFF00FF, 0xEEB804, 0x0F61BC]
    assert isinstance(scene.objects[3], Polygon)
    assert len(scene.objects[3].points) == 5
    assert math.isclose(scene.objects[2].radius, 100)