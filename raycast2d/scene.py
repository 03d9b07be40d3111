"""Scene objects, ray intersection and camera controls for the top-down ray caster."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Union

PI = 3.14
WIDTH = 600
HEIGHT = 600
MAX_HIT_DISTANCE = 10000.0
MOVE_STEP = 4
TURN_ANGLE = PI * 0.05

KEY_ESCAPE = 65307
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_A = 97
KEY_D = 100
KEY_S = 115
KEY_W = 119


@dataclass(frozen=True)
class Vec2:
    """A 2-D vector or point; y grows downwards, as on screen."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)


def rotate(vector: Vec2, angle: float) -> Vec2:
    """Return ``vector`` rotated by ``angle`` radians."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Vec2(vector.x * cos_a - vector.y * sin_a, vector.y * cos_a + vector.x * sin_a)


@dataclass
class Camera:
    """A ray origin and the direction it looks in."""

    position: Vec2
    direction: Vec2


@dataclass(frozen=True)
class Circle:
    center: Vec2
    radius: float
    color: int


@dataclass(frozen=True)
class Polygon:
    """A closed polygon; the last point joins back to the first."""

    points: tuple[Vec2, ...]
    color: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))


SceneObject = Union[Circle, Polygon]


def hit_circle(circle: Circle, camera: Camera) -> Optional[Vec2]:
    """Return the first point where the camera ray meets the circle, or None."""
    direction = camera.direction
    offset = camera.position - circle.center
    a = direction.dot(direction)
    if a == 0:
        raise ValueError("camera direction must not be zero")
    b = 2 * offset.dot(direction)
    c = offset.dot(offset) - circle.radius * circle.radius
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    root = math.sqrt(discriminant)
    t = (-b - root) / (2 * a)
    if t < 0:
        t = (-b + root) / (2 * a)
    if t < 0:
        return None
    return camera.position + direction * t


def hit_polygon(polygon: Polygon, camera: Camera) -> Optional[Vec2]:
    """Return the nearest point where the camera ray meets a polygon edge, or None.

    Hits farther than :data:`MAX_HIT_DISTANCE` are ignored.
    """
    origin, direction = camera.position, camera.direction
    points = polygon.points
    best = MAX_HIT_DISTANCE
    hit: Optional[Vec2] = None
    for start, end in zip(points, points[1:] + points[:1]):
        edge = end - start
        offset = start - origin
        denom = direction.x * edge.y - direction.y * edge.x
        if denom == 0:
            continue
        t = (offset.x * edge.y - offset.y * edge.x) / denom
        u = (offset.x * direction.y - offset.y * direction.x) / denom
        if not (t >= 0 and 0 <= u <= 1):
            continue
        distance = math.sqrt(t * t * direction.dot(direction))
        if distance < best:
            best = distance
            hit = origin + direction * t
    return hit


def find_hit(obj: SceneObject, camera: Camera) -> Optional[Vec2]:
    """Return where the camera ray meets ``obj``, or None."""
    if isinstance(obj, Circle):
        return hit_circle(obj, camera)
    if isinstance(obj, Polygon):
        return hit_polygon(obj, camera)
    raise TypeError(f"unsupported scene object: {type(obj).__name__}")


@dataclass
class Scene:
    camera: Camera
    objects: list[SceneObject] = field(default_factory=list)

    def handle_key(self, keycode: int) -> bool:
        """Move or turn the camera for a key symbol.

        Returns False for the escape key, meaning the scene should close.
        """
        if keycode == KEY_ESCAPE:
            return False
        moves = {
            KEY_S: Vec2(0, MOVE_STEP),
            KEY_W: Vec2(0, -MOVE_STEP),
            KEY_D: Vec2(MOVE_STEP, 0),
            KEY_A: Vec2(-MOVE_STEP, 0),
        }
        turns = {KEY_RIGHT: TURN_ANGLE, KEY_LEFT: PI * (-0.05)}
        camera = self.camera
        if keycode in moves:
            camera.position = camera.position + moves[keycode]
        elif keycode in turns:
            camera.direction = rotate(camera.direction, turns[keycode])
        return True


def default_scene() -> Scene:
    """Return the built-in scene: three circles and one polygon."""
    camera = Camera(Vec2(float(WIDTH // 2), float(HEIGHT // 2)), Vec2(0.3, 0.4))
    objects: list[SceneObject] = [
        Circle(Vec2(200.0, 400.0), 60.0, 0xFF0000),
        Circle(Vec2(400.0, 300.0), 40.0, 0xFF00FF),
        Circle(Vec2(300.0, 390.0), 100.0, 0xEEB804),
        Polygon(
            (
                Vec2(100.0, 100.0),
                Vec2(200.0, 140.0),
                Vec2(260.0, 140.0),
                Vec2(200.0, 200.0),
                Vec2(130.0, 350.0),
            ),
            0x0F61BC,
        ),
    ]
    return Scene(camera, objects)