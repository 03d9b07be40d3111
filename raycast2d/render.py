"""Drawing a scene top-down into an :class:`~raycast2d.image.Image`."""

from __future__ import annotations

import math
from collections.abc import Iterator

from raycast2d.image import Image
from raycast2d.scene import PI, Camera, Circle, Scene, find_hit, rotate

CAMERA_COLOR = 0xFFFFFF
OUTLINE_COLOR = 0x939CA7
CAMERA_RAY_LENGTH = 50.0
CAMERA_RAY_STEP = 0.1
FIELD_OF_VIEW = 0.25
RAY_STEP = 0.01


def _frange(start: float, stop: float, step: float) -> Iterator[float]:
    value = start
    while value < stop:
        yield value
        value += step


def _plot(image: Image, x: float, y: float, color: int) -> None:
    # Coordinates truncate towards zero; points off the image are dropped.
    ix, iy = int(x), int(y)
    if 0 <= ix < image.width and 0 <= iy < image.height:
        image.put_pixel(ix, iy, color)


def clear(image: Image) -> None:
    """Paint the whole image black."""
    image.fill(0x000000)


def draw_camera(image: Image, camera: Camera) -> None:
    """Draw the two edges of the camera's field of view."""
    for angle in (PI * 0.25, PI * (-0.25)):
        direction = rotate(camera.direction, angle)
        for t in _frange(0.0, CAMERA_RAY_LENGTH, CAMERA_RAY_STEP):
            _plot(
                image,
                camera.position.x + t * direction.x,
                camera.position.y + t * direction.y,
                CAMERA_COLOR,
            )


def draw_circle_outline(image: Image, circle: Circle) -> None:
    """Draw the outline of a circle column by column."""
    cx, cy, r = circle.center.x, circle.center.y, circle.radius
    x = cx - r
    for _ in _frange(0.0, 2 * r, 0.1):
        d = (2 * cy) ** 2 - 4 * ((x - cx) ** 2 - r**2 + cy**2)
        if d < 0:
            continue
        d = math.sqrt(d)
        _plot(image, x, (2 * cy - d) / 2, OUTLINE_COLOR)
        _plot(image, x, (2 * cy + d) / 2, OUTLINE_COLOR)
        x += 0.1


def draw(image: Image, scene: Scene) -> None:
    """Clear the image, draw the camera and the points its rays hit."""
    clear(image)
    camera = scene.camera
    draw_camera(image, camera)
    for a in _frange(0.0, FIELD_OF_VIEW, RAY_STEP):
        for obj in scene.objects:
            for angle in (PI * a, PI * (-a)):
                ray = Camera(camera.position, rotate(camera.direction, angle))
                hit = find_hit(obj, ray)
                if hit is not None:
                    _plot(image, hit.x, hit.y, obj.color)