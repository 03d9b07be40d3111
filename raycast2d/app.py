"""Interactive window that shows the scene and lets the camera move."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from raycast2d.events import (  # noqa: E402
    WM_DELETE_WINDOW,
    Display,
    Event,
    EventMask,
    EventType,
    Window,
)
from raycast2d.image import Image  # noqa: E402
from raycast2d.render import draw  # noqa: E402
from raycast2d.scene import HEIGHT, WIDTH, default_scene  # noqa: E402

TITLE = "FDF"

_SPECIAL_KEYS = {
    pygame.K_ESCAPE: 65307,
    pygame.K_LEFT: 65361,
    pygame.K_UP: 65362,
    pygame.K_RIGHT: 65363,
    pygame.K_DOWN: 65364,
    pygame.K_RETURN: 65293,
    pygame.K_BACKSPACE: 65288,
    pygame.K_TAB: 65289,
}


def keycode_for(key: int) -> Optional[int]:
    """Return the key symbol for a pygame key, or None if it has none here."""
    if key in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[key]
    if 32 <= key < 127:
        return key
    return None


def _poll(block: bool) -> list:
    if block:
        return [pygame.event.wait(), *pygame.event.get()]
    return list(pygame.event.get())


def _translate(events: Iterable, window: Window) -> list[Event]:
    translated = []
    for event in events:
        if event.type == pygame.QUIT:
            translated.append(Event(EventType.CLIENT_MESSAGE, window, message=WM_DELETE_WINDOW))
        elif event.type == pygame.KEYDOWN:
            keycode = keycode_for(event.key)
            if keycode is not None:
                translated.append(Event(EventType.KEY_PRESS, window, key=keycode))
    return translated


def _rgb_bytes(image: Image) -> bytes:
    data = bytes(image.data)
    rgb = bytearray(image.width * image.height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


def _present(screen, image: Image) -> None:
    surface = pygame.image.frombuffer(_rgb_bytes(image), (image.width, image.height), "RGB")
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def main(argv: Optional[list[str]] = None) -> int:
    """Open the window and run until escape is pressed or the window is closed."""
    parser = argparse.ArgumentParser(
        prog="raycast2d", description="Top-down 2-D ray casting viewer."
    )
    parser.parse_args(argv)

    pygame.display.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)

        def source(block: bool) -> list[Event]:
            return _translate(_poll(block), window)

        display = Display(source)
        window = display.new_window(WIDTH, HEIGHT, TITLE)
        image = Image(WIDTH, HEIGHT)
        scene = default_scene()

        def close(param=None) -> None:
            if window in display.windows:
                display.destroy_window(window)
            display.loop_end()

        def on_key(keycode: int, param) -> None:
            print(f"Keycode: {keycode}")
            if not scene.handle_key(keycode):
                close()
                return
            draw(image, scene)
            _present(screen, image)

        draw(image, scene)
        _present(screen, image)
        window.hook(EventType.KEY_PRESS, EventMask.KEY_PRESS, on_key, scene)
        window.hook(EventType.DESTROY_NOTIFY, EventMask.NO_EVENT, close, None)
        display.loop()
    finally:
        pygame.quit()
    return 0