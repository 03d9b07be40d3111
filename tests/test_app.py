from unittest import mock

import pygame
import pytest

from raycast2d.app import keycode_for, main


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_ESCAPE, 65307),
        (pygame.K_LEFT, 65361),
        (pygame.K_RIGHT, 65363),
        (pygame.K_a, 97),
        (pygame.K_d, 100),
        (pygame.K_s, 115),
        (pygame.K_w, 119),
    ],
)
def test_keycode_for(key, expected):
    assert keycode_for(key) == expected


def test_keycode_for_unknown_key():
    assert keycode_for(pygame.K_F1) is None


def _run(monkeypatch, events):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with mock.patch("pygame.event.wait", side_effect=events), mock.patch(
        "pygame.event.get", return_value=[]
    ):
        return main([])


def test_main_escape_exits(monkeypatch, capsys):
    code = _run(monkeypatch, [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)])
    assert code == 0
    assert "Keycode: 65307" in capsys.readouterr().out


def test_main_moves_then_exits(monkeypatch, capsys):
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    ]
    assert _run(monkeypatch, events) == 0
    out = capsys.readouterr().out
    assert out.index("Keycode: 100") < out.index("Keycode: 65307")


def test_main_window_close_exits(monkeypatch, capsys):
    assert _run(monkeypatch, [pygame.event.Event(pygame.QUIT)]) == 0
    assert "Keycode" not in capsys.readouterr().out