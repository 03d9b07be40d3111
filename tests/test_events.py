import pytest

from raycast2d.events import (
    MAX_EVENT,
    WM_DELETE_WINDOW,
    Display,
    Event,
    EventMask,
    EventType,
)


def _recorder():
    calls = []

    def hook(*args):
        calls.append(args)
        return 0

    return calls, hook


def test_new_window_is_first_and_has_no_hooks():
    display = Display()
    first = display.new_window(300, 300, "win1")
    second = display.new_window(600, 600, "win2")
    assert display.windows == [second, first]
    assert len(first.hooks) == MAX_EVENT
    assert first.event_mask() == EventMask.NO_EVENT


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-5, 5)])
def test_new_window_rejects_bad_size(size):
    with pytest.raises(ValueError):
        Display().new_window(*size, "bad")


def test_convenience_hooks_use_fixed_slots_and_masks():
    window = Display().new_window(10, 10, "w")
    _, hook = _recorder()
    window.key_hook(hook, "k")
    window.mouse_hook(hook, "m")
    window.expose_hook(hook, "e")
    assert window.hooks[EventType.KEY_RELEASE].param == "k"
    assert window.hooks[EventType.BUTTON_PRESS].mask == EventMask.BUTTON_PRESS
    assert window.hooks[EventType.EXPOSE].mask == EventMask.EXPOSURE
    assert int(window.event_mask()) == 0x8006


def test_hook_rejects_out_of_range_type():
    window = Display().new_window(10, 10, "w")
    with pytest.raises(ValueError):
        window.hook(MAX_EVENT, 0, print, None)


def test_dispatch_key_press_passes_key_and_param():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls, hook = _recorder()
    window.hook(EventType.KEY_PRESS, EventMask.KEY_PRESS, hook, "grid")
    assert display.dispatch(Event(EventType.KEY_PRESS, window, key=65307)) is True
    assert calls == [(65307, "grid")]


def test_dispatch_button_and_motion_arguments():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls, hook = _recorder()
    window.mouse_hook(hook, None)
    window.hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION, hook, "p")
    pressed = display.dispatch(Event(EventType.BUTTON_PRESS, window, button=1, x=4, y=7))
    moved = display.dispatch(Event(EventType.MOTION_NOTIFY, window, x=2, y=3))
    assert pressed is True
    assert moved is True
    assert calls == [(1, 4, 7, None), (2, 3, "p")]


def test_expose_only_on_last_of_series():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls, hook = _recorder()
    window.expose_hook(hook, "x")
    assert display.dispatch(Event(EventType.EXPOSE, window, count=2)) is False
    assert display.dispatch(Event(EventType.EXPOSE, window, count=0)) is True
    assert calls == [("x",)]


def test_generic_event_gets_param_only():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls, hook = _recorder()
    window.hook(EventType.FOCUS_IN, EventMask.FOCUS_CHANGE, hook, 5)
    assert display.dispatch(Event(EventType.FOCUS_IN, window)) is True
    assert calls == [(5,)]


def test_undefined_low_types_do_not_call_hook():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls, hook = _recorder()
    window.hook(0, 0, hook, None)
    assert display.dispatch(Event(0, window)) is False
    assert calls == []


def test_delete_request_runs_destroy_hook():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls, hook = _recorder()
    window.hook(EventType.DESTROY_NOTIFY, 0, hook, "bye")
    event = Event(EventType.CLIENT_MESSAGE, window, message=WM_DELETE_WINDOW)
    assert display.dispatch(event) is True
    assert calls == [("bye",)]


def test_events_for_unknown_window_are_ignored():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls, hook = _recorder()
    window.key_hook(hook)
    display.destroy_window(window)
    assert display.dispatch(Event(EventType.KEY_RELEASE, window, key=1)) is False
    assert calls == []


def test_destroy_window_removes_and_rejects_unknown():
    display = Display()
    a = display.new_window(10, 10, "a")
    b = display.new_window(10, 10, "b")
    display.destroy_window(a)
    assert display.windows == [b]
    with pytest.raises(ValueError):
        display.destroy_window(a)


def test_loop_delivers_first_expose_and_sets_masks():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls, hook = _recorder()
    window.expose_hook(hook, "draw")
    display.loop()
    assert calls == [("draw",)]
    assert window.selected_mask == EventMask.EXPOSURE


def test_loop_hook_runs_until_loop_end():
    display = Display()
    window = display.new_window(10, 10, "w")
    runs = []

    def tick(param):
        runs.append(param)
        if len(runs) == 3:
            display.loop_end()

    display.loop_hook(tick, "t")
    display.loop()
    assert runs == ["t", "t", "t"]
    assert display.windows == [window]
    assert window.selected_mask == EventMask.NO_EVENT


def test_loop_end_before_loop_returns_at_once():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls, hook = _recorder()
    window.expose_hook(hook)
    display.loop_end()
    display.loop()
    assert calls == []
    assert display.windows == [window]


def test_loop_stops_when_last_window_destroyed():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls = []

    def on_key(key, param):
        calls.append(key)
        display.destroy_window(param)

    window.hook(EventType.KEY_PRESS, EventMask.KEY_PRESS, on_key, window)
    display.post(Event(EventType.KEY_PRESS, window, key=65307))
    display.post(Event(EventType.KEY_PRESS, window, key=97))
    display.loop()
    assert calls == [65307]
    assert display.windows == []


def test_loop_pulls_events_from_source():
    batches = [[], []]
    display = Display(source=lambda block: batches.pop(0) if batches else [])
    window = display.new_window(10, 10, "w")
    batches[0] = [Event(EventType.KEY_RELEASE, window, key=115)]
    calls, hook = _recorder()
    window.key_hook(hook, "g")
    display.loop()
    assert calls == [(115, "g")]
    assert window.selected_mask == EventMask.KEY_RELEASE
    assert display.windows == [window]


def test_mouse_click_replaces_window():
    display = Display()
    sizes = iter([(123, 456), (200, 100)])
    state = {}

    def on_mouse(button, x, y, param):
        display.destroy_window(state["win1"])
        width, height = next(sizes)
        state["win1"] = display.new_window(width, height, "new win")
        state["win1"].mouse_hook(on_mouse, None)

    state["win1"] = display.new_window(300, 300, "win1")
    win2 = display.new_window(600, 600, "win2")
    state["win1"].mouse_hook(on_mouse, None)
    win2.mouse_hook(on_mouse, None)
    display.post(Event(EventType.BUTTON_PRESS, state["win1"], button=1, x=5, y=5))
    display.post(Event(EventType.BUTTON_PRESS, win2, button=3, x=1, y=2))
    display.loop()
    assert len(display.windows) == 2
    assert win2 in display.windows
    replacement = state["win1"]
    assert (replacement.width, replacement.height, replacement.title) == (200, 100, "new win")
    assert replacement.event_mask() == EventMask.BUTTON_PRESS