"""Windows, event hooks and the event loop that dispatches to them."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

WM_DELETE_WINDOW = "WM_DELETE_WINDOW"


class EventType(enum.IntEnum):
    """Event type numbers, as the X protocol defines them."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


MAX_EVENT = 36
"""Number of hook slots a window has; event types at or above it are ignored."""


class EventMask(enum.IntFlag):
    """Event selection masks, as the X protocol defines them."""

    NO_EVENT = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass
class Event:
    """An input or window event addressed to a window.

    ``key`` is the key symbol of key events, ``button``, ``x`` and ``y`` the
    pointer data of button and motion events, ``count`` the number of expose
    events still to follow, ``message`` the protocol message of a client
    message.
    """

    type: int
    window: Optional["Window"] = None
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    message: Optional[str] = None


@dataclass
class _Hook:
    mask: int = 0
    func: Optional[Callable[..., Any]] = None
    param: Any = None


@dataclass(eq=False)
class Window:
    """A window with one hook slot per event type."""

    width: int
    height: int
    title: str
    hooks: list[_Hook] = field(default_factory=lambda: [_Hook() for _ in range(MAX_EVENT)])
    selected_mask: EventMask = EventMask.NO_EVENT

    def hook(self, event_type: int, mask: int, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func`` for events of ``event_type``, selecting them with ``mask``."""
        if not 0 <= event_type < MAX_EVENT:
            raise ValueError(f"event type must be in 0..{MAX_EVENT - 1}, got {event_type}")
        self.hooks[event_type] = _Hook(int(mask), func, param)

    def key_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(key, param)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, func, param)

    def mouse_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(button, x, y, param)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, func, param)

    def expose_hook(self, func: Callable[..., Any], param: Any = None) -> None:
        """Call ``func(param)`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EventMask.EXPOSURE, func, param)

    def event_mask(self) -> EventMask:
        """Return the union of the masks of all hooks."""
        mask = 0
        for slot in self.hooks:
            mask |= slot.mask
        return EventMask(mask)


EventSource = Callable[[bool], Iterable[Event]]


class Display:
    """Owns the windows and runs the event loop.

    ``source`` is called to fetch new events from a backend; its argument
    says whether it may block until at least one arrives. Without a source,
    events come only from :meth:`post`.
    """

    def __init__(self, source: Optional[EventSource] = None) -> None:
        self.windows: list[Window] = []
        self._source = source
        self._queue: deque[Event] = deque()
        self._loop_hook: Optional[_Hook] = None
        self._ended = False

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Create a window; its first expose event is queued."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid window size {width}x{height}")
        window = Window(width, height, title)
        self.windows.insert(0, window)
        self._queue.append(Event(EventType.EXPOSE, window))
        return window

    def destroy_window(self, window: Window) -> None:
        """Remove ``window``; events still addressed to it are ignored."""
        try:
            self.windows.remove(window)
        except ValueError:
            raise ValueError(f"window {window.title!r} is not open on this display") from None

    def loop_hook(self, func: Optional[Callable[..., Any]], param: Any = None) -> None:
        """Call ``func(param)`` each time the pending events have been handled."""
        self._loop_hook = None if func is None else _Hook(0, func, param)

    def post(self, event: Event) -> None:
        """Queue an event for the loop."""
        self._queue.append(event)

    def dispatch(self, event: Event) -> bool:
        """Pass one event to its window's hook; return whether a hook ran."""
        window = next((w for w in self.windows if w is event.window), None)
        if window is None:
            return False
        called = False
        closing = window.hooks[EventType.DESTROY_NOTIFY]
        if (
            event.type == EventType.CLIENT_MESSAGE
            and event.message == WM_DELETE_WINDOW
            and closing.func is not None
        ):
            closing.func(closing.param)
            called = True
        if 0 <= event.type < MAX_EVENT and window.hooks[event.type].func is not None:
            called = self._call(window.hooks[event.type], event) or called
        return called

    @staticmethod
    def _call(slot: _Hook, event: Event) -> bool:
        func, param = slot.func, slot.param
        kind = event.type
        if kind < EventType.KEY_PRESS:
            return False
        if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            func(event.key, param)
        elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            func(event.button, event.x, event.y, param)
        elif kind == EventType.MOTION_NOTIFY:
            func(event.x, event.y, param)
        elif kind == EventType.EXPOSE:
            if event.count:
                return False
            func(param)
        else:
            func(param)
        return True

    def _pending(self) -> bool:
        if not self._queue and self._source is not None:
            self._queue.extend(self._source(False))
        return bool(self._queue)

    def _next_event(self) -> Optional[Event]:
        if not self._queue and self._source is not None:
            self._queue.extend(self._source(True))
        return self._queue.popleft() if self._queue else None

    def loop(self) -> None:
        """Dispatch events until every window is gone or :meth:`loop_end` is called.

        Without a loop hook the loop waits for events; when none can arrive
        any more it returns.
        """
        for window in self.windows:
            window.selected_mask = window.event_mask()
        while self.windows and not self._ended:
            while (
                self.windows
                and not self._ended
                and (self._loop_hook is None or self._pending())
            ):
                event = self._next_event()
                if event is None:
                    return
                self.dispatch(event)
            if self._loop_hook is not None and not self._ended:
                self._loop_hook.func(self._loop_hook.param)

    def loop_end(self) -> None:
        """Make the running loop return after the current event."""
        self._ended = True