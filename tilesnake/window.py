"""A fixed-size window with a canvas, repeating timers and message boxes."""

from __future__ import annotations

import functools
import itertools
from typing import Any, Callable

from . import config

INVALID_TIMER_ID = 0

Rect = tuple[int, int, int, int]


class _Scheduler:
    """Hands out cancellable delayed jobs.

    Jobs requested before a root widget exists are held back and armed on
    the root once it is attached.
    """

    def __init__(self) -> None:
        self._root: Any = None
        self._tokens = itertools.count(1)
        self._pending: dict[int, tuple[int, Callable[[], None]]] = {}
        self._live: dict[int, str] = {}

    def after(self, ms: int, func: Callable[[], None]) -> int:
        token = next(self._tokens)
        if self._root is None:
            self._pending[token] = (ms, func)
        else:
            self._live[token] = self._root.after(ms, self._job(token, func))
        return token

    def after_cancel(self, token: int) -> None:
        if token in self._pending:
            del self._pending[token]
        elif token in self._live:
            self._root.after_cancel(self._live.pop(token))

    def attach(self, root: Any) -> None:
        self._root = root
        pending, self._pending = self._pending, {}
        for token, (ms, func) in pending.items():
            self._live[token] = root.after(ms, self._job(token, func))

    def detach(self) -> None:
        if self._root is not None:
            for job in self._live.values():
                self._root.after_cancel(job)
        self._live.clear()
        self._root = None

    def _job(self, token: int, func: Callable[[], None]) -> Callable[[], None]:
        def run() -> None:
            self._live.pop(token, None)
            func()

        return run


class Timer:
    """A repeating timer that calls ``callback(timer)`` every interval until killed."""

    def __init__(
        self,
        scheduler: Any,
        timer_id: int,
        interval_ms: int,
        callback: Callable[["Timer"], None],
    ) -> None:
        if timer_id == INVALID_TIMER_ID:
            raise ValueError("timer id must not be 0")
        if interval_ms < 0:
            raise ValueError("timer interval must not be negative")
        self._scheduler = scheduler
        self._id = timer_id
        self.interval_ms = interval_ms
        self._callback = callback
        self._handle: Any = None
        self._arm()

    def _arm(self) -> None:
        self._handle = self._scheduler.after(self.interval_ms, self._fire)

    def _fire(self) -> None:
        self._handle = None
        self._callback(self)
        if self.alive() and self._handle is None:
            self._arm()

    def kill(self) -> None:
        """Stop the timer; killing a timer that is not running is an error."""
        if not self.alive():
            raise RuntimeError("failed to kill timer: it is not running")
        if self._handle is not None:
            self._scheduler.after_cancel(self._handle)
            self._handle = None
        self._id = INVALID_TIMER_ID

    def alive(self) -> bool:
        return self._id != INVALID_TIMER_ID

    def id(self) -> int:
        return self._id


class Window:
    """A non-resizable window holding a canvas of filled rectangles."""

    def __init__(self, width: int, height: int, title: str) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.last_key: str | None = None
        self._scheduler = _Scheduler()
        self._timer_ids = itertools.count(1)
        self._timers: dict[int, Timer] = {}
        self._painted: dict[Rect, str] = {}
        self._items: dict[Rect, Any] = {}
        self._root: Any = None
        self._canvas: Any = None

    @property
    def painted(self) -> dict[Rect, str]:
        """The colour of every rectangle filled since the last background fill."""
        return dict(self._painted)

    def show(self) -> None:
        """Create and display the window if it is not yet on screen."""
        if self._root is not None:
            self._root.deiconify()
            return
        import tkinter

        root = tkinter.Tk()
        root.title(self.title)
        root.resizable(False, False)
        canvas = tkinter.Canvas(
            root,
            width=self.width,
            height=self.height,
            background=config.BACKGROUND_COLOR,
            highlightthickness=0,
        )
        canvas.pack()
        root.bind("<KeyPress>", self._key_pressed)
        root.protocol("WM_DELETE_WINDOW", self._close)
        self._root = root
        self._canvas = canvas
        for rect, color in self._painted.items():
            self._draw(rect, color)
        self._scheduler.attach(root)

    def message_loop(self) -> None:
        """Process window events until the window is closed."""
        if self._root is None:
            raise RuntimeError("the window is not shown")
        self._root.mainloop()

    def set_timer(
        self, interval_ms: int, callback: Callable[["Window", Timer], None]
    ) -> Timer:
        """Start a repeating timer that calls ``callback(window, timer)``."""
        timer_id = next(self._timer_ids)
        timer = Timer(
            self._scheduler,
            timer_id,
            interval_ms,
            functools.partial(self._dispatch, timer_id, callback),
        )
        self._timers[timer.id()] = timer
        return timer

    def _dispatch(
        self,
        timer_id: int,
        callback: Callable[["Window", Timer], None],
        _timer: Timer,
    ) -> None:
        if self.has_timer(timer_id):
            callback(self, self.get_timer(timer_id))

    def get_timer(self, timer_id: int) -> Timer:
        try:
            return self._timers[timer_id]
        except KeyError:
            raise KeyError(f"could not locate timer with id {timer_id}") from None

    def has_timer(self, timer_id: int) -> bool:
        return timer_id in self._timers

    def fill_rect(self, rect: Rect, color: str) -> None:
        """Fill the pixel rectangle (left, top, right, bottom) with ``color``."""
        left, top, right, bottom = rect
        if right < left or bottom < top:
            raise ValueError(f"invalid rectangle: {rect!r}")
        key = (left, top, right, bottom)
        self._painted[key] = color
        if self._canvas is not None:
            self._draw(key, color)

    def _draw(self, rect: Rect, color: str) -> None:
        item = self._items.get(rect)
        if item is None:
            self._items[rect] = self._canvas.create_rectangle(
                *rect, fill=color, outline=""
            )
        else:
            self._canvas.itemconfigure(item, fill=color)

    def fill_background(self) -> None:
        """Paint the whole window in the background colour."""
        self._painted.clear()
        self._items.clear()
        if self._canvas is not None:
            self._canvas.delete("all")
            self._canvas.configure(background=config.BACKGROUND_COLOR)

    def message_box(self, title: str, content: str) -> None:
        """Show a modal message box with an OK button."""
        if self._root is None:
            raise RuntimeError("the window is not shown")
        from tkinter import messagebox

        messagebox.showinfo(title, content, parent=self._root)

    def _key_pressed(self, event: Any) -> None:
        """Record the name of the key that was pressed."""
        self.last_key = getattr(event, "keysym", None)

    def _close(self) -> None:
        for timer in self._timers.values():
            if timer.alive():
                timer.kill()
        self._scheduler.detach()
        if self._root is not None:
            self._root.destroy()
        self._root = None
        self._canvas = None
        self._items.clear()