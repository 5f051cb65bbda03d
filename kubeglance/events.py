"""Merges terminal input and periodic ticks into one event queue."""

from __future__ import annotations

import enum
import queue
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from .keys import Key, KeyEvent

Reader = Callable[[float], Any]


class EventKind(enum.Enum):
    INPUT = enum.auto()
    MOUSE_INPUT = enum.auto()
    TICK = enum.auto()


@dataclass(frozen=True)
class Event:
    """An event: a key press, a mouse action or a tick."""

    kind: EventKind
    payload: Any = None


@dataclass(frozen=True)
class EventConfig:
    """Event handling settings; ``tick_rate`` is in seconds."""

    exit_key: Key = field(default_factory=lambda: Key.ctrl("c"))
    tick_rate: float = 0.25


class Events:
    """Runs ``reader`` on a background thread and queues its events with ticks.

    ``reader(timeout)`` waits up to ``timeout`` seconds and returns a
    ``KeyEvent``, an input or mouse ``Event``, or ``None``; anything else is ignored.
    """

    def __init__(self, reader: Reader, tick_rate: int = 250) -> None:
        self._start(reader, EventConfig(tick_rate=tick_rate / 1000))

    @classmethod
    def with_config(cls, reader: Reader, config: EventConfig) -> Events:
        events = cls.__new__(cls)
        events._start(reader, config)
        return events

    def _start(self, reader: Reader, config: EventConfig) -> None:
        self.config = config
        self._queue: queue.Queue[Event | BaseException] = queue.Queue()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, args=(reader,), daemon=True)
        self._thread.start()

    def _run(self, reader: Reader) -> None:
        tick_rate = self.config.tick_rate
        last_tick = time.monotonic()
        while not self._stop.is_set():
            timeout = max(0.0, tick_rate - (time.monotonic() - last_tick))
            try:
                raw = reader(timeout)
            except Exception as exc:  # handed to the consumer
                self._queue.put(exc)
                return
            if isinstance(raw, KeyEvent):
                self._queue.put(Event(EventKind.INPUT, raw))
            elif isinstance(raw, Event) and raw.kind is not EventKind.TICK:
                self._queue.put(raw)
            if time.monotonic() - last_tick >= tick_rate:
                self._queue.put(Event(EventKind.TICK))
                last_tick = time.monotonic()

    def next(self, timeout: float | None = None) -> Event:
        """Wait for the next event; raise ``TimeoutError`` if none arrives in time."""
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError("no event received") from None
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self) -> None:
        """Stop the background reader thread."""
        self._stop.set()
        self._thread.join()

    def __enter__(self) -> Events:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()