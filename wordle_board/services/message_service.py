"""
Message Service

Transient info message shown above the board ("Not enough letters", "NICE!",
the revealed answer). A message stays for a while, fades, then clears.
"""

import threading
from typing import Callable, List
from ..config.game_settings import MESSAGE_DISPLAY_SECONDS, MESSAGE_FADE_SECONDS


class TimerScheduler:
    """Runs callbacks after a delay on daemon timer threads."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class MessageBoard:
    """
    Holds the current info message and its fade flag.

    Hiding is two chained deferred callbacks: after display_seconds the
    message starts fading, after a further fade_seconds it is cleared.
    Showing a new message cancels the pending chain of the previous one.

    Timer callbacks run on their own threads, so every generation check and
    the mutation it guards happen under one lock. Listeners are called after
    the lock is released.
    """

    def __init__(self,
                 display_seconds: float = MESSAGE_DISPLAY_SECONDS,
                 fade_seconds: float = MESSAGE_FADE_SECONDS,
                 scheduler=None):
        self.text = ""
        self.fading = False
        self.display_seconds = display_seconds
        self.fade_seconds = fade_seconds
        self._scheduler = scheduler or TimerScheduler()
        self._lock = threading.RLock()
        self._pending = None
        self._generation = 0
        self._listeners: List[Callable[["MessageBoard"], None]] = []

    def subscribe(self, listener: Callable[["MessageBoard"], None]) -> None:
        """Register a callback invoked after every message change; duplicates are ignored."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[["MessageBoard"], None]) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def show(self, text: str, hide: bool = True) -> None:
        """
        Displays a message, replacing the current one.

        Args:
            text: Message to display
            hide: Fade and clear automatically; False keeps it until replaced
        """
        with self._lock:
            self._cancel_pending()
            self.text = text
            self.fading = False
            if hide:
                generation = self._generation
                self._pending = self._scheduler.call_later(
                    self.display_seconds, lambda: self._begin_fade(generation)
                )
        self._notify()

    def clear(self) -> None:
        with self._lock:
            self._cancel_pending()
            self.text = ""
            self.fading = False
        self._notify()

    def _begin_fade(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self.fading = True
            self._pending = self._scheduler.call_later(
                self.fade_seconds, lambda: self._finish(generation)
            )
        self._notify()

    def _finish(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._pending = None
            self.text = ""
            self.fading = False
        self._notify()

    def _cancel_pending(self) -> None:
        # Bumping the generation also disarms callbacks already running
        with self._lock:
            self._generation += 1
            pending = self._pending
            self._pending = None
        if pending is not None:
            pending.cancel()

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(self)
