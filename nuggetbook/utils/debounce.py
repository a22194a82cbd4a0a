# nuggetbook/utils/debounce.py
import threading
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar('T')


class Debouncer(Generic[T]):
    """Propagate a changing value only once it has been stable for ``delay`` seconds.

    Every ``update`` cancels the pending timer and starts a new one, so only the
    most recent value is ever propagated. ``value`` holds the last propagated
    value and starts at ``initial``.

    Args:
        callback: Called with the value when it settles
        delay: Seconds the value must stay unchanged
        initial: Value reported before anything settles
        timer_factory: Builds the timer; threading.Timer by default
    """

    def __init__(self, callback: Optional[Callable[[T], Any]] = None, delay: float = 0.5,
                 initial: Optional[T] = None, timer_factory: Callable[..., Any] = threading.Timer):
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.callback = callback
        self.delay = delay
        self.value: Optional[T] = initial
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._pending: Optional[T] = None
        self._has_pending = False
        self._seq = 0

    @property
    def pending(self) -> bool:
        return self._has_pending

    def update(self, value: T) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._seq += 1
            self._pending = value
            self._has_pending = True
            timer = self._timer_factory(self.delay, self._fire, args=(self._seq,))
            if hasattr(timer, 'daemon'):
                timer.daemon = True
            self._timer = timer
            timer.start()

    def _fire(self, seq: int) -> None:
        with self._lock:
            # A cancelled timer can still fire if it was already running
            if not self._has_pending or seq != self._seq:
                return
            value = self._pending
            self._timer = None
            self._has_pending = False
            self._pending = None
            self.value = value
        if self.callback is not None:
            self.callback(value)

    def cancel(self) -> None:
        """Drop the pending value without propagating it"""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None
            self._has_pending = False

    def flush(self) -> None:
        """Propagate the pending value now"""
        with self._lock:
            if not self._has_pending:
                return
            if self._timer is not None:
                self._timer.cancel()
            seq = self._seq
        self._fire(seq)
