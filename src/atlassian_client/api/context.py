"""
Call Context for the Atlassian API Client

Carries cancellation and deadline information through request building and
transport execution. Contexts form a tree: cancelling a parent cancels every
child, and a child never outlives its parent's deadline.
"""

import threading
import time
import weakref
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from ..core.error_handler import Cancelled, ContextError, DeadlineExceeded


class Context:
    """
    Cancellation token with an optional deadline.

    Deadlines are kept on the ``time.monotonic`` clock. Instances are safe to
    share between threads.
    """

    def __init__(self, parent: Optional['Context'] = None, deadline: Optional[float] = None):
        self._parent = parent
        self._cancelled = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: List[Callable[[], None]] = []
        # Weak so a child the caller dropped leaves the tree on its own
        self._children: 'weakref.WeakSet[Context]' = weakref.WeakSet()

        parent_deadline = parent.deadline if parent is not None else None
        if parent_deadline is None:
            self._deadline = deadline
        elif deadline is None:
            self._deadline = parent_deadline
        else:
            self._deadline = min(parent_deadline, deadline)

        if parent is not None:
            parent._attach_child(self)

    @classmethod
    def background(cls) -> 'Context':
        """Return the root context: never cancelled, no deadline"""
        return _BACKGROUND

    @property
    def deadline(self) -> Optional[float]:
        """Deadline on the monotonic clock, or None"""
        return self._deadline

    def with_cancel(self) -> Tuple['Context', Callable[[], None]]:
        """Derive a child context and the function that cancels it"""
        child = Context(self)
        return child, child.cancel

    def with_timeout(self, seconds: float) -> 'Context':
        """Derive a child context that expires ``seconds`` from now"""
        return Context(self, time.monotonic() + seconds)

    def with_deadline(self, when: datetime) -> 'Context':
        """Derive a child context that expires at wall-clock time ``when``"""
        now = datetime.now(timezone.utc) if when.tzinfo is not None else datetime.now()
        return self.with_timeout((when - now).total_seconds())

    def cancel(self):
        """Cancel this context and all of its children. Safe to call twice."""
        with self._lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
            callbacks, self._callbacks = self._callbacks, []
            children = list(self._children)
            self._children.clear()

        self._leave_parent()

        for child in children:
            child.cancel()
        for callback in callbacks:
            callback()

    def _attach_child(self, child: 'Context'):
        with self._lock:
            if not self._cancelled.is_set():
                self._children.add(child)
                return
        child.cancel()

    def _detach_child(self, child: 'Context'):
        with self._lock:
            self._children.discard(child)

    def _leave_parent(self):
        """Stop receiving cancellation from the parent once this context has ended"""
        if self._parent is not None:
            self._parent._detach_child(self)

    def on_done(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Register ``callback`` to run when the context is cancelled.

        Deadline expiry does not fire callbacks; waiters bound their wait with
        ``remaining()`` instead. Runs immediately if already cancelled.

        Returns:
            A function that unregisters the callback
        """
        with self._lock:
            if not self._cancelled.is_set():
                self._callbacks.append(callback)

                def unregister():
                    with self._lock:
                        if callback in self._callbacks:
                            self._callbacks.remove(callback)
                return unregister

        callback()
        return lambda: None

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline (never negative), or None"""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def err(self) -> Optional[ContextError]:
        """Why the context ended, or None while it is still live"""
        if self._cancelled.is_set():
            return Cancelled()
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._leave_parent()
            return DeadlineExceeded()
        return None

    def done(self) -> bool:
        return self.err() is not None

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the context ends or ``timeout`` elapses; True if it ended"""
        remaining = self.remaining()
        if remaining is not None and (timeout is None or remaining < timeout):
            timeout = remaining
        self._cancelled.wait(timeout)
        return self.done()

    def __repr__(self):
        state = type(self.err()).__name__ if self.done() else 'active'
        return f"<Context {state} remaining={self.remaining()}>"


class _BackgroundContext(Context):
    """Root context. Cancelling it is a no-op and callbacks never fire."""

    def cancel(self):
        pass

    def on_done(self, callback: Callable[[], None]) -> Callable[[], None]:
        return lambda: None

    def _attach_child(self, child: Context):
        pass


_BACKGROUND = _BackgroundContext()


def background() -> Context:
    """Shorthand for ``Context.background()``"""
    return _BACKGROUND
