"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Cancellation contexts for SDK operations.

A Context carries an optional monotonic deadline and an explicit cancel
signal. Contexts form a tree: cancelling a parent cancels every child,
and a child's deadline never extends past its parent's.
"""

import threading
import time
from typing import Callable, List, Optional

CANCELED = "context canceled"
DEADLINE_EXCEEDED = "context deadline exceeded"


class Context:
    """
    Cancellation scope for one or more operations.

    Example:
        ctx = Context.with_timeout(5.0)
        result, response = service.list_director_sites(options, ctx=ctx)
    """

    def __init__(self, deadline: Optional[float] = None, parent: Optional["Context"] = None):
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self.deadline = deadline
        self._parent = parent
        self._cancelled = threading.Event()
        self._children: List["Context"] = []
        self._callbacks: List[Callable[[], None]] = []
        self._lock = threading.Lock()
        if parent is not None:
            parent._attach(self)

    @classmethod
    def background(cls) -> "Context":
        """Return a context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float, parent: Optional["Context"] = None) -> "Context":
        """Return a context whose deadline is ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds, parent=parent)

    @classmethod
    def with_deadline(cls, deadline: float, parent: Optional["Context"] = None) -> "Context":
        """Return a context expiring at a ``time.monotonic()`` instant."""
        return cls(deadline=deadline, parent=parent)

    def child(self, timeout: Optional[float] = None) -> "Context":
        """Derive a context cancelled together with this one."""
        deadline = None if timeout is None else time.monotonic() + timeout
        return Context(deadline=deadline, parent=self)

    def _attach(self, child: "Context") -> None:
        with self._lock:
            # Drop children that finished on their own
            self._children = [c for c in self._children if not c.done()]
            self._children.append(child)
        if self._cancelled.is_set():
            child.cancel()

    def _detach(self, child: "Context") -> None:
        with self._lock:
            try:
                self._children.remove(child)
            except ValueError:
                pass

    def on_cancel(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Run ``callback`` when this context is cancelled.

        The callback runs immediately if the context is already cancelled.
        Deadline expiry does not trigger it.

        Returns:
            Function that unregisters the callback
        """
        with self._lock:
            registered = not self._cancelled.is_set()
            if registered:
                self._callbacks.append(callback)
        if not registered:
            callback()

        def unregister() -> None:
            with self._lock:
                try:
                    self._callbacks.remove(callback)
                except ValueError:
                    pass

        return unregister

    def cancel(self) -> None:
        """Cancel this context and all of its children."""
        with self._lock:
            self._cancelled.set()
            children = list(self._children)
            self._children.clear()
            callbacks = list(self._callbacks)
            self._callbacks.clear()
        for callback in callbacks:
            callback()
        for child in children:
            child.cancel()
        if self._parent is not None:
            self._parent._detach(self)

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None if there is none."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def expired(self) -> bool:
        """True once the deadline has passed."""
        return self.deadline is not None and time.monotonic() >= self.deadline

    def done(self) -> bool:
        """True once the context is cancelled or its deadline has passed."""
        return self._cancelled.is_set() or self.expired()

    def err(self) -> Optional[str]:
        """Reason the context is done, or None while it is still live."""
        if self._cancelled.is_set():
            return CANCELED
        if self.expired():
            return DEADLINE_EXCEEDED
        return None

    def wait(self, seconds: float) -> bool:
        """
        Sleep for up to ``seconds``, waking early on cancel or deadline.

        Returns:
            True if the full interval elapsed with the context still live
        """
        remaining = self.remaining()
        timeout = seconds if remaining is None else min(seconds, remaining)
        if timeout > 0:
            self._cancelled.wait(timeout)
        return not self.done()

    def __repr__(self) -> str:
        return f"Context(deadline={self.deadline!r}, err={self.err()!r})"
