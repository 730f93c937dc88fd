"""Stackful coroutines that hand control back and forth explicitly.

Each coroutine runs its entry function on a thread of its own. Only one
coroutine runs at any moment: a switch marks the target runnable and blocks
the switching side until something switches back to it. The thread that
first uses the module acts as the leader coroutine.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

__all__ = ["CoroutineError", "Coroutine", "coroutine_self", "coroutine_yield"]

DEFAULT_STACK_SIZE = 16 << 20

_cond = threading.Condition(threading.RLock())
_leader: Optional["Coroutine"] = None
_current: Optional["Coroutine"] = None


class CoroutineError(RuntimeError):
    """Raised when coroutines are switched in a way that cannot work."""


class _Cancelled(BaseException):
    """Unwinds a suspended coroutine that is being released."""


class Coroutine:
    """A coroutine running ``entry(arg)`` once it is first switched to."""

    def __init__(
        self,
        entry: Optional[Callable[[Any], Any]] = None,
        stack_size: int = 0,
    ) -> None:
        if stack_size < 0:
            raise ValueError(f"stack size must not be negative, got {stack_size}")
        self.entry = entry
        self.stack_size = stack_size or DEFAULT_STACK_SIZE
        self.exited = False
        self.caller: Optional[Coroutine] = None
        self.data: Any = None
        self._runnable = False
        self._thread: Optional[threading.Thread] = None
        self._error: Optional[BaseException] = None
        self._cancel = False
        self._is_leader = False

    def __repr__(self) -> str:
        if self._is_leader:
            state = "leader"
        elif self.exited:
            state = "exited"
        elif self._thread is None:
            state = "new"
        else:
            state = "started"
        return f"<Coroutine {state}>"

    def __enter__(self) -> Coroutine:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()

    def yieldto(self, arg: Any = None) -> Any:
        """Switch to this coroutine, handing it ``arg``.

        Returns what the coroutine passes to :func:`coroutine_yield`, or the
        return value of its entry function once that finishes. An exception
        raised by the entry function is raised here.
        """
        if self._is_leader:
            raise CoroutineError("cannot switch to the leader coroutine")
        if self.exited:
            raise CoroutineError("coroutine has already exited")
        if self.caller is not None:
            raise CoroutineError("coroutine is re-entering itself")
        me = coroutine_self()
        if me is self:
            raise CoroutineError("coroutine is re-entering itself")
        self.caller = me
        result = _swap(me, self, arg)
        if self._error is not None:
            error, self._error = self._error, None
            raise error
        return result

    def release(self) -> None:
        """Free the coroutine, unwinding it if it is suspended mid-way."""
        if self._is_leader:
            raise CoroutineError("cannot release the leader coroutine")
        if self.exited:
            self.caller = None
            return
        me = coroutine_self()
        if me is self or self.caller is not None:
            raise CoroutineError("cannot release a running coroutine")
        if self._thread is None:
            self.exited = True
            return
        self._cancel = True
        self.caller = me
        _swap(me, self, None)
        self._error = None
        self.caller = None


def _leader_coroutine() -> Coroutine:
    global _leader
    with _cond:
        if _leader is None:
            leader = Coroutine()
            leader._is_leader = True
            leader._runnable = True
            _leader = leader
        return _leader


def coroutine_self() -> Coroutine:
    """Return the coroutine that is running now."""
    global _current
    with _cond:
        if _current is None:
            _current = _leader_coroutine()
        return _current


def coroutine_yield(arg: Any = None) -> Any:
    """Return control to whoever switched to the running coroutine."""
    me = coroutine_self()
    to = me.caller
    if to is None:
        raise CoroutineError("coroutine is yielding to no one")
    me.caller = None
    return _swap(me, to, arg)


def _swap(frm: Coroutine, to: Coroutine, arg: Any) -> Any:
    global _current
    with _cond:
        frm._runnable = False
        to._runnable = True
        to.data = arg
        if to._thread is None and not to._is_leader:
            to._thread = threading.Thread(
                target=_run, args=(to,), name="coroutine", daemon=True
            )
            to._thread.start()
        _cond.notify_all()
        while not frm._runnable:
            _cond.wait()
        _current = frm
        if frm._cancel:
            raise _Cancelled()
        return frm.data


def _run(co: Coroutine) -> None:
    global _current
    with _cond:
        while not co._runnable:
            _cond.wait()
        _current = co
        arg = co.data
        cancelled = co._cancel

    result: Any = None
    error: Optional[BaseException] = None
    if not cancelled:
        try:
            if co.entry is not None:
                result = co.entry(arg)
        except _Cancelled:
            pass
        except BaseException as exc:  # handed to the caller of yieldto
            error = exc

    with _cond:
        co.exited = True
        co.data = result
        co._error = error
        co._runnable = False
        caller = co.caller
        co.caller = None
        if caller is not None:
            caller.data = result
            caller._runnable = True
        _cond.notify_all()