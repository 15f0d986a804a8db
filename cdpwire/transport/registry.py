"""Bookkeeping of method calls that are waiting for their responses."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Dict, Union

from cdpwire.protocol.method import CallId, Response

_log = logging.getLogger(__name__)


class ConnectionClosed(Exception):
    """Raised when a method call cannot complete because the connection closed."""

    def __init__(self) -> None:
        super().__init__("Unable to make method calls because underlying connection is closed")


CallOutcome = Union[Response, ConnectionClosed]


class WaitingCallRegistry:
    """Maps call ids to the queues on which their callers wait for a response.

    Each queue receives exactly one item: the :class:`Response`, or a
    :class:`ConnectionClosed` instance if the connection went away first.
    """

    def __init__(self) -> None:
        self._calls: Dict[CallId, "queue.Queue[CallOutcome]"] = {}
        self._lock = threading.Lock()

    def register_call(self, call_id: CallId) -> "queue.Queue[CallOutcome]":
        """Register a call and return the queue its outcome will arrive on."""
        pending: "queue.Queue[CallOutcome]" = queue.Queue(maxsize=1)
        with self._lock:
            self._calls[call_id] = pending
        _log.debug("registered %r", call_id)
        return pending

    def resolve_call(self, response: Response) -> None:
        """Hand ``response`` to the caller waiting for it.

        Raises :class:`KeyError` if no call with that id is registered.
        """
        _log.debug("Resolving call %r", response.call_id)
        with self._lock:
            try:
                pending = self._calls.pop(response.call_id)
            except KeyError:
                raise KeyError(f"no call registered with id {response.call_id}") from None
        pending.put(response)

    def unregister_call(self, call_id: CallId) -> None:
        """Forget a call; raises :class:`KeyError` if it was not registered."""
        _log.debug("Deregistering call %r", call_id)
        with self._lock:
            try:
                del self._calls[call_id]
            except KeyError:
                raise KeyError(f"no call registered with id {call_id}") from None

    def cancel_outstanding_method_calls(self) -> None:
        """Tell every waiting caller that the connection closed."""
        _log.debug("Cancelling outstanding method calls")
        with self._lock:
            for call_id, pending in self._calls.items():
                _log.debug("Telling waiting method call %r that the connection closed", call_id)
                try:
                    pending.put_nowait(ConnectionClosed())
                except queue.Full:
                    _log.debug("Call %r already holds an outcome", call_id)