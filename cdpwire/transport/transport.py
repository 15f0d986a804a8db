"""The transport: method calls to the browser and its targets, and event routing."""

from __future__ import annotations

import itertools
import logging
import queue
import threading
from typing import Any, Dict, Hashable, Optional

from cdpwire.protocol.messages import ConnectionShutdown, parse_raw_message
from cdpwire.protocol.method import CallId, Method, Response, parse_response
from cdpwire.protocol.target import ReceivedMessageFromTargetEvent, SendMessageToTarget
from cdpwire.transport.connection import WebSocketConnection
from cdpwire.transport.registry import ConnectionClosed, WaitingCallRegistry
from cdpwire.wait import Timeout

_log = logging.getLogger(__name__)

_BROWSER: Hashable = ("browser",)


class Transport:
    """Sends method calls over one WebSocket and routes what comes back.

    Responses go to the caller waiting for them; events go to the queue
    returned by :meth:`listen_to_browser_events` or
    :meth:`listen_to_target_events`. When the connection ends, every
    listener queue receives a :class:`ConnectionShutdown` as its last item.
    """

    CALL_TIMEOUT = 15.0

    def __init__(
        self, ws_url: str, process_id: Optional[int], idle_browser_timeout: float
    ) -> None:
        self.process_id = process_id
        self._idle_browser_timeout = idle_browser_timeout
        self._messages: "queue.Queue[Any]" = queue.Queue()
        self._connection = WebSocketConnection(ws_url, process_id, self._messages)
        self._registry = WaitingCallRegistry()
        self._listeners: Dict[Hashable, "queue.Queue[Any]"] = {}
        self._listeners_lock = threading.Lock()
        self._open = threading.Event()
        self._open.set()
        self._shutdown_requested = threading.Event()
        self._call_ids = itertools.count()
        self._call_ids_lock = threading.Lock()
        self._loop = threading.Thread(
            target=self._handle_incoming_messages,
            name=f"cdp-transport-{process_id}",
            daemon=True,
        )
        self._loop.start()

    def __repr__(self) -> str:
        return f"Transport(process_id={self.process_id!r}, open={self.is_open})"

    @property
    def is_open(self) -> bool:
        return self._open.is_set()

    def unique_call_id(self) -> CallId:
        """Return a call id that no other call on this transport uses."""
        with self._call_ids_lock:
            return next(self._call_ids)

    def call_method(self, method: Method, session_id: Optional[str] = None) -> Any:
        """Call ``method`` on the browser, or on the target of ``session_id``.

        Returns what the method makes of its result. Raises
        :class:`ConnectionClosed` when the connection is gone,
        :class:`~cdpwire.protocol.method.RemoteError` when the browser
        reports an error, and :class:`~cdpwire.wait.Timeout` when no
        response arrives in time.
        """
        if not self._open.is_set():
            raise ConnectionClosed()
        call_id = self.unique_call_id()
        call = method.to_method_call(call_id)
        message_text = call.to_json()
        pending = self._registry.register_call(call_id)

        try:
            if session_id is not None:
                _log.debug("Msg to tab: %.300s", message_text)
                self.call_method_on_browser(
                    SendMessageToTarget(message=message_text, session_id=session_id)
                )
            else:
                self._connection.send_message(message_text)
                _log.debug("sent method call to browser via websocket")
        except Exception as exc:
            _log.warning("Failed to send method call %r: %r", call_id, exc)
            self._registry.unregister_call(call_id)
            raise

        _log.debug("waiting for response from call registry: %r %.400r", call_id, call.params)
        try:
            outcome = pending.get(timeout=self.CALL_TIMEOUT)
        except queue.Empty:
            raise Timeout() from None
        _log.debug("received response for: %r", call_id)
        if isinstance(outcome, ConnectionClosed):
            raise outcome
        return method.parse_result(parse_response(outcome))

    def call_method_on_target(self, session_id: str, method: Method) -> Any:
        return self.call_method(method, session_id)

    def call_method_on_browser(self, method: Method) -> Any:
        return self.call_method(method)

    def listen_to_browser_events(self) -> "queue.Queue[Any]":
        """Return a fresh queue that receives the browser's events from now on."""
        return self._add_listener(_BROWSER)

    def listen_to_target_events(self, session_id: str) -> "queue.Queue[Any]":
        """Return a fresh queue that receives the events of one target session."""
        return self._add_listener(("session", session_id))

    def shutdown(self) -> None:
        """Close the connection and stop routing messages."""
        self._connection.shutdown()
        self._shutdown_requested.set()

    def _add_listener(self, key: Hashable) -> "queue.Queue[Any]":
        events: "queue.Queue[Any]" = queue.Queue()
        with self._listeners_lock:
            self._listeners[key] = events
        return events

    def _listener(self, key: Hashable) -> Optional["queue.Queue[Any]"]:
        with self._listeners_lock:
            return self._listeners.get(key)

    def _resolve(self, response: Response) -> bool:
        try:
            self._registry.resolve_call(response)
        except KeyError:
            _log.warning("Received a response to call %r that nobody waits for", response.call_id)
            return False
        return True

    def _handle_target_message(self, event: ReceivedMessageFromTargetEvent) -> bool:
        try:
            message = parse_raw_message(event.message)
        except ValueError as exc:
            _log.debug("Message from target isn't recognised: %.300r - %s", event.message, exc)
            return True
        if isinstance(message, Response):
            return self._resolve(message)
        if isinstance(message, ConnectionShutdown):
            return True
        listener = self._listener(("session", event.session_id))
        if listener is not None:
            listener.put(message)
        return True

    def _handle_incoming_messages(self) -> None:
        try:
            while not self._shutdown_requested.is_set():
                try:
                    message = self._messages.get(timeout=self._idle_browser_timeout)
                except queue.Empty:
                    _log.error(
                        "Transport loop got a timeout while listening for messages (browser %r)",
                        self.process_id,
                    )
                    break
                if isinstance(message, ConnectionShutdown):
                    _log.info("Received shutdown message")
                    break
                if isinstance(message, Response):
                    if not self._resolve(message):
                        break
                    continue
                if isinstance(message, ReceivedMessageFromTargetEvent):
                    if not self._handle_target_message(message):
                        break
                    continue
                listener = self._listener(_BROWSER)
                if listener is not None:
                    listener.put(message)
        finally:
            _log.info("Shutting down message handling loop")
            self._connection.shutdown()
            self._open.clear()
            self._registry.cancel_outstanding_method_calls()
            with self._listeners_lock:
                listeners, self._listeners = self._listeners, {}
            for events in listeners.values():
                events.put(ConnectionShutdown())