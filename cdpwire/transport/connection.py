"""A WebSocket connection to the browser that forwards parsed messages to a queue."""

from __future__ import annotations

import logging
import socket
import threading
from typing import Any, Optional

import websocket
from websocket import ABNF

from cdpwire.protocol.messages import ConnectionShutdown, parse_raw_message

_log = logging.getLogger(__name__)


class WebSocketConnection:
    """Connects to ``ws_url`` and puts every recognised incoming message on ``messages``.

    ``messages`` is anything with a ``put`` method, usually a :class:`queue.Queue`.
    When the connection ends, a :class:`ConnectionShutdown` is put on it last.
    """

    def __init__(self, ws_url: str, process_id: Optional[int], messages: Any) -> None:
        self.process_id = process_id
        self._messages = messages
        self._ws = websocket.create_connection(ws_url)
        _log.debug("Successfully connected to WebSocket: %s", ws_url)
        self._send_lock = threading.Lock()
        self._reader = threading.Thread(
            target=self._dispatch_incoming_messages,
            name=f"cdp-websocket-{process_id}",
            daemon=True,
        )
        self._reader.start()

    def __repr__(self) -> str:
        return f"WebSocketConnection(process_id={self.process_id!r})"

    def send_message(self, message_text: str) -> None:
        """Send one text frame; errors of the underlying connection propagate."""
        with self._send_lock:
            self._ws.send(message_text)

    def shutdown(self) -> None:
        """Shut the socket down in both directions, ending the reader."""
        _log.debug("Shutting down WebSocket connection for browser %r", self.process_id)
        sock = self._ws.sock
        if sock is None:
            return
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            _log.debug("Couldn't shut down WS connection for browser %r", self.process_id)

    def _dispatch_incoming_messages(self) -> None:
        _log.debug("Starting msg dispatching loop")
        try:
            while True:
                try:
                    opcode, data = self._ws.recv_data()
                except websocket.WebSocketConnectionClosedException as exc:
                    _log.debug("WS closed for browser %r: %s", self.process_id, exc)
                    break
                except OSError as exc:
                    _log.debug("WS IO error for browser %r: %s", self.process_id, exc)
                    break
                except websocket.WebSocketException as exc:
                    _log.error("Unhandled WebSocket error for browser %r: %r", self.process_id, exc)
                    break

                if opcode == ABNF.OPCODE_CLOSE:
                    _log.debug("WS close frame from browser %r", self.process_id)
                    break
                if opcode != ABNF.OPCODE_TEXT:
                    _log.error("Got a non-text message (opcode %r) from browser %r", opcode, self.process_id)
                    break

                try:
                    text = data.decode("utf-8") if isinstance(data, bytes) else data
                    message = parse_raw_message(text)
                except ValueError:
                    _log.debug(
                        "Incoming message isn't recognised as event or method response: %.300s",
                        data,
                    )
                    continue
                self._messages.put(message)
        finally:
            self._ws.shutdown()
            _log.info("Sending shutdown message to message handling loop")
            self._messages.put(ConnectionShutdown())
            _log.debug("Quit msg dispatching loop")