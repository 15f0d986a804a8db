"""Parsing of incoming DevTools messages: events, method responses and shutdown."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Union

from cdpwire.protocol.logs import EntryAddedEvent
from cdpwire.protocol.method import Response
from cdpwire.protocol.page import (
    FrameNavigatedEvent,
    FrameStartedLoadingEvent,
    FrameStoppedLoadingEvent,
    LifecycleEvent,
)
from cdpwire.protocol.runtime import ExceptionThrownEvent
from cdpwire.protocol.target import (
    AttachedToTargetEvent,
    ReceivedMessageFromTargetEvent,
    TargetCreatedEvent,
    TargetDestroyedEvent,
    TargetInfoChangedEvent,
)

Event = Union[
    AttachedToTargetEvent,
    ReceivedMessageFromTargetEvent,
    TargetInfoChangedEvent,
    TargetCreatedEvent,
    TargetDestroyedEvent,
    FrameStartedLoadingEvent,
    FrameNavigatedEvent,
    FrameStoppedLoadingEvent,
    LifecycleEvent,
    EntryAddedEvent,
    ExceptionThrownEvent,
]

_EVENT_PARSERS: Dict[str, Callable[[dict], Any]] = {
    "Target.attachedToTarget": AttachedToTargetEvent.from_dict,
    "Target.receivedMessageFromTarget": ReceivedMessageFromTargetEvent.from_dict,
    "Target.targetInfoChanged": TargetInfoChangedEvent.from_dict,
    "Target.targetCreated": TargetCreatedEvent.from_dict,
    "Target.targetDestroyed": TargetDestroyedEvent.from_dict,
    "Page.frameStartedLoading": FrameStartedLoadingEvent.from_dict,
    "Page.frameNavigated": FrameNavigatedEvent.from_dict,
    "Page.frameStoppedLoading": FrameStoppedLoadingEvent.from_dict,
    "Page.lifecycleEvent": LifecycleEvent.from_dict,
    "Log.entryAdded": EntryAddedEvent.from_dict,
    "Runtime.exceptionThrown": ExceptionThrownEvent.from_dict,
}


@dataclass(frozen=True)
class ConnectionShutdown:
    """Marks that the underlying connection has gone away."""


Message = Union[Event, Response, ConnectionShutdown]


def parse_event(data: Any) -> Event:
    """Parse a decoded event object, dispatching on its ``method`` field."""
    if not isinstance(data, dict):
        raise ValueError("an event must be a JSON object")
    method = data.get("method")
    parse = _EVENT_PARSERS.get(method)
    if parse is None:
        raise ValueError(f"unknown event {method!r}")
    try:
        return parse(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"malformed {method} event: {exc!r}") from exc


def parse_message(data: Any) -> Message:
    """Parse a decoded message: an event, a method response, or ``null`` for shutdown."""
    if data is None:
        return ConnectionShutdown()
    try:
        return parse_event(data)
    except ValueError:
        pass
    try:
        return Response.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError("message is neither a known event nor a method response") from exc


def parse_raw_message(raw_message: str) -> Message:
    """Parse the JSON text of a message."""
    return parse_message(json.loads(raw_message))