"""The Log domain: browser log entries and violation reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, TypeVar

from cdpwire.protocol.method import JsFloat, JsInt, JsUInt, Method
from cdpwire.protocol.runtime import RemoteObject, StackTrace

T = TypeVar("T")


def _optional(data: dict, key: str, parse: Callable[[Any], T]) -> Optional[T]:
    value = data.get(key)
    return parse(value) if value is not None else None


class LogEntrySource(Enum):
    XML = "xml"
    JAVASCRIPT = "javascript"
    NETWORK = "network"
    STORAGE = "storage"
    APPCACHE = "appcache"
    RENDERING = "rendering"
    SECURITY = "security"
    DEPRECATION = "deprecation"
    WORKER = "worker"
    VIOLATION = "violation"
    INTERVENTION = "intervention"
    RECOMMENDATION = "recommendation"
    OTHER = "other"


class LogEntryLevel(Enum):
    VERBOSE = "verbose"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class LogEntry:
    """A single entry of the browser log.

    ``timestamp`` is in milliseconds since the epoch.
    """

    source: LogEntrySource
    level: LogEntryLevel
    text: str
    timestamp: JsFloat
    url: Optional[str] = None
    line_number: Optional[JsInt] = None
    stack_trace: Optional[StackTrace] = None
    network_request_id: Optional[str] = None
    worker_id: Optional[str] = None
    args: Optional[List[RemoteObject]] = None

    @classmethod
    def from_dict(cls, data: dict) -> "LogEntry":
        return cls(
            source=LogEntrySource(data["source"]),
            level=LogEntryLevel(data["level"]),
            text=data["text"],
            timestamp=data["timestamp"],
            url=data.get("url"),
            line_number=data.get("lineNumber"),
            stack_trace=_optional(data, "stackTrace", StackTrace.from_dict),
            network_request_id=data.get("networkRequestId"),
            worker_id=data.get("workerId"),
            args=_optional(
                data, "args", lambda items: [RemoteObject.from_dict(item) for item in items]
            ),
        )


@dataclass
class EntryAddedEvent:
    """Issued when a new entry was added to the log."""

    entry: LogEntry

    @classmethod
    def from_dict(cls, data: dict) -> "EntryAddedEvent":
        return cls(entry=LogEntry.from_dict(data["params"]["entry"]))


class ViolationSettingName(Enum):
    LONG_TASK = "longTask"
    LONG_LAYOUT = "longLayout"
    BLOCKED_EVENT = "blockedEvent"
    BLOCKED_PARSER = "blockedParser"
    DISCOURAGED_API_USE = "discouragedAPIUse"
    HANDLER = "handler"
    RECURRING_HANDLER = "recurringHandler"


@dataclass(frozen=True)
class ViolationSetting:
    """A threshold above which a kind of violation gets reported."""

    name: ViolationSettingName
    threshold: JsUInt

    def to_dict(self) -> dict:
        return {"name": self.name.value, "threshold": self.threshold}


@dataclass
class Enable(Method):
    NAME = "Log.enable"


@dataclass
class Disable(Method):
    NAME = "Log.disable"


@dataclass
class Clear(Method):
    NAME = "Log.clear"


@dataclass
class StartViolationsReport(Method):
    NAME = "Log.startViolationsReport"

    config: List[ViolationSetting]


@dataclass
class StopViolationsReport(Method):
    NAME = "Log.stopViolationsReport"