"""The Runtime domain: remote objects, stack traces and script evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, TypeVar

from cdpwire.protocol.method import JsFloat, JsInt, Method, ScriptId, UniqueDebuggerId

T = TypeVar("T")


def _optional(data: dict, key: str, parse: Callable[[Any], T]) -> Optional[T]:
    value = data.get(key)
    return parse(value) if value is not None else None


@dataclass
class PropertyPreview:
    name: str
    object_type: str
    value: Optional[str] = None
    value_preview: Optional["PropertyPreview"] = None
    subtype: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PropertyPreview":
        return cls(
            name=data["name"],
            object_type=data["type"],
            value=data.get("value"),
            value_preview=_optional(data, "valuePreview", cls.from_dict),
            subtype=data.get("subtype"),
        )


@dataclass
class ObjectPreview:
    object_type: str
    overflow: bool
    properties: List[PropertyPreview]
    subtype: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ObjectPreview":
        return cls(
            object_type=data["type"],
            overflow=data["overflow"],
            properties=[PropertyPreview.from_dict(item) for item in data["properties"]],
            subtype=data.get("subtype"),
            description=data.get("description"),
        )


class RemoteObjectType(Enum):
    OBJECT = "object"
    FUNCTION = "function"
    UNDEFINED = "undefined"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"
    BIGINT = "bigint"


class RemoteObjectSubtype(Enum):
    ARRAY = "array"
    NULL = "null"
    NODE = "node"
    REGEXP = "regexp"
    DATE = "date"
    MAP = "map"
    SET = "set"
    WEAKMAP = "weakmap"
    WEAKSET = "weakset"
    ITERATOR = "iterator"
    GENERATOR = "generator"
    ERROR = "error"
    PROXY = "proxy"
    PROMISE = "promise"
    TYPEDARRAY = "typedarray"
    ARRAYBUFFER = "arraybuffer"
    DATAVIEW = "dataview"


@dataclass
class RemoteObject:
    object_type: RemoteObjectType
    subtype: Optional[RemoteObjectSubtype] = None
    description: Optional[str] = None
    class_name: Optional[str] = None
    value: Optional[Any] = None
    unserializable_value: Optional[str] = None
    preview: Optional[ObjectPreview] = None

    @classmethod
    def from_dict(cls, data: dict) -> "RemoteObject":
        return cls(
            object_type=RemoteObjectType(data["type"]),
            subtype=_optional(data, "subtype", RemoteObjectSubtype),
            description=data.get("description"),
            class_name=data.get("className"),
            value=data.get("value"),
            unserializable_value=data.get("unserializableValue"),
            preview=_optional(data, "preview", ObjectPreview.from_dict),
        )


@dataclass
class StackTraceId:
    """Identifies a stack trace held by another debugger."""

    id: str
    debugger_id: UniqueDebuggerId

    @classmethod
    def from_dict(cls, data: dict) -> "StackTraceId":
        return cls(id=data["id"], debugger_id=data["debugger_id"])


@dataclass
class CallFrame:
    function_name: str
    script_id: ScriptId
    url: str
    line_number: JsInt
    column_number: JsInt

    @classmethod
    def from_dict(cls, data: dict) -> "CallFrame":
        return cls(
            function_name=data["functionName"],
            script_id=data["scriptId"],
            url=data["url"],
            line_number=data["lineNumber"],
            column_number=data["columnNumber"],
        )


@dataclass
class StackTrace:
    call_frames: List[CallFrame]
    description: Optional[str] = None
    parent_id: Optional[StackTraceId] = None

    @classmethod
    def from_dict(cls, data: dict) -> "StackTrace":
        return cls(
            call_frames=[CallFrame.from_dict(item) for item in data["callFrames"]],
            description=data.get("description"),
            parent_id=_optional(data, "parentId", StackTraceId.from_dict),
        )


@dataclass
class CallFunctionOn(Method):
    NAME = "Runtime.callFunctionOn"

    object_id: str
    function_declaration: str
    return_by_value: bool = False
    generate_preview: bool = False
    silent: bool = False
    await_promise: bool = False

    def parse_result(self, result: dict) -> RemoteObject:
        return RemoteObject.from_dict(result["result"])


@dataclass
class Evaluate(Method):
    NAME = "Runtime.evaluate"

    expression: str
    include_command_line_api: bool = False
    silent: bool = False
    return_by_value: bool = False
    generate_preview: bool = False
    user_gesture: bool = False
    await_promise: bool = False

    def parse_result(self, result: dict) -> RemoteObject:
        return RemoteObject.from_dict(result["result"])


@dataclass
class Enable(Method):
    NAME = "Runtime.enable"


@dataclass
class Disable(Method):
    NAME = "Runtime.disable"


@dataclass
class ExceptionDetails:
    """Details of an exception thrown while compiling or running a script."""

    exception_id: JsInt
    text: str
    line_number: JsInt
    column_number: JsInt
    script_id: Optional[ScriptId] = None
    url: Optional[str] = None
    stack_trace: Optional[StackTrace] = None
    exception: Optional[RemoteObject] = None
    execution_context_id: Optional[JsInt] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ExceptionDetails":
        return cls(
            exception_id=data["exceptionId"],
            text=data["text"],
            line_number=data["lineNumber"],
            column_number=data["columnNumber"],
            script_id=data.get("scriptId"),
            url=data.get("url"),
            stack_trace=_optional(data, "stackTrace", StackTrace.from_dict),
            exception=_optional(data, "exception", RemoteObject.from_dict),
            execution_context_id=data.get("executionContextId"),
        )


@dataclass
class ExceptionThrown:
    """Issued when an exception was thrown and left unhandled."""

    timestamp: JsFloat
    exception_details: ExceptionDetails

    @classmethod
    def from_dict(cls, data: dict) -> "ExceptionThrown":
        return cls(
            timestamp=data["timestamp"],
            exception_details=ExceptionDetails.from_dict(data["exceptionDetails"]),
        )


@dataclass
class ExceptionThrownEvent:
    params: ExceptionThrown = field()

    @classmethod
    def from_dict(cls, data: dict) -> "ExceptionThrownEvent":
        return cls(params=ExceptionThrown.from_dict(data["params"]))