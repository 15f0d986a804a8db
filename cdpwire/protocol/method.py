"""Method calls, responses and the shared wire types of the DevTools protocol."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional

JsInt = int
JsUInt = int
JsFloat = float
ScriptId = str
UniqueDebuggerId = str
CallId = int
WindowId = int


def to_camel(name: str) -> str:
    """Turn a snake_case name into the camelCase used on the wire."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _to_wire(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _fields_to_wire(value)
    if isinstance(value, (list, tuple)):
        return [_to_wire(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_wire(item) for key, item in value.items()}
    return value


def _fields_to_wire(obj: Any) -> dict:
    """Serialise a dataclass instance.

    Field metadata may carry ``"wire"`` (the key used on the wire) and
    ``"keep_none"`` (send ``null`` rather than leaving the key out).
    """
    out = {}
    for field in dataclasses.fields(obj):
        value = getattr(obj, field.name)
        if value is None and not field.metadata.get("keep_none", False):
            continue
        out[field.metadata.get("wire", to_camel(field.name))] = _to_wire(value)
    return out


class Method:
    """Base of every protocol method; subclasses are dataclasses with a NAME."""

    NAME: ClassVar[str]

    def to_params(self) -> dict:
        return _fields_to_wire(self)

    def to_method_call(self, call_id: CallId) -> "MethodCall":
        return MethodCall(method_name=self.NAME, id=call_id, params=self)

    def parse_result(self, result: Any) -> Any:
        """Turn the raw ``result`` of a response into this method's return value."""
        return result


@dataclass
class MethodCall:
    method_name: str
    id: CallId
    params: Method

    def to_json(self) -> str:
        payload = {"method": self.method_name, "id": self.id, "params": self.params.to_params()}
        return json.dumps(payload, separators=(",", ":"))


class RemoteError(Exception):
    """An error reported by the browser in reply to a method call."""

    def __init__(self, code: JsInt, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"Method call error {self.code}: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemoteError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))


@dataclass
class Response:
    call_id: CallId
    result: Optional[Any] = None
    error: Optional[RemoteError] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Response":
        if not isinstance(data, dict) or "id" not in data:
            raise ValueError("not a method response: no id")
        error = data.get("error")
        return cls(
            call_id=data["id"],
            result=data.get("result"),
            error=RemoteError(error["code"], error["message"]) if error is not None else None,
        )


def parse_response(response: Response) -> Any:
    """Return the raw result of ``response``, raising the error it carries."""
    if response.error is not None:
        raise response.error
    if response.result is None:
        raise ValueError(f"response {response.call_id} carries neither result nor error")
    return response.result