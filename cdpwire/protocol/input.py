"""The Input domain: synthetic mouse and keyboard events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from cdpwire.protocol.method import JsFloat, JsUInt, Method


@dataclass
class DispatchMouseEvent(Method):
    NAME = "Input.dispatchMouseEvent"

    event_type: str = field(default="mouseMoved", metadata={"wire": "type"})
    x: JsFloat = 0.0
    y: JsFloat = 0.0
    button: Optional[str] = None
    click_count: Optional[JsUInt] = None


@dataclass
class DispatchKeyEvent(Method):
    NAME = "Input.dispatchKeyEvent"

    event_type: str = field(metadata={"wire": "type"})
    windows_virtual_key_code: JsUInt
    native_virtual_key_code: JsUInt
    key: Optional[str] = None
    text: Optional[str] = None
    code: Optional[str] = None