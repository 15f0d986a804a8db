"""The Browser domain: version information and window bounds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cdpwire.protocol.method import JsUInt, Method, WindowId


class WindowState(Enum):
    NORMAL = "normal"
    MINIMIZED = "minimized"
    MAXIMIZED = "maximized"
    FULLSCREEN = "fullscreen"


@dataclass
class WindowBounds:
    """Window position and state as sent on the wire; unset coordinates are left out."""

    window_state: WindowState
    left: Optional[JsUInt] = None
    top: Optional[JsUInt] = None
    width: Optional[JsUInt] = None
    height: Optional[JsUInt] = None

    def to_dict(self) -> dict:
        coordinates = {
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
        }
        out = {key: value for key, value in coordinates.items() if value is not None}
        out["windowState"] = self.window_state.value
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "WindowBounds":
        return cls(
            window_state=WindowState(data["windowState"]),
            left=data.get("left"),
            top=data.get("top"),
            width=data.get("width"),
            height=data.get("height"),
        )


@dataclass(frozen=True)
class Bounds:
    """Requested window bounds; coordinates may be given for the normal state only."""

    state: WindowState = WindowState.NORMAL
    left: Optional[JsUInt] = None
    top: Optional[JsUInt] = None
    width: Optional[JsUInt] = None
    height: Optional[JsUInt] = None

    def __post_init__(self) -> None:
        if self.state is not WindowState.NORMAL and any(
            value is not None for value in (self.left, self.top, self.width, self.height)
        ):
            raise ValueError(f"coordinates can only be set for the normal state, not {self.state.value}")

    @classmethod
    def normal(cls) -> "Bounds":
        """Normal window state without setting any coordinates."""
        return cls(WindowState.NORMAL)

    @classmethod
    def minimized(cls) -> "Bounds":
        return cls(WindowState.MINIMIZED)

    @classmethod
    def maximized(cls) -> "Bounds":
        return cls(WindowState.MAXIMIZED)

    @classmethod
    def fullscreen(cls) -> "Bounds":
        return cls(WindowState.FULLSCREEN)

    def to_window_bounds(self) -> WindowBounds:
        return WindowBounds(
            window_state=self.state,
            left=self.left,
            top=self.top,
            width=self.width,
            height=self.height,
        )


@dataclass
class CurrentBounds:
    """Window bounds as reported by the browser, with every coordinate known."""

    left: JsUInt
    top: JsUInt
    width: JsUInt
    height: JsUInt
    state: WindowState

    @classmethod
    def from_window_bounds(cls, bounds: WindowBounds) -> "CurrentBounds":
        missing = [
            name
            for name in ("left", "top", "width", "height")
            if getattr(bounds, name) is None
        ]
        if missing:
            raise ValueError(f"window bounds lack {', '.join(missing)}")
        return cls(
            left=bounds.left,
            top=bounds.top,
            width=bounds.width,
            height=bounds.height,
            state=bounds.window_state,
        )


@dataclass
class VersionInformation:
    """Version information returned by ``Browser.getVersion``."""

    protocol_version: str
    product: str
    revision: str
    user_agent: str
    js_version: str

    @classmethod
    def from_dict(cls, data: dict) -> "VersionInformation":
        return cls(
            protocol_version=data["protocolVersion"],
            product=data["product"],
            revision=data["revision"],
            user_agent=data["userAgent"],
            js_version=data["jsVersion"],
        )


@dataclass
class GetVersion(Method):
    NAME = "Browser.getVersion"

    def parse_result(self, result: dict) -> VersionInformation:
        return VersionInformation.from_dict(result)


@dataclass
class SetWindowBounds(Method):
    NAME = "Browser.setWindowBounds"

    window_id: WindowId
    bounds: WindowBounds


@dataclass
class WindowForTarget:
    """The window holding a target, with its bounds."""

    window_id: WindowId
    bounds: WindowBounds


@dataclass
class GetWindowForTarget(Method):
    NAME = "Browser.getWindowForTarget"

    target_id: str

    def parse_result(self, result: dict) -> WindowForTarget:
        return WindowForTarget(
            window_id=result["windowId"],
            bounds=WindowBounds.from_dict(result["bounds"]),
        )