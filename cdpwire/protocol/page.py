"""The Page domain: frames, navigation, screenshots and printing."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from cdpwire.protocol.method import JsFloat, JsUInt, Method, to_camel


@dataclass
class Frame:
    id: str
    loader_id: str
    url: str
    security_origin: str
    mime_type: str
    parent_id: Optional[str] = None
    name: Optional[str] = None
    unreachable_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Frame":
        return cls(
            id=data["id"],
            loader_id=data["loaderId"],
            url=data["url"],
            security_origin=data["securityOrigin"],
            mime_type=data["mimeType"],
            parent_id=data.get("parentId"),
            name=data.get("name"),
            unreachable_url=data.get("unreachableUrl"),
        )


@dataclass
class Viewport:
    """Area to capture, in device independent pixels, with a page scale factor."""

    x: JsFloat
    y: JsFloat
    width: JsFloat
    height: JsFloat
    scale: JsFloat

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class ScreenshotFormat:
    """The format a screenshot is captured in; JPEG may carry a quality of 0 to 100."""

    name: str
    quality: Optional[JsUInt] = None

    def __post_init__(self) -> None:
        if self.name not in ("jpeg", "png"):
            raise ValueError(f"unknown screenshot format {self.name!r}")
        if self.quality is not None:
            if self.name != "jpeg":
                raise ValueError("only JPEG screenshots take a quality")
            if not 0 <= self.quality <= 100:
                raise ValueError(f"JPEG quality must be within 0..100, got {self.quality}")

    @classmethod
    def jpeg(cls, quality: Optional[JsUInt] = None) -> "ScreenshotFormat":
        return cls("jpeg", quality)

    @classmethod
    def png(cls) -> "ScreenshotFormat":
        return cls("png")


@dataclass
class PrintToPdfOptions:
    landscape: Optional[bool] = None
    display_header_footer: Optional[bool] = None
    print_background: Optional[bool] = None
    scale: Optional[float] = None
    paper_width: Optional[float] = None
    paper_height: Optional[float] = None
    margin_top: Optional[float] = None
    margin_bottom: Optional[float] = None
    margin_left: Optional[float] = None
    margin_right: Optional[float] = None
    page_ranges: Optional[str] = None
    ignore_invalid_page_ranges: Optional[str] = None
    header_template: Optional[str] = None
    footer_template: Optional[str] = None
    prefer_css_page_size: Optional[bool] = None

    def to_dict(self) -> dict:
        return {
            to_camel(f.name): getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class LifecycleEvent:
    frame_id: str
    loader_id: str
    name: str
    timestamp: float

    @classmethod
    def from_dict(cls, data: dict) -> "LifecycleEvent":
        params = data["params"]
        return cls(
            frame_id=params["frameId"],
            loader_id=params["loaderId"],
            name=params["name"],
            timestamp=params["timestamp"],
        )


@dataclass
class FrameStartedLoadingEvent:
    frame_id: str

    @classmethod
    def from_dict(cls, data: dict) -> "FrameStartedLoadingEvent":
        return cls(frame_id=data["params"]["frameId"])


@dataclass
class FrameNavigatedEvent:
    frame: Frame

    @classmethod
    def from_dict(cls, data: dict) -> "FrameNavigatedEvent":
        return cls(frame=Frame.from_dict(data["params"]["frame"]))


@dataclass
class FrameStoppedLoadingEvent:
    frame_id: str

    @classmethod
    def from_dict(cls, data: dict) -> "FrameStoppedLoadingEvent":
        return cls(frame_id=data["params"]["frameId"])


@dataclass
class CaptureScreenshot(Method):
    """Captures the page; the result is the base64-encoded image."""

    NAME = "Page.captureScreenshot"

    format: ScreenshotFormat
    from_surface: bool
    clip: Optional[Viewport] = None

    def to_params(self) -> dict:
        params: dict = {"format": self.format.name}
        if self.format.quality is not None:
            params["quality"] = self.format.quality
        if self.clip is not None:
            params["clip"] = self.clip.to_dict()
        params["fromSurface"] = self.from_surface
        return params

    def parse_result(self, result: dict) -> str:
        return result["data"]


@dataclass
class PrintToPdf(Method):
    """Prints the page; the result is the base64-encoded PDF."""

    NAME = "Page.printToPDF"

    options: Optional[PrintToPdfOptions] = None

    def to_params(self) -> dict:
        return self.options.to_dict() if self.options is not None else {}

    def parse_result(self, result: dict) -> str:
        return result["data"]


@dataclass
class Reload(Method):
    NAME = "Page.reload"

    ignore_cache: bool
    script_to_evaluate: Optional[str] = None


@dataclass
class SetLifecycleEventsEnabled(Method):
    NAME = "Page.setLifecycleEventsEnabled"

    enabled: bool


@dataclass
class FrameTree:
    frame: Frame
    child_frames: Optional[List["FrameTree"]] = None

    @classmethod
    def from_dict(cls, data: dict) -> "FrameTree":
        children = data.get("childFrames")
        return cls(
            frame=Frame.from_dict(data["frame"]),
            child_frames=[cls.from_dict(item) for item in children] if children is not None else None,
        )


@dataclass
class GetFrameTree(Method):
    NAME = "Page.getFrameTree"

    def parse_result(self, result: dict) -> FrameTree:
        return FrameTree.from_dict(result["frameTree"])


@dataclass
class NavigateResult:
    frame_id: str
    loader_id: Optional[str] = None
    error_text: Optional[str] = None


@dataclass
class Navigate(Method):
    NAME = "Page.navigate"

    url: str

    def parse_result(self, result: dict) -> NavigateResult:
        return NavigateResult(
            frame_id=result["frameId"],
            loader_id=result.get("loaderId"),
            error_text=result.get("errorText"),
        )


@dataclass
class Close(Method):
    """Tries to close the page, running its beforeunload hooks, if any."""

    NAME = "Page.close"


@dataclass
class Enable(Method):
    NAME = "Page.enable"


@dataclass
class SetInterceptFileChooserDialog(Method):
    NAME = "Page.setInterceptFileChooserDialog"

    enabled: bool


class FileChooserAction(Enum):
    ACCEPT = "accept"
    CANCEL = "cancel"
    FALLBACK = "fallback"


@dataclass
class HandleFileChooser(Method):
    NAME = "Page.handleFileChooser"

    action: FileChooserAction
    files: Optional[List[str]] = None