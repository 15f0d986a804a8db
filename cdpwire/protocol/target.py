"""The Target domain: pages, workers and sessions attached to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from cdpwire.protocol.method import JsInt, Method

TargetId = str


class TargetType(Enum):
    PAGE = "page"
    BACKGROUND_PAGE = "background_page"
    SERVICE_WORKER = "service_worker"
    BROWSER = "browser"
    OTHER = "other"

    def is_page(self) -> bool:
        return self is TargetType.PAGE


@dataclass
class TargetInfo:
    target_id: TargetId
    target_type: TargetType
    title: str
    url: str
    attached: bool
    opener_id: Optional[str] = None
    browser_context_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "TargetInfo":
        return cls(
            target_id=data["targetId"],
            target_type=TargetType(data["type"]),
            title=data["title"],
            url=data["url"],
            attached=data["attached"],
            opener_id=data.get("openerId"),
            browser_context_id=data.get("browserContextId"),
        )


@dataclass
class AttachedToTargetEvent:
    session_id: str
    target_info: TargetInfo
    waiting_for_debugger: bool

    @classmethod
    def from_dict(cls, data: dict) -> "AttachedToTargetEvent":
        params = data["params"]
        return cls(
            session_id=params["sessionId"],
            target_info=TargetInfo.from_dict(params["targetInfo"]),
            waiting_for_debugger=params["waitingForDebugger"],
        )


@dataclass
class ReceivedMessageFromTargetEvent:
    session_id: str
    target_id: TargetId
    message: str

    @classmethod
    def from_dict(cls, data: dict) -> "ReceivedMessageFromTargetEvent":
        params = data["params"]
        return cls(
            session_id=params["sessionId"],
            target_id=params["targetId"],
            message=params["message"],
        )


@dataclass
class TargetInfoChangedEvent:
    target_info: TargetInfo

    @classmethod
    def from_dict(cls, data: dict) -> "TargetInfoChangedEvent":
        return cls(target_info=TargetInfo.from_dict(data["params"]["targetInfo"]))


@dataclass
class TargetCreatedEvent:
    target_info: TargetInfo

    @classmethod
    def from_dict(cls, data: dict) -> "TargetCreatedEvent":
        return cls(target_info=TargetInfo.from_dict(data["params"]["targetInfo"]))


@dataclass
class TargetDestroyedEvent:
    target_id: TargetId

    @classmethod
    def from_dict(cls, data: dict) -> "TargetDestroyedEvent":
        return cls(target_id=data["params"]["targetId"])


@dataclass
class GetTargets(Method):
    NAME = "Target.getTargets"

    def parse_result(self, result: dict) -> List[TargetInfo]:
        return [TargetInfo.from_dict(item) for item in result["targetInfos"]]


@dataclass
class GetTargetInfo(Method):
    NAME = "Target.getTargetInfo"

    # Sent under its snake_case name, unlike the other methods' fields.
    target_id: str = field(metadata={"wire": "target_id"})

    def parse_result(self, result: dict) -> TargetInfo:
        return TargetInfo.from_dict(result["targetInfo"])


@dataclass
class CreateBrowserContext(Method):
    NAME = "Target.createBrowserContext"

    def parse_result(self, result: dict) -> str:
        return result["browserContextId"]


@dataclass
class CreateTarget(Method):
    """Opens a new page; width and height apply to headless browsers only."""

    NAME = "Target.createTarget"

    url: str
    width: Optional[JsInt] = None
    height: Optional[JsInt] = None
    browser_context_id: Optional[str] = None
    enable_begin_frame_control: Optional[bool] = None

    def parse_result(self, result: dict) -> TargetId:
        return result["targetId"]


@dataclass
class AttachToTarget(Method):
    NAME = "Target.attachToTarget"

    target_id: str
    flatten: Optional[bool] = None

    def parse_result(self, result: dict) -> str:
        return result["sessionId"]


@dataclass
class AttachToBrowserTarget(Method):
    NAME = "Target.attachToBrowserTarget"

    def parse_result(self, result: dict) -> str:
        return result["sessionId"]


@dataclass
class SetDiscoverTargets(Method):
    NAME = "Target.setDiscoverTargets"

    discover: bool


@dataclass
class SendMessageToTarget(Method):
    NAME = "Target.sendMessageToTarget"

    message: str
    target_id: Optional[str] = None
    session_id: Optional[str] = None


@dataclass
class ActivateTarget(Method):
    NAME = "Target.activateTarget"

    target_id: str


@dataclass
class CloseTarget(Method):
    """Closes the target; a page target gets closed too."""

    NAME = "Target.closeTarget"

    target_id: str

    def parse_result(self, result: dict) -> bool:
        return result["success"]