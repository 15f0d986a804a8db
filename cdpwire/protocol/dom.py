"""The DOM domain: document nodes, queries and box models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from cdpwire.protocol.method import JsFloat, JsInt, JsUInt, Method

T = TypeVar("T")

NodeId = JsUInt
NodeAttributes = Dict[str, str]
Quad = Tuple[JsFloat, JsFloat, JsFloat, JsFloat, JsFloat, JsFloat, JsFloat, JsFloat]


def _optional(data: dict, key: str, parse: Callable[[Any], T]) -> Optional[T]:
    value = data.get(key)
    return parse(value) if value is not None else None


def _quad(values: Sequence[JsFloat]) -> Quad:
    if len(values) != 8:
        raise ValueError(f"a quad has 8 coordinates, got {len(values)}")
    return tuple(values)  # type: ignore[return-value]


def parse_attributes(values: Sequence[str]) -> NodeAttributes:
    """Turn the flat ``[name, value, name, value, ...]`` list into a mapping."""
    if len(values) % 2:
        raise ValueError("attribute list holds a name without a value")
    pairs = iter(values)
    return dict(zip(pairs, pairs))


class PseudoType(Enum):
    FIRST_LINE = "first-line"
    FIRST_LETTER = "first-letter"
    BEFORE = "before"
    AFTER = "after"
    BACKDROP = "backdrop"
    SELECTION = "selection"
    FIRST_LINE_INHERITED = "first-line-inherited"
    SCROLLBAR = "scrollbar"
    SCROLLBAR_THUMB = "scrollbar-thumb"
    SCROLLBAR_BUTTON = "scrollbar-button"
    SCROLLBAR_TRACK = "scrollbar-track"
    SCROLLBAR_TRACK_PIECE = "scrollbar-track-piece"
    SCROLLBAR_CORNER = "scrollbar-corner"
    RESIZER = "resizer"
    INPUT_LIST_BUTTON = "input-list-button"


class ShadowRootType(Enum):
    USER_AGENT = "user-agent"
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class BackendNode:
    node_type: NodeId
    node_name: str
    backend_node_id: NodeId

    @classmethod
    def from_dict(cls, data: dict) -> "BackendNode":
        return cls(
            node_type=data["nodeType"],
            node_name=data["nodeName"],
            backend_node_id=data["backendNodeId"],
        )


@dataclass
class Node:
    node_id: NodeId
    backend_node_id: NodeId
    node_value: str
    node_name: str
    node_type: JsUInt
    local_name: str
    children: Optional[List["Node"]] = None
    parent_id: Optional[NodeId] = None
    attributes: Optional[NodeAttributes] = None
    child_node_count: Optional[JsUInt] = None
    document_url: Optional[str] = None
    base_url: Optional[str] = None
    public_id: Optional[str] = None
    system_id: Optional[str] = None
    internal_subset: Optional[str] = None
    xml_version: Optional[str] = None
    name: Optional[str] = None
    value: Optional[str] = None
    pseudo_type: Optional[PseudoType] = None
    shadow_root_type: Optional[ShadowRootType] = None
    frame_id: Optional[str] = None
    content_document: Optional["Node"] = None
    shadow_roots: Optional[List["Node"]] = None
    pseudo_elements: Optional[List["Node"]] = None
    imported_document: Optional["Node"] = None
    distributed_nodes: Optional[List[BackendNode]] = None
    is_svg: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        def nodes(items: list) -> List["Node"]:
            return [cls.from_dict(item) for item in items]

        return cls(
            node_id=data["nodeId"],
            backend_node_id=data["backendNodeId"],
            node_value=data["nodeValue"],
            node_name=data["nodeName"],
            node_type=data["nodeType"],
            local_name=data["localName"],
            children=_optional(data, "children", nodes),
            parent_id=data.get("parentId"),
            attributes=_optional(data, "attributes", parse_attributes),
            child_node_count=data.get("childNodeCount"),
            document_url=data.get("documentURL"),
            base_url=data.get("baseURL"),
            public_id=data.get("publicId"),
            system_id=data.get("systemId"),
            internal_subset=data.get("internalSubset"),
            xml_version=data.get("xmlVersion"),
            name=data.get("name"),
            value=data.get("value"),
            pseudo_type=_optional(data, "pseudoType", PseudoType),
            shadow_root_type=_optional(data, "shadowRootType", ShadowRootType),
            frame_id=data.get("frameId"),
            content_document=_optional(data, "contentDocument", cls.from_dict),
            shadow_roots=_optional(data, "shadowRoots", nodes),
            pseudo_elements=_optional(data, "pseudoElements", nodes),
            imported_document=_optional(data, "importedDocument", cls.from_dict),
            distributed_nodes=_optional(
                data,
                "distributedNodes",
                lambda items: [BackendNode.from_dict(item) for item in items],
            ),
            is_svg=data.get("isSVG"),
        )

    def find(self, predicate: Callable[["Node"], bool]) -> Optional["Node"]:
        """Return a node for which ``predicate`` holds, searching down the children.

        A matching node's own children are not searched; once a match is
        found, remaining siblings are still tested and a later match wins.
        """
        found: Optional[Node] = None

        def visit(node: Node) -> None:
            nonlocal found
            if predicate(node):
                found = node
            elif found is None:
                for child in node.children or ():
                    visit(child)

        visit(self)
        return found


@dataclass
class BoxModel:
    content: Quad
    padding: Quad
    border: Quad
    margin: Quad
    width: JsUInt
    height: JsUInt

    @classmethod
    def from_dict(cls, data: dict) -> "BoxModel":
        return cls(
            content=_quad(data["content"]),
            padding=_quad(data["padding"]),
            border=_quad(data["border"]),
            margin=_quad(data["margin"]),
            width=data["width"],
            height=data["height"],
        )


@dataclass
class GetDocument(Method):
    NAME = "DOM.getDocument"

    depth: Optional[JsInt] = field(default=None, metadata={"keep_none": True})
    pierce: Optional[bool] = field(default=None, metadata={"keep_none": True})

    def parse_result(self, result: dict) -> Node:
        return Node.from_dict(result["root"])


@dataclass
class DescribeNode(Method):
    NAME = "DOM.describeNode"

    node_id: Optional[NodeId] = None
    backend_node_id: Optional[NodeId] = None
    depth: Optional[JsInt] = field(default=None, metadata={"keep_none": True})

    def parse_result(self, result: dict) -> Node:
        return Node.from_dict(result["node"])


@dataclass
class Focus(Method):
    NAME = "DOM.focus"

    node_id: Optional[NodeId] = None
    backend_node_id: Optional[NodeId] = None
    object_id: Optional[str] = None


@dataclass
class SetFileInputFiles(Method):
    NAME = "DOM.setFileInputFiles"

    files: List[str]
    node_id: Optional[NodeId] = None
    backend_node_id: Optional[NodeId] = None
    object_id: Optional[str] = None


@dataclass
class QuerySelector(Method):
    NAME = "DOM.querySelector"

    node_id: NodeId
    selector: str

    def parse_result(self, result: dict) -> NodeId:
        return result["nodeId"]


@dataclass
class QuerySelectorAll(Method):
    NAME = "DOM.querySelectorAll"

    node_id: NodeId
    selector: str

    def parse_result(self, result: dict) -> List[NodeId]:
        return list(result["nodeIds"])


@dataclass
class ResolveNode(Method):
    """Resolves a node to a JavaScript object; the result is its object id, if any."""

    NAME = "DOM.resolveNode"

    backend_node_id: Optional[NodeId] = field(default=None, metadata={"keep_none": True})

    def parse_result(self, result: dict) -> Optional[str]:
        return result["object"].get("objectId")


@dataclass
class GetContentQuads(Method):
    NAME = "DOM.getContentQuads"

    node_id: Optional[NodeId] = None
    backend_node_id: Optional[NodeId] = None
    object_id: Optional[str] = None

    def parse_result(self, result: dict) -> List[Quad]:
        return [_quad(item) for item in result["quads"]]


@dataclass
class GetBoxModel(Method):
    NAME = "DOM.getBoxModel"

    node_id: Optional[NodeId] = None
    backend_node_id: Optional[NodeId] = None
    object_id: Optional[str] = None

    def parse_result(self, result: dict) -> BoxModel:
        return BoxModel.from_dict(result["model"])