"""Typed model of Atlassian Document Format (ADF) trees.

Jira REST API v3 sends and accepts rich text as ADF, a JSON tree of nodes.
This module maps the wire dicts onto a closed set of frozen dataclasses so the
renderer can dispatch on node class instead of string tags. Any node type
outside the set becomes :class:`Unknown`, which keeps its children so no text
is lost when Jira introduces new node kinds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, TypedDict, Union

ADF_VERSION = 1


class ADFNode(TypedDict, total=False):
    type: str
    content: list[ADFNode]
    text: str
    attrs: dict[str, Any]
    marks: list[dict[str, Any]]


class ADFDocument(TypedDict):
    version: int
    type: str
    content: list[ADFNode]


class MarkType(str, Enum):
    """Inline formatting marks understood by the renderer."""

    STRONG = "strong"
    EM = "em"
    CODE = "code"
    STRIKE = "strike"
    LINK = "link"


@dataclass(frozen=True)
class Mark:
    type: MarkType
    href: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value}
        if self.href is not None:
            data["attrs"] = {"href": self.href}
        return data


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Container:
    adf_type: ClassVar[str] = ""

    children: tuple[Node, ...] = ()

    def _attrs(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.adf_type,
            "content": [child.to_dict() for child in self.children],
        }
        attrs = self._attrs()
        if attrs:
            data["attrs"] = attrs
        return data


@dataclass(frozen=True)
class Doc(_Container):
    adf_type: ClassVar[str] = "doc"

    def to_dict(self) -> dict[str, Any]:
        return {"version": ADF_VERSION, **super().to_dict()}


@dataclass(frozen=True)
class Paragraph(_Container):
    adf_type: ClassVar[str] = "paragraph"


@dataclass(frozen=True)
class Heading(_Container):
    adf_type: ClassVar[str] = "heading"

    level: int | None = None

    def _attrs(self) -> dict[str, Any]:
        return {"level": self.level} if self.level is not None else {}


@dataclass(frozen=True)
class CodeBlock(_Container):
    adf_type: ClassVar[str] = "codeBlock"

    language: str | None = None

    def _attrs(self) -> dict[str, Any]:
        return {"language": self.language} if self.language else {}


@dataclass(frozen=True)
class ListItem(_Container):
    adf_type: ClassVar[str] = "listItem"


@dataclass(frozen=True)
class BulletList(_Container):
    adf_type: ClassVar[str] = "bulletList"

    @property
    def items(self) -> tuple[Node, ...]:
        return self.children


@dataclass(frozen=True)
class OrderedList(_Container):
    adf_type: ClassVar[str] = "orderedList"

    @property
    def items(self) -> tuple[Node, ...]:
        return self.children


@dataclass(frozen=True)
class Blockquote(_Container):
    adf_type: ClassVar[str] = "blockquote"


@dataclass(frozen=True)
class HardBreak:
    adf_type: ClassVar[str] = "hardBreak"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.adf_type}


@dataclass(frozen=True)
class Rule:
    adf_type: ClassVar[str] = "rule"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.adf_type}


@dataclass(frozen=True)
class Text:
    adf_type: ClassVar[str] = "text"

    value: str = ""
    marks: tuple[Mark, ...] = field(default=())

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.adf_type, "text": self.value}
        if self.marks:
            data["marks"] = [mark.to_dict() for mark in self.marks]
        return data


@dataclass(frozen=True)
class Unknown(_Container):
    """A node type this package does not model. Only its children survive."""

    raw_type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.raw_type,
            "content": [child.to_dict() for child in self.children],
        }


Node = Union[
    Doc,
    Paragraph,
    Heading,
    CodeBlock,
    BulletList,
    OrderedList,
    ListItem,
    Blockquote,
    HardBreak,
    Rule,
    Text,
    Unknown,
]

NODE_CLASSES: tuple[type, ...] = Node.__args__  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Parsing wire dicts
# ---------------------------------------------------------------------------


def parse_marks(raw_marks: Any) -> tuple[Mark, ...]:
    """Keep the marks we understand; anything else is dropped silently."""
    if not isinstance(raw_marks, list):
        return ()
    marks: list[Mark] = []
    for raw in raw_marks:
        if not isinstance(raw, dict):
            continue
        try:
            mark_type = MarkType(raw.get("type"))
        except ValueError:
            continue
        if mark_type is MarkType.LINK:
            href = _attrs(raw).get("href")
            if not isinstance(href, str) or not href:
                continue
            marks.append(Mark(mark_type, href=href))
        else:
            marks.append(Mark(mark_type))
    return tuple(marks)


def parse_children(raw_content: Any) -> tuple[Node, ...]:
    if not isinstance(raw_content, list):
        return ()
    return tuple(parse_node(child) for child in raw_content if isinstance(child, dict))


def _attrs(raw: dict[str, Any]) -> dict[str, Any]:
    attrs = raw.get("attrs")
    return attrs if isinstance(attrs, dict) else {}


def as_int(value: Any) -> int | None:
    """Return *value* as an int if it is an int or an integral float, else ``None``.

    JSON does not distinguish ``2`` from ``2.0``; booleans are not numbers here.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _parse_heading(raw: dict[str, Any]) -> Heading:
    level = as_int(_attrs(raw).get("level"))
    return Heading(children=parse_children(raw.get("content")), level=level)


def _parse_code_block(raw: dict[str, Any]) -> CodeBlock:
    language = _attrs(raw).get("language")
    if not isinstance(language, str) or not language:
        language = None
    return CodeBlock(children=parse_children(raw.get("content")), language=language)


def _parse_text(raw: dict[str, Any]) -> Text:
    value = raw.get("text")
    return Text(
        value=value if isinstance(value, str) else "",
        marks=parse_marks(raw.get("marks")),
    )


def _container(cls: type) -> Callable[[dict[str, Any]], Node]:
    def parse(raw: dict[str, Any]) -> Node:
        return cls(children=parse_children(raw.get("content")))

    return parse


_PARSERS: dict[str, Callable[[dict[str, Any]], Node]] = {
    "doc": _container(Doc),
    "paragraph": _container(Paragraph),
    "heading": _parse_heading,
    "codeBlock": _parse_code_block,
    "bulletList": _container(BulletList),
    "orderedList": _container(OrderedList),
    "listItem": _container(ListItem),
    "blockquote": _container(Blockquote),
    "hardBreak": lambda raw: HardBreak(),
    "rule": lambda raw: Rule(),
    "text": _parse_text,
}


def parse_node(raw: dict[str, Any]) -> Node:
    """Convert a JSON-deserialized ADF node into its typed representation.

    Never raises: malformed attributes are treated as absent and unknown
    node types become :class:`Unknown`.
    """
    raw_type = raw.get("type")
    parser = _PARSERS.get(raw_type) if isinstance(raw_type, str) else None
    if parser is not None:
        return parser(raw)
    return Unknown(
        children=parse_children(raw.get("content")),
        raw_type=raw_type if isinstance(raw_type, str) else "",
    )
