"""Normalize the many shapes of Jira rich-text input into one ADF document.

Tools accept descriptions and comments as plain text, as a bare ADF node, or
as a complete ADF document. :func:`ensure_document` turns all of them into the
document shape the REST API expects.

A value that already is a document is returned as the very same object, and a
bare node is wrapped without copying. Callers share these dicts and must not
mutate them.
"""

from __future__ import annotations

from typing import Any

from jira_assist.adf.builder import text_to_tree
from jira_assist.adf.nodes import ADF_VERSION, NODE_CLASSES, ADFDocument, Doc, as_int


def is_document(value: Any) -> bool:
    """True for a dict shaped like a complete ADF document."""
    return (
        isinstance(value, dict)
        and value.get("type") == "doc"
        and as_int(value.get("version")) is not None
        and isinstance(value.get("content"), list)
    )


def _is_node(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get("type"), str)


def _wrap(content: list[Any]) -> ADFDocument:
    return {"version": ADF_VERSION, "type": "doc", "content": content}


def ensure_document(value: Any) -> ADFDocument | None:
    """Return *value* as an ADF document, or ``None`` if it holds no content.

    Dict input is reused by reference. Typed nodes from
    :mod:`jira_assist.adf.nodes` are serialized with ``to_dict()`` instead, so
    the returned document never contains the typed node itself.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return text_to_tree(value)
    if is_document(value):
        return value
    if _is_node(value):
        if value["type"] == "doc":
            content = value.get("content")
            return _wrap(content if isinstance(content, list) else [])
        return _wrap([value])
    if isinstance(value, Doc):
        return value.to_dict()  # type: ignore[return-value]
    if isinstance(value, NODE_CLASSES):
        return _wrap([value.to_dict()])
    return None
