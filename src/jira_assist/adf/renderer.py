"""ADF tree to Markdown renderer.

Converts Jira rich text (ADF dicts as returned by the API, or typed nodes from
:mod:`jira_assist.adf.nodes`) into Markdown for display to the assistant.
Plain strings pass through untouched so legacy plain-text descriptions keep
working.

Usage::

    from jira_assist.adf import render

    markdown = render(issue["fields"]["description"])
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from jira_assist.adf.nodes import (
    NODE_CLASSES,
    Blockquote,
    BulletList,
    CodeBlock,
    Doc,
    HardBreak,
    Heading,
    ListItem,
    Mark,
    MarkType,
    Node,
    OrderedList,
    Paragraph,
    Rule,
    Text,
    Unknown,
    parse_node,
)

BLOCK_SEPARATOR = "\n\n"

# Innermost first. Source order of marks on a text run does not matter.
_MARK_NESTING: tuple[MarkType, ...] = (
    MarkType.CODE,
    MarkType.EM,
    MarkType.STRIKE,
    MarkType.STRONG,
    MarkType.LINK,
)


def _coerce(value: dict[str, Any] | Node) -> Node:
    return parse_node(value) if isinstance(value, dict) else value


class MarkdownRenderer:
    """Stateless renderer that converts ADF nodes to Markdown."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, value: Any) -> str:
        """Render an ADF tree, a single node, or a string to Markdown.

        ``None`` and values that are not ADF render as an empty string. Trees
        nested deeper than the interpreter's recursion limit fall back to
        their plain text.
        """
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, list):
            return "".join(self.render(item) for item in value)
        if not isinstance(value, (dict, *NODE_CLASSES)):
            return ""
        try:
            return self.render_node(_coerce(value))
        except RecursionError:
            return "".join(iter_text(value))

    def render_node(self, node: Node) -> str:
        renderer = _NODE_RENDERERS.get(type(node), MarkdownRenderer._render_children)
        return renderer(self, node)

    def extract_plain_text(self, value: Any) -> str:
        """Concatenate the text of every text node, without any separators.

        Block boundaries are not preserved: a heading's text runs straight
        into the following paragraph's text.
        """
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, list):
            return "".join(self.extract_plain_text(item) for item in value)
        if not isinstance(value, (dict, *NODE_CLASSES)):
            return ""
        return "".join(iter_text(value))

    # ------------------------------------------------------------------
    # Internal: per-node renderers
    # ------------------------------------------------------------------

    def _render_children(self, node: Node) -> str:
        return "".join(self.render_node(child) for child in getattr(node, "children", ()))

    def _render_paragraph(self, node: Paragraph) -> str:
        return self._render_children(node) + BLOCK_SEPARATOR

    def _render_heading(self, node: Heading) -> str:
        level = min(max(node.level or 1, 1), 6)
        return f"{'#' * level} {self._render_children(node)}{BLOCK_SEPARATOR}"

    def _render_code_block(self, node: CodeBlock) -> str:
        code = "".join(_plain_text(child) for child in node.children)
        return f"```{node.language or ''}\n{code}\n```{BLOCK_SEPARATOR}"

    def _render_bullet_list(self, node: BulletList) -> str:
        items = "".join(
            f"- {self._list_item_body(item)}{BLOCK_SEPARATOR}" for item in node.items
        )
        return f"{items}\n"

    def _render_ordered_list(self, node: OrderedList) -> str:
        items = "".join(
            f"{index}. {self._list_item_body(item)}{BLOCK_SEPARATOR}"
            for index, item in enumerate(node.items, start=1)
        )
        return f"{items}\n"

    def _render_list_item(self, node: ListItem) -> str:
        return f"- {self._list_item_body(node)}{BLOCK_SEPARATOR}"

    def _list_item_body(self, item: Node) -> str:
        if isinstance(item, ListItem):
            return self._render_children(item).strip()
        return self.render_node(item).strip()

    def _render_blockquote(self, node: Blockquote) -> str:
        lines = self._render_children(node).split("\n")
        return "\n".join(f"> {line}" for line in lines) + BLOCK_SEPARATOR

    def _render_hard_break(self, node: HardBreak) -> str:
        return "\n"

    def _render_rule(self, node: Rule) -> str:
        return "\n---\n\n"

    def _render_text(self, node: Text) -> str:
        return apply_marks(node.value, node.marks)


_NODE_RENDERERS: dict[type, Callable[[MarkdownRenderer, Any], str]] = {
    Doc: MarkdownRenderer._render_children,
    Paragraph: MarkdownRenderer._render_paragraph,
    Heading: MarkdownRenderer._render_heading,
    CodeBlock: MarkdownRenderer._render_code_block,
    BulletList: MarkdownRenderer._render_bullet_list,
    OrderedList: MarkdownRenderer._render_ordered_list,
    ListItem: MarkdownRenderer._render_list_item,
    Blockquote: MarkdownRenderer._render_blockquote,
    HardBreak: MarkdownRenderer._render_hard_break,
    Rule: MarkdownRenderer._render_rule,
    Text: MarkdownRenderer._render_text,
    Unknown: MarkdownRenderer._render_children,
}


def apply_marks(text: str, marks: tuple[Mark, ...]) -> str:
    """Wrap *text* in Markdown syntax for each mark, innermost first."""
    by_type = {mark.type: mark for mark in marks}
    for mark_type in _MARK_NESTING:
        mark = by_type.get(mark_type)
        if mark is None:
            continue
        if mark_type is MarkType.CODE:
            text = f"`{text}`"
        elif mark_type is MarkType.EM:
            text = f"*{text}*"
        elif mark_type is MarkType.STRIKE:
            text = f"~~{text}~~"
        elif mark_type is MarkType.STRONG:
            text = f"**{text}**"
        elif mark_type is MarkType.LINK:
            text = f"[{text}]({mark.href})"
    return text


_CHILDLESS_TYPES = frozenset({"hardBreak", "rule"})


def iter_text(root: Any) -> Iterator[str]:
    """Yield the text runs of an ADF dict or typed node in document order.

    Walks with an explicit stack so depth is unbounded. Raw dicts are read
    the same way :func:`parse_node` reads them.
    """
    stack = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, Text):
            yield item.value
            continue
        if isinstance(item, dict):
            kind = item.get("type")
            if kind == "text":
                text = item.get("text")
                if isinstance(text, str):
                    yield text
                continue
            if kind in _CHILDLESS_TYPES:
                continue
            content = item.get("content")
            children = [c for c in content if isinstance(c, dict)] if isinstance(content, list) else []
        else:
            children = getattr(item, "children", ())
        stack.extend(reversed(children))


def _plain_text(node: Node) -> str:
    return "".join(iter_text(node))


_default_renderer = MarkdownRenderer()


def render(value: Any) -> str:
    """Render ADF (or a plain string) to Markdown. See :class:`MarkdownRenderer`."""
    return _default_renderer.render(value)


def extract_plain_text(value: Any) -> str:
    """Return only the text content of an ADF tree."""
    return _default_renderer.extract_plain_text(value)
