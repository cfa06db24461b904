"""Build ADF documents from plain text."""

from __future__ import annotations

import re

from jira_assist.adf.nodes import ADFDocument, Doc, Paragraph, Text

# A newline, optional blank-line whitespace, then another newline.
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank lines, trimming each chunk and dropping empty ones."""
    chunks = (chunk.strip() for chunk in _PARAGRAPH_BREAK.split(text.strip()))
    return [chunk for chunk in chunks if chunk]


def text_to_tree(text: str | None) -> ADFDocument | None:
    """Convert plain text to an ADF document, one paragraph per blank-line block.

    Single newlines inside a block stay inside its one text node. Returns
    ``None`` when the text is missing or blank.
    """
    if text is None or not text.strip():
        return None

    paragraphs = split_paragraphs(text)
    if not paragraphs:
        return None

    doc = Doc(children=tuple(Paragraph(children=(Text(value=p),)) for p in paragraphs))
    return doc.to_dict()  # type: ignore[return-value]
