from jira_assist.adf.builder import text_to_tree
from jira_assist.adf.nodes import ADFDocument, ADFNode, Mark, MarkType, Node, parse_node
from jira_assist.adf.normalizer import ensure_document, is_document
from jira_assist.adf.renderer import MarkdownRenderer, extract_plain_text, render

__all__ = [
    "ADFDocument",
    "ADFNode",
    "Mark",
    "MarkType",
    "MarkdownRenderer",
    "Node",
    "ensure_document",
    "extract_plain_text",
    "is_document",
    "parse_node",
    "render",
    "text_to_tree",
]
