# src/lydio/dom/builder.py
"""
Public entry point: the node kinds plus helpers for common document skeletons.

    from lydio.dom.builder import Tag, Leaf, make_document

    doc = make_document(title="Report")
    find_body(doc).tag("h1").text("Quarterly numbers")
    html = doc.to_html()
"""
import logging
from typing import Optional

from .core import MissingTagNameError, Node, TagNameError
from .elements.doctype import Doctype
from .elements.fragment import Fragment
from .elements.leaf import Leaf
from .elements.raw import Raw
from .elements.tag import Tag
from .elements.text import Text
from .models import AuditContext, Issue

logger = logging.getLogger(__name__)

__all__ = [
    "AuditContext", "Doctype", "Fragment", "Issue", "Leaf", "MissingTagNameError",
    "Node", "Raw", "Tag", "TagNameError", "Text",
    "find_body", "find_head", "make_document",
]


def make_document(
        title: Optional[str] = None,
        lang: Optional[str] = None,
        charset: Optional[str] = "utf-8"
) -> Fragment:
    """
    Creates a basic HTML5 document.

    Returns a Fragment holding '<!DOCTYPE html>' and an <html> element with a
    <head> (charset meta, optional title) and an empty <body>.
    """
    document = Fragment()
    document.doctype("html")
    html = document.tag("html")
    if lang:
        html.attr("lang", lang)

    head = html.tag("head")
    if charset:
        head.leaf("meta").attr("charset", charset)
    if title is not None:
        head.tag("title").text(title)
    html.tag("body")

    logger.debug("Document skeleton created (title=%r, lang=%r).", title, lang)
    return document


def _find_child_tag(parent: Node, tag_name: str) -> Optional[Tag]:
    for child in getattr(parent, "children", ()):
        if isinstance(child, Tag) and child.tag_name == tag_name:
            return child
    return None


def find_head(document: Fragment) -> Optional[Tag]:
    """Returns the <head> of a document created by make_document()."""
    html = _find_child_tag(document, "html")
    return _find_child_tag(html, "head") if html else None


def find_body(document: Fragment) -> Optional[Tag]:
    """Returns the <body> of a document created by make_document()."""
    html = _find_child_tag(document, "html")
    return _find_child_tag(html, "body") if html else None
