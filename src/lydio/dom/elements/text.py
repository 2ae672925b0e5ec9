from typing import Any

from lydio.utils.markup import escape_html, strip_dangerous_tags
from ..core import Node


class Text(Node):
    """
    Character data. Tags of a fixed denylist (script, iframe, ...) are stripped
    when the content is assigned; the rest is escaped when rendered.
    """
    kind = "text"

    def __init__(self, content: Any = ""):
        super().__init__()
        self._content = ""
        self.set(content)

    def set(self, content: Any) -> "Text":
        self._content = strip_dangerous_tags(content)
        return self

    @property
    def content(self) -> str:
        return self._content

    def _render(self, xml_compliant: bool) -> str:
        return escape_html(self._content)
