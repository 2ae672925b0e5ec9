from typing import Any

from ..core import Node


class Raw(Node):
    """Content emitted verbatim: no escaping, no stripping. The caller vouches for it."""
    kind = "raw"

    def __init__(self, content: Any = ""):
        super().__init__()
        self._content = ""
        self.set(content)

    def set(self, content: Any) -> "Raw":
        self._content = str(content)
        return self

    @property
    def content(self) -> str:
        return self._content

    def _render(self, xml_compliant: bool) -> str:
        return self._content
