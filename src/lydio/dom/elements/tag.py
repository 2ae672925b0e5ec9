from typing import List, Optional

from ..core import (
    SELF_CLOSING_TAGS, SEVERITY_WARNING, AuditResult, ElementDefinition, audit_spec, check_tag_name
)
from ..traits import Attributable, Auditable, Container, Taggable


class Tag(Container, Attributable, Taggable, Auditable):
    """
    A standard element with an opening and a closing tag.

        Tag("div").cls("card").tag("p").text("Hello").root().to_html()
        -> '<div class="card"><p>Hello</p></div>'
    """
    kind = "tag"

    def __init__(self, tag_name: Optional[str] = None):
        super().__init__()
        if tag_name is not None:
            self.set_tag_name(tag_name)

    def _render(self, xml_compliant: bool) -> str:
        name = self._require_tag_name()
        return f"<{name}{self.render_attributes()}>{self._render_children(xml_compliant)}</{name}>"


# --- RULES ---

@audit_spec(codes=["SELF_CLOSING_AS_TAG"])
def check_not_self_closing(node: Tag) -> List[AuditResult]:
    """Rule: void element names (br, img, ...) must be built as a Leaf."""
    if node.tag_name in SELF_CLOSING_TAGS:
        return [(
            "SELF_CLOSING_AS_TAG",
            f"<{node.tag_name}> is a void element: a Tag should not be a self-closing tag, "
            f"use Leaf('{node.tag_name}') instead",
            SEVERITY_WARNING
        )]
    return []


# --- DEFINITION ---
DEFINITION = ElementDefinition(
    kind=Tag.kind,
    model=Tag,
    audit_rules=[check_tag_name, check_not_self_closing]
)
