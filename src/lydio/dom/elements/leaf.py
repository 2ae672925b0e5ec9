from typing import List, Optional

from ..core import (
    SELF_CLOSING_TAGS, SEVERITY_WARNING, AuditResult, ElementDefinition, audit_spec, check_tag_name
)
from ..traits import Attributable, Auditable, Taggable


class Leaf(Attributable, Taggable, Auditable):
    """
    A self-closing element without children (img, br, meta, ...).
    Rendered as '<img ...>' or, in XML-compliant mode, '<img .../>'.
    """
    kind = "leaf"

    def __init__(self, tag_name: Optional[str] = None):
        super().__init__()
        if tag_name is not None:
            self.set_tag_name(tag_name)

    def _render(self, xml_compliant: bool) -> str:
        name = self._require_tag_name()
        closing = "/>" if xml_compliant else ">"
        return f"<{name}{self.render_attributes()}{closing}"


# --- RULES ---

@audit_spec(codes=["NOT_SELF_CLOSING"])
def check_self_closing(node: Leaf) -> List[AuditResult]:
    """Rule: only void element names may be built as a Leaf."""
    # A missing name is already reported by check_tag_name.
    if node.is_tag_name_valid() and node.tag_name not in SELF_CLOSING_TAGS:
        return [(
            "NOT_SELF_CLOSING",
            f"<{node.tag_name}> is not a self-closing tag, use Tag('{node.tag_name}') instead",
            SEVERITY_WARNING
        )]
    return []


# --- DEFINITION ---
DEFINITION = ElementDefinition(
    kind=Leaf.kind,
    model=Leaf,
    audit_rules=[check_tag_name, check_self_closing]
)
