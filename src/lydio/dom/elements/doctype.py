from typing import List

from ..core import VALID_DOCTYPES, SEVERITY_WARNING, AuditResult, ElementDefinition, audit_spec
from ..traits import Auditable


class Doctype(Auditable):
    """
    The document preamble, rendered as '<!DOCTYPE {type}>'.

    Any type string renders as given. Unknown types are reported by the audit
    unless `force` is set.
    """
    kind = "doctype"

    def __init__(self, doctype_type: str = "html", force: bool = False):
        super().__init__()
        self._doctype_type = str(doctype_type)
        self._force = force

    @property
    def doctype_type(self) -> str:
        return self._doctype_type

    @property
    def force(self) -> bool:
        return self._force

    def _render(self, xml_compliant: bool) -> str:
        return f"<!DOCTYPE {self._doctype_type}>"


# --- RULES ---

@audit_spec(codes=["INVALID_DOCTYPE"])
def check_doctype(node: Doctype) -> List[AuditResult]:
    if node.force or node.doctype_type in VALID_DOCTYPES:
        return []
    return [(
        "INVALID_DOCTYPE",
        f"Unknown doctype '{node.doctype_type}' (expected one of {', '.join(sorted(VALID_DOCTYPES))})",
        SEVERITY_WARNING
    )]


# --- DEFINITION ---
DEFINITION = ElementDefinition(
    kind=Doctype.kind,
    model=Doctype,
    audit_rules=[check_doctype]
)
