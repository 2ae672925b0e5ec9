from ..core import ElementDefinition
from ..traits import Auditable, Container


class Fragment(Container, Auditable):
    """Groups nodes without emitting markup of its own."""
    kind = "fragment"

    def _render(self, xml_compliant: bool) -> str:
        return self._render_children(xml_compliant)


# No local rules; the audit only propagates to the children.
DEFINITION = ElementDefinition(
    kind=Fragment.kind,
    model=Fragment
)
