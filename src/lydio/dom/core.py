# src/lydio/dom/core.py
from typing import Any, Callable, ClassVar, FrozenSet, List, Optional, Set, Tuple, Type

from lydio.core.managers.config_manager import resolve_xml_compliant

# Element names that must never have a closing tag.
SELF_CLOSING_TAGS: FrozenSet[str] = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img",
    "input", "link", "meta", "param", "source", "track", "wbr",
})

# Doctype identifiers accepted by the audit (rendering accepts anything).
VALID_DOCTYPES: FrozenSet[str] = frozenset({
    "html", "xhtml", "transitional", "strict", "frameset",
})

# Type alias for audit findings: (Code, Message, Severity)
AuditResult = Tuple[str, str, str]

SEVERITY_CRITICAL = "CRITICAL"
SEVERITY_WARNING = "WARNING"


class TagNameError(ValueError):
    """Raised when a tag name is empty or whitespace-only."""


class MissingTagNameError(RuntimeError):
    """Raised when an element without a tag name is rendered."""


def audit_spec(codes: List[str]):
    """
    Decorator to declare which issue codes a specific audit rule function returns.
    Facilitates auto-discovery by the DOMRegistry.
    """
    def decorator(func):
        func.defined_codes = codes
        return func
    return decorator


@audit_spec(codes=["MISSING_TAG_NAME"])
def check_tag_name(node: Any) -> List[AuditResult]:
    """Rule shared by Tag and Leaf: rendering without a tag name is fatal."""
    if node.is_tag_name_valid():
        return []
    return [(
        "MISSING_TAG_NAME",
        f"{type(node).__name__} has no tag name; to_html() would fail",
        SEVERITY_CRITICAL
    )]


class Node:
    """
    Base of every node kind in the tree.

    A node has a fixed `kind`, an optional caller-assigned identifier (only
    used to label audit issues) and a non-owning reference to the container
    it was appended to.
    """
    kind: ClassVar[str] = "node"

    def __init__(self):
        self._node_id: Optional[Any] = None
        self._parent: Optional["Node"] = None

    def set_id(self, value: Any) -> "Node":
        self._node_id = value
        return self

    def get_id(self) -> Optional[Any]:
        return self._node_id

    def parent(self) -> Optional["Node"]:
        return self._parent

    def get_parent(self) -> Optional["Node"]:
        return self.parent()

    def root(self) -> "Node":
        """Walks the parent chain up to the node that has no parent."""
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    def get_root(self) -> "Node":
        return self.root()

    def to_html(self, xml_compliant: Optional[bool] = None) -> str:
        """
        Serializes this node and its descendants.

        Args:
            xml_compliant: Render self-closing elements as '<tag/>'. When None,
                           the 'render.xml_compliant' setting is used.
        """
        return self._render(resolve_xml_compliant(xml_compliant))

    def _render(self, xml_compliant: bool) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_html()

    def __repr__(self) -> str:
        node_id = f" id={self._node_id!r}" if self._node_id is not None else ""
        return f"<{type(self).__name__}{node_id}>"


class ElementDefinition:
    """
    Configuration object binding a node kind to its model class and audit rules.
    """

    def __init__(
            self,
            kind: str,
            model: Type[Node],
            audit_rules: Optional[List[Callable[[Any], List[AuditResult]]]] = None,
            possible_codes: Optional[List[str]] = None
    ):
        self.kind = kind
        self.model = model
        self.audit_rules = audit_rules or []

        # --- Auto-Discovery of Issue Codes ---
        final_codes: Set[str] = set(possible_codes or [])

        for rule in self.audit_rules:
            if hasattr(rule, 'defined_codes'):
                final_codes.update(rule.defined_codes)

        self.codes = sorted(list(final_codes))
