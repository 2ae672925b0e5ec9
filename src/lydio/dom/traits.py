# src/lydio/dom/traits.py
"""
Capability mixins composed onto Node to build the concrete node kinds.

    Container     ordered children, append and child factories
    Attributable  classes, element id, attributes and inline styles
    Taggable      validated tag name
    Auditable     structural audit walk

Each mixin is independent; a concrete kind inherits exactly the ones it needs
(e.g. `class Tag(Container, Attributable, Taggable, Auditable)`).
"""
import logging
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from lydio.core.managers.config_manager import config_manager
from lydio.utils.markup import escape_html
from .core import MissingTagNameError, Node, TagNameError
from .models import AuditContext, Issue
from .registry import DOMRegistry

logger = logging.getLogger(__name__)


class Container(Node):
    """Owns an ordered list of child nodes."""

    def __init__(self):
        super().__init__()
        self._children: List[Node] = []

    @property
    def children(self) -> Tuple[Node, ...]:
        return tuple(self._children)

    def _attach(self, node: Node) -> None:
        if not isinstance(node, Node):
            raise TypeError(f"Can only append Node instances, got {type(node).__name__}")

        # Containment is checked through the children lists, not parent
        # pointers: re-parenting leaves stale child entries behind.
        pending: List[Node] = [node]
        while pending:
            current = pending.pop()
            if current is self:
                raise ValueError(f"Cannot append {node!r} to itself or to one of its descendants")
            pending.extend(getattr(current, "_children", ()))

        previous = node.parent()
        if previous is not None and previous is not self:
            logger.warning(
                "%r is re-parented from %r to %r; the previous container still lists it as a child.",
                node, previous, self
            )
        node._parent = self
        self._children.append(node)

    def append(self, node: Node) -> "Container":
        """Appends `node` and returns this container."""
        self._attach(node)
        return self

    def add_element(self, node: Node) -> "Container":
        return self.append(node)

    def add(self, node: Node) -> "Container":
        return self.append(node)

    def add_and_get(self, node: Node) -> Node:
        """Appends `node` and returns it."""
        self._attach(node)
        return node

    def tag(self, tag_name: Optional[str] = None):
        from .elements.tag import Tag
        return self.add_and_get(Tag(tag_name))

    def add_and_get_tag(self, tag_name: Optional[str] = None):
        return self.tag(tag_name)

    def leaf(self, tag_name: Optional[str] = None):
        from .elements.leaf import Leaf
        return self.add_and_get(Leaf(tag_name))

    def add_and_get_leaf(self, tag_name: Optional[str] = None):
        return self.leaf(tag_name)

    def fragment(self):
        from .elements.fragment import Fragment
        return self.add_and_get(Fragment())

    def add_and_get_fragment(self):
        return self.fragment()

    def text(self, content: Any) -> "Container":
        from .elements.text import Text
        return self.append(Text(content))

    def add_text(self, content: Any) -> "Container":
        return self.text(content)

    def raw(self, content: Any) -> "Container":
        from .elements.raw import Raw
        return self.append(Raw(content))

    def doctype(self, doctype_type: str = "html", force: bool = False):
        from .elements.doctype import Doctype
        return self.add_and_get(Doctype(doctype_type, force=force))

    def _render_children(self, xml_compliant: bool) -> str:
        return "".join(child._render(xml_compliant) for child in self._children)

    def audit_children(self, ctx: AuditContext, ignored_codes: FrozenSet[str]) -> None:
        """Runs the audit walk on every auditable child, in insertion order."""
        for child in self._children:
            if isinstance(child, Auditable):
                child._audit_into(ctx, ignored_codes)


class Attributable(Node):
    """Carries CSS classes, an element id, key/value attributes and inline styles."""

    def __init__(self):
        super().__init__()
        # dict keys keep first-insertion order and deduplicate
        self._classes: Dict[str, None] = {}
        self._element_id: Optional[str] = None
        self._attributes: Dict[str, Optional[Any]] = {}
        self._styles: List[Tuple[str, str]] = []

    def cls(self, class_name: str) -> "Attributable":
        self._classes[str(class_name)] = None
        return self

    def add_class(self, class_name: str) -> "Attributable":
        return self.cls(class_name)

    def precls(self, prefix: Optional[str], class_name: str) -> "Attributable":
        """Adds `class_name` and, when a prefix is given, `prefix + class_name`."""
        self.cls(class_name)
        if prefix:
            self.cls(f"{prefix}{class_name}")
        return self

    def id(self, value: Optional[str]) -> "Attributable":
        self._element_id = value
        return self

    def set_element_id(self, value: Optional[str]) -> "Attributable":
        return self.id(value)

    def attr(self, key: str, value: Optional[Any] = None) -> "Attributable":
        """Sets an attribute; a value of None renders the bare key (flag)."""
        self._attributes[str(key)] = value
        return self

    def add_attribute(self, key: str, value: Optional[Any] = None) -> "Attributable":
        return self.attr(key, value)

    def style(self, prop: str, value: Any) -> "Attributable":
        self._styles.append((str(prop), str(value)))
        return self

    def add_style(self, prop: str, value: Any) -> "Attributable":
        return self.style(prop, value)

    @property
    def classes(self) -> Tuple[str, ...]:
        return tuple(self._classes)

    @property
    def element_id(self) -> Optional[str]:
        return self._element_id

    @property
    def attributes(self) -> Dict[str, Optional[Any]]:
        return dict(self._attributes)

    @property
    def styles(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._styles)

    def render_attributes(self) -> str:
        """
        Renders class, id, style and the remaining attributes, in that order.

        The style list, when non-empty, replaces any explicit 'style' attribute.
        Attribute values are escaped; class names and the id are emitted as given.
        """
        parts: List[str] = []
        if self._classes:
            parts.append(f'class="{" ".join(self._classes)}"')

        if self._element_id:
            parts.append(f'id="{self._element_id}"')

        has_styles = bool(self._styles)
        if has_styles:
            style_value = "; ".join(f"{prop}: {value}" for prop, value in self._styles)
            parts.append(f'style="{escape_html(style_value)}"')

        for key, value in self._attributes.items():
            if has_styles and key == "style":
                continue
            parts.append(key if value is None else f'{key}="{escape_html(value)}"')

        return " " + " ".join(parts) if parts else ""


class Taggable(Node):
    """Carries the element's tag name."""

    def __init__(self):
        super().__init__()
        self._tag_name: Optional[str] = None

    @property
    def tag_name(self) -> Optional[str]:
        return self._tag_name

    def set_tag_name(self, tag_name: str) -> "Taggable":
        if tag_name is None or not str(tag_name).strip():
            raise TagNameError(f"Tag name must be a non-empty string, got {tag_name!r}")
        self._tag_name = str(tag_name).strip()
        return self

    def is_tag_name_valid(self) -> bool:
        return self._tag_name is not None and bool(self._tag_name.strip())

    def _require_tag_name(self) -> str:
        if not self.is_tag_name_valid():
            raise MissingTagNameError(f"Cannot render {self!r}: tag name is not set")
        return self._tag_name


class Auditable(Node):
    """Takes part in the structural audit walk."""

    def audit(self, ignored_codes: Optional[Iterable[str]] = None) -> AuditContext:
        """
        Walks this node and its descendants (pre-order) and collects every issue.

        Args:
            ignored_codes: Issue codes to leave out. Defaults to the
                           'audit.ignored_codes' setting.

        Returns:
            AuditContext: A fresh context holding the issues found.
        """
        if ignored_codes is None:
            ignored_codes = config_manager.get_nested("audit.ignored_codes", [])
        if isinstance(ignored_codes, str):
            # A single code or a comma-separated list
            ignored_codes = [code.strip() for code in ignored_codes.split(",") if code.strip()]
        ctx = AuditContext()
        self._audit_into(ctx, frozenset(ignored_codes))
        logger.debug("Audit of %r finished with %d issue(s).", self, len(ctx))
        return ctx

    def _audit_into(self, ctx: AuditContext, ignored_codes: FrozenSet[str]) -> None:
        # Apply all registered rules to the current node; rules for other
        # node types return nothing.
        for rule in DOMRegistry.get_all_rules():
            results = rule(self)
            if not results:
                continue

            for (code, msg, sev) in results:
                if code in ignored_codes:
                    continue
                ctx.add(Issue(
                    node_kind=self.kind,
                    node_id=self.get_id(),
                    code=code,
                    message=msg,
                    severity=sev
                ))

        if isinstance(self, Container):
            self.audit_children(ctx, ignored_codes)

    def validate(self) -> bool:
        """True when the audit finds no issues."""
        return not self.audit().has_issues()

    def debug_validate(self) -> bool:
        """Like validate(), but logs one warning line per issue."""
        ctx = self.audit()
        for line in ctx.format_report():
            logger.warning(line)
        return not ctx.has_issues()
