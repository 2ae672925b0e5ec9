# src/lydio/dom/registry.py
import importlib
import pkgutil
import logging
from typing import Any, Callable, Dict, List, Optional, Set

from .core import AuditResult, ElementDefinition

logger = logging.getLogger(__name__)


class DOMRegistry:
    """
    Central registry for node kinds and their audit rules.

    Dynamically discovers ElementDefinition modules from the
    'lydio.dom.elements' package to populate rules and issue codes.
    """

    _definitions: Dict[str, ElementDefinition] = {}
    _audit_rules: List[Callable[[Any], List[AuditResult]]] = []
    _all_codes: Set[str] = set()
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Discovers and registers all element definitions found in the 'lydio.dom.elements' package.

        Every module exposing a `DEFINITION` attribute (instance of `ElementDefinition`)
        contributes its audit rules and possible issue codes.
        """
        if cls._loaded:
            return

        import lydio.dom.elements as elements_pkg

        for _, name, _ in pkgutil.iter_modules(elements_pkg.__path__):
            full_name = f"lydio.dom.elements.{name}"
            try:
                module = importlib.import_module(full_name)
            except ImportError as e:
                logger.error(f"Error loading module {name}: {e}")
                continue

            defn = getattr(module, "DEFINITION", None)
            if not isinstance(defn, ElementDefinition):
                continue

            cls._definitions[defn.kind] = defn

            # Register all audit rules associated with this definition
            for rule in defn.audit_rules:
                cls._register_rule(defn.model, rule)

            cls._all_codes.update(defn.codes)
            logger.debug(f"Element definition loaded: {defn.kind}")

        cls._loaded = True

    @classmethod
    def _register_rule(cls, model_type: Any, rule_func: Callable) -> None:
        """
        Registers a single audit rule, wrapping it with a type check.

        Args:
            model_type: The node class this rule applies to.
            rule_func: The function executing the logic.
        """
        def wrapped(node: Any) -> List[AuditResult]:
            if isinstance(node, model_type):
                return rule_func(node)
            return []

        wrapped.__name__ = getattr(rule_func, "__name__", "rule")
        cls._audit_rules.append(wrapped)

    @classmethod
    def get_all_rules(cls) -> List[Callable[[Any], List[AuditResult]]]:
        """Returns a list of all registered audit rule functions."""
        cls.discover()
        return cls._audit_rules

    @classmethod
    def get_definition(cls, kind: str) -> Optional[ElementDefinition]:
        """Retrieves the element definition registered for a node kind."""
        cls.discover()
        return cls._definitions.get(kind)

    @classmethod
    def get_all_possible_codes(cls) -> List[str]:
        """
        Returns a list of all unique issue codes registered in the system.
        Useful for building `audit.ignored_codes` settings.
        """
        cls.discover()
        return sorted(list(cls._all_codes))
