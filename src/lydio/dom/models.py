# src/lydio/dom/models.py
from collections import Counter
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class Issue(BaseModel):
    """
    Data model representing a single structural defect found by an audit walk.
    """
    model_config = ConfigDict(frozen=True)

    node_kind: str  # e.g., 'tag', 'leaf', 'doctype'
    node_id: Optional[str] = None  # caller-assigned identifier of the node, if any
    code: str  # e.g., 'MISSING_TAG_NAME', 'SELF_CLOSING_AS_TAG'
    message: str  # Human-readable description of the issue
    severity: str = "WARNING"  # 'CRITICAL' or 'WARNING'

    @field_validator('node_id', mode='before')
    @classmethod
    def stringify_node_id(cls, v):
        """Node identifiers are opaque; store them in their string form."""
        return None if v is None else str(v)

    def format(self) -> str:
        """One-line report form, e.g. '[WARNING] tag#nav SELF_CLOSING_AS_TAG: ...'."""
        label = self.node_kind if self.node_id is None else f"{self.node_kind}#{self.node_id}"
        return f"[{self.severity}] {label} {self.code}: {self.message}"


class AuditContext:
    """Ordered collection of the issues produced by one audit walk."""

    def __init__(self):
        self._issues: List[Issue] = []

    def add(self, issue: Issue) -> "AuditContext":
        self._issues.append(issue)
        return self

    def has_issues(self) -> bool:
        return bool(self._issues)

    @property
    def issues(self) -> Tuple[Issue, ...]:
        return tuple(self._issues)

    def count_by_code(self) -> Counter:
        """Number of issues per issue code."""
        return Counter(issue.code for issue in self._issues)

    def format_report(self) -> List[str]:
        return [issue.format() for issue in self._issues]

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    def __repr__(self) -> str:
        return f"AuditContext(issues={len(self._issues)})"
