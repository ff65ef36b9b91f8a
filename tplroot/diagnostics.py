"""
Diagnostics of the template root check.

Every structural problem is reported as a Diagnostic: a source position and
a kind. The kind determines both the user-facing message and the stable
message id used in JSON output.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from .markup.nodes import Position


class DiagnosticKind(enum.Enum):
    """Kinds of template root violations: (message id, message)."""
    MULTIPLE_ROOTS = ("multipleRoots", "The template root requires exactly one element.")
    TEXT_ROOT = ("textRoot", "The template root requires an element rather than texts.")
    FORBIDDEN_FOR = ("disallowedDirective", "The template root disallows 'v-for' directives.")
    FORBIDDEN_SLOT = ("disallowedElement", "The template root disallows '<slot>' elements.")
    FORBIDDEN_TEMPLATE = ("disallowedElement", "The template root disallows '<template>' elements.")
    DISALLOWED_COMMENT = ("disallowedComment", "The template root disallows comments.")

    @property
    def message_id(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


# Root tags that can never render as a single root element
FORBIDDEN_ROOT_TAGS: Dict[str, DiagnosticKind] = {
    "slot": DiagnosticKind.FORBIDDEN_SLOT,
    "template": DiagnosticKind.FORBIDDEN_TEMPLATE,
}


@dataclass(frozen=True)
class Diagnostic:
    location: Position
    kind: DiagnosticKind

    @property
    def message(self) -> str:
        return self.kind.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line": self.location.line,
            "column": self.location.column,
            "messageId": self.kind.message_id,
            "message": self.kind.message,
        }

    def format(self, path: str = "") -> str:
        prefix = f"{path}:" if path else ""
        return f"{prefix}{self.location.line}:{self.location.column}: {self.message} ({self.kind.message_id})"


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> List[Diagnostic]:
    """Document order by location. Stable, so equal locations keep emission order."""
    return sorted(diagnostics, key=lambda d: (d.location.line, d.location.column))


__all__ = [
    "DiagnosticKind",
    "Diagnostic",
    "FORBIDDEN_ROOT_TAGS",
    "sort_diagnostics",
]
