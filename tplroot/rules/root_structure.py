"""
Template root structure rule.

Evaluates the candidate roots produced by ``group_siblings`` against the
single-root invariants:

- text at the top level never renders as a root element;
- only one element-bearing candidate root may exist;
- a sole root must not repeat (``v-for``) or be a ``<slot>`` / ``<template>``;
- optionally, the top level must not contain comments.

Every applicable diagnostic is returned; nothing short-circuits.
"""

from __future__ import annotations

from typing import List, Sequence

from ..config.model import RootOptions
from ..diagnostics import FORBIDDEN_ROOT_TAGS, Diagnostic, DiagnosticKind, sort_diagnostics
from ..markup.nodes import Element, Node, TemplateRoot
from .grouping import Grouping, group_siblings

RULE_NAME = "no-multiple-template-root"


def evaluate(grouping: Grouping, options: RootOptions = RootOptions()) -> List[Diagnostic]:
    """Applies all root rules to a grouping; diagnostics come back in document order."""
    structural: List[Diagnostic] = []

    for candidate in grouping.text_candidates():
        structural.append(Diagnostic(candidate.location, DiagnosticKind.TEXT_ROOT))

    element_candidates = list(grouping.element_candidates())
    for candidate in element_candidates[1:]:
        structural.append(Diagnostic(candidate.location, DiagnosticKind.MULTIPLE_ROOTS))

    # Any member of a sole chain may be the one that renders
    if len(grouping.candidates) == 1 and element_candidates:
        for element in element_candidates[0].elements():
            structural.extend(_root_content_diagnostics(element))

    comments: List[Diagnostic] = []
    if options.disallow_comments:
        comments = [Diagnostic(c.location, DiagnosticKind.DISALLOWED_COMMENT) for c in grouping.comments()]

    return sort_diagnostics(sort_diagnostics(structural) + comments)


def _root_content_diagnostics(element: Element) -> List[Diagnostic]:
    out: List[Diagnostic] = []
    kind = FORBIDDEN_ROOT_TAGS.get(element.tag)
    if kind is not None:
        out.append(Diagnostic(element.location, kind))
    if element.directives.has_for:
        out.append(Diagnostic(element.location, DiagnosticKind.FORBIDDEN_FOR))
    return out


def check_children(children: Sequence[Node], options: RootOptions = RootOptions()) -> List[Diagnostic]:
    return evaluate(group_siblings(children), options)


def check_template(root: TemplateRoot, options: RootOptions = RootOptions()) -> List[Diagnostic]:
    """Checks the top level of a parsed ``<template>`` block."""
    return check_children(root.children, options)


__all__ = ["RULE_NAME", "evaluate", "check_children", "check_template"]
