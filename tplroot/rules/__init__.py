"""
Root structure classifier: sibling grouping and invariant evaluation.
"""

from __future__ import annotations

from .grouping import CandidateRoot, ConditionalChain, Grouping, SingleRoot, group_siblings
from .root_structure import RULE_NAME, check_children, check_template, evaluate

__all__ = [
    "RULE_NAME",
    "CandidateRoot",
    "ConditionalChain",
    "SingleRoot",
    "Grouping",
    "group_siblings",
    "evaluate",
    "check_children",
    "check_template",
]
