"""
Sibling grouping of template top-level nodes.

Partitions the children of a template root into candidate roots: the
independent slots that could each render at the top of the component.
Consecutive elements linked by ``v-if`` / ``v-else-if`` / ``v-else`` are
mutually exclusive, so a whole chain is one candidate root.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from ..markup.nodes import Comment, Element, Node, Position, Text


@dataclass(frozen=True)
class SingleRoot:
    """A standalone element or a non-blank text run."""
    node: Union[Element, Text]

    @property
    def location(self) -> Position:
        return self.node.location

    @property
    def is_text(self) -> bool:
        return isinstance(self.node, Text)

    def elements(self) -> Tuple[Element, ...]:
        return (self.node,) if isinstance(self.node, Element) else ()


@dataclass(frozen=True)
class ConditionalChain:
    """
    Mutually exclusive alternatives: the first member carries ``v-if``,
    the rest ``v-else-if`` or (last only) ``v-else``.
    """
    members: Tuple[Element, ...]

    def __post_init__(self) -> None:
        if not self.members or not self.members[0].directives.has_if:
            raise ValueError("A conditional chain must start with a v-if element")

    @property
    def location(self) -> Position:
        return self.members[0].location

    @property
    def is_text(self) -> bool:
        return False

    @property
    def is_closed(self) -> bool:
        last = self.members[-1].directives
        return len(self.members) > 1 and last.has_else and not last.has_else_if

    def elements(self) -> Tuple[Element, ...]:
        return self.members

    def extended(self, element: Element) -> ConditionalChain:
        return ConditionalChain(self.members + (element,))


CandidateRoot = Union[SingleRoot, ConditionalChain]


@dataclass(frozen=True)
class Grouping:
    """Candidate roots plus the flat child list they were grouped from."""
    candidates: Tuple[CandidateRoot, ...]
    children: Tuple[Node, ...]

    def text_candidates(self) -> Iterator[CandidateRoot]:
        return (c for c in self.candidates if c.is_text)

    def element_candidates(self) -> Iterator[CandidateRoot]:
        return (c for c in self.candidates if not c.is_text)

    def comments(self) -> Iterator[Comment]:
        return (n for n in self.children if isinstance(n, Comment))


def group_siblings(children: Sequence[Node]) -> Grouping:
    """
    Groups top-level children into candidate roots.

    Comments and blank text are invisible here: they neither open, extend
    nor break a chain. An ``else-if`` / ``else`` element extends the open
    chain; with no open chain it stands alone. ``v-else`` closes the chain.
    """
    done: List[CandidateRoot] = []
    chain: Optional[ConditionalChain] = None

    for node in children:
        if isinstance(node, Comment) or (isinstance(node, Text) and node.is_blank):
            continue

        if isinstance(node, Element) and node.directives.continues_chain and chain is not None:
            chain = chain.extended(node)
            if chain.is_closed:
                done.append(chain)
                chain = None
            continue

        if chain is not None:
            done.append(chain)
            chain = None

        if isinstance(node, Element) and node.directives.has_if:
            chain = ConditionalChain((node,))
        else:
            done.append(SingleRoot(node))

    if chain is not None:
        done.append(chain)

    return Grouping(candidates=tuple(done), children=tuple(children))


__all__ = [
    "SingleRoot",
    "ConditionalChain",
    "CandidateRoot",
    "Grouping",
    "group_siblings",
]
