"""
Combinator node types for violation trees.

A violation tree is built from a closed set of node variants: conjunction,
disjunction, negation and leaf. Compound nodes are mutable while the tree is
under construction; once a tree is stored as a property's violation it is
treated as read-only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from ruleresults.exceptions import NegationOccupiedError


class NodeKind(Enum):
    """Tag identifying the variant of a combinator node."""

    AND = "and"
    OR = "or"
    NOT = "not"
    LEAF = "constraint"


@dataclass
class Leaf:
    """Opaque constraint supplied by the rules library."""

    constraint: Any

    @property
    def kind(self) -> NodeKind:
        return NodeKind.LEAF


@dataclass
class Negation:
    """Holds iff its single child does not."""

    child: "PredicateNode | None" = None

    @property
    def kind(self) -> NodeKind:
        return NodeKind.NOT

    def set_child(self, node: "PredicateNode") -> None:
        """
        Attach the negated node.

        Params:
            node: The node being negated

        Raises:
            NegationOccupiedError: If a child was already attached
        """
        if self.child is not None:
            raise NegationOccupiedError(self.child, node)
        self.child = node


@dataclass
class _Compound:
    children: list["PredicateNode"] = field(default_factory=list)

    def add(self, node: "PredicateNode") -> None:
        self.children.append(node)

    def remove_last(self, node: "PredicateNode") -> None:
        """
        Excise the most recently attached child.

        Under the builder's push/pop discipline a closed node is always the
        last child of its parent, so excision is a constant-time pop.

        Params:
            node: The child expected at the end of the children list

        Raises:
            ValueError: If `node` is not the last attached child
        """
        if not self.children or self.children[-1] is not node:
            raise ValueError(f"{node!r} is not the last child of {self!r}")
        self.children.pop()


@dataclass
class Conjunction(_Compound):
    """All children must hold."""

    @property
    def kind(self) -> NodeKind:
        return NodeKind.AND


@dataclass
class Disjunction(_Compound):
    """At least one child must hold."""

    @property
    def kind(self) -> NodeKind:
        return NodeKind.OR


PredicateNode = Union[Conjunction, Disjunction, Negation, Leaf]
CompoundNode = Union[Conjunction, Disjunction]


def is_compound(node: PredicateNode) -> bool:
    """Check whether a node keeps an ordered list of children."""
    return isinstance(node, (Conjunction, Disjunction))
