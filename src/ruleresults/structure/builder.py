"""
Builder for per-property violation trees.

The builder is driven by a rule evaluator with a push/pop protocol. Entering a
compound rule pushes a conjunction, disjunction or negation node; evaluating a
constraint pushes a leaf; finishing any rule pops it with the boolean outcome.
Nodes that pop as successful are excised from their conjunction/disjunction
parent, so a stored tree only explains why a property failed. Nodes beneath a
negation are never excised, since the negation is explained by all of them.
"""

from types import MappingProxyType
from typing import Any, Mapping

from ruleresults.core.nodes import (
    Conjunction,
    Disjunction,
    Leaf,
    Negation,
    PredicateNode,
    is_compound,
)
from ruleresults.exceptions import (
    EmptyStackError,
    LeafHasNoChildrenError,
    NoPropertyNameError,
)
from ruleresults.structure.observers import BuildObserver, LoggingObserver


class ValidationResultsBuilder:
    """Assembles pruned violation trees, one property at a time.

    Responsibilities:
    - Track the open nodes of the rule currently being evaluated
    - Link each new node into its open parent
    - Prune successful sub-rules when they are closed
    - Store the remaining tree under the property name when the property fails

    Not safe for concurrent use; give each concurrent evaluation its own builder.
    """

    def __init__(self, observer: BuildObserver | None = None):
        self._observer = observer if observer is not None else LoggingObserver()
        self._property_name: str | None = None
        self._property_results: dict[str, PredicateNode] = {}
        self._levels: list[PredicateNode] = []
        self._top: PredicateNode | None = None
        self._negation_depth = 0

    @property
    def property_name(self) -> str | None:
        """Name of the property whose rule is being evaluated."""
        return self._property_name

    @property
    def is_building(self) -> bool:
        """True while a rule for the current property has unclosed nodes."""
        return bool(self._levels)

    def set_property_name(self, property_name: str) -> None:
        """
        Start collecting results for a property.

        Any unfinished build for the previous property is abandoned.

        Params:
            property_name: Name the next violation tree is stored under
        """
        self._property_name = property_name
        self._levels.clear()
        self._top = None
        self._negation_depth = 0

    def push_and(self) -> Conjunction:
        """Open a conjunction beneath the current top."""
        node = Conjunction()
        self._push_node(node)
        return node

    def push_or(self) -> Disjunction:
        """Open a disjunction beneath the current top."""
        node = Disjunction()
        self._push_node(node)
        return node

    def push_not(self) -> Negation:
        """Open a negation beneath the current top."""
        node = Negation()
        self._push_node(node)
        return node

    def push(self, constraint: Any) -> Leaf:
        """
        Add a constraint beneath the current top.

        The leaf stays open until the following `pop`, which reports the
        constraint's own outcome. A leaf pushed with nothing open becomes the
        root of the property's tree.

        Params:
            constraint: Opaque constraint value; only ever rendered, never evaluated

        Returns:
            The leaf node wrapping `constraint`

        Raises:
            NegationOccupiedError: If the top is a negation that already has a child
            LeafHasNoChildrenError: If the top is a leaf that was never popped
            NoPropertyNameError: If `set_property_name` was never called
        """
        node = Leaf(constraint)
        self._push_node(node)
        return node

    def peek(self) -> PredicateNode:
        """
        Return the current top without changing anything.

        Raises:
            EmptyStackError: If no node is open
        """
        if self._top is None:
            raise EmptyStackError("peek")
        return self._top

    def pop(self, result: bool) -> None:
        """
        Close the current top with the outcome of its rule.

        Closing the root finishes the property: a failure stores the tree,
        a success discards it and clears any earlier violation for the same
        property. Closing a nested node that succeeded excises it from its
        conjunction/disjunction parent, unless a negation is open above it:
        everything beneath a negation is the basis of its outcome and is kept.

        Params:
            result: Whether the rule for the closed node held

        Raises:
            EmptyStackError: If no node is open
        """
        if not self._levels:
            raise EmptyStackError("pop")
        node = self._levels.pop()
        if isinstance(node, Negation):
            self._negation_depth -= 1
        self._observer.on_pop(node, result, len(self._levels))

        if not self._levels:
            self._top = None
            if result:
                self._property_results.pop(self._property_name, None)
                self._observer.on_discard(self._property_name, node)
            else:
                self._property_results[self._property_name] = node
                self._observer.on_store(self._property_name, node)
            return

        parent = self._levels[-1]
        self._top = parent
        if result and is_compound(parent) and self._negation_depth == 0:
            parent.remove_last(node)
            self._observer.on_excise(parent, node)

    def results(self) -> Mapping[str, PredicateNode]:
        """Read-only view of property name -> violation tree."""
        return MappingProxyType(self._property_results)

    def results_for(self, property_name: str) -> PredicateNode | None:
        """
        Get the violation tree stored for a property.

        Params:
            property_name: Property to look up

        Returns:
            Root of the pruned tree, or None if the property never failed
        """
        return self._property_results.get(property_name)

    def has_errors(self) -> bool:
        """True when at least one property has a stored violation."""
        return bool(self._property_results)

    def _push_node(self, node: PredicateNode) -> None:
        if self._property_name is None:
            raise NoPropertyNameError("push")
        if self._top is not None:
            self._attach(self._top, node)
        self._levels.append(node)
        self._top = node
        if isinstance(node, Negation):
            self._negation_depth += 1
        self._observer.on_push(node, len(self._levels))

    def _attach(self, parent: PredicateNode, node: PredicateNode) -> None:
        if isinstance(parent, Negation):
            parent.set_child(node)
        elif isinstance(parent, Leaf):
            raise LeafHasNoChildrenError(parent, node)
        else:
            parent.add(node)
        self._observer.on_attach(parent, node)
