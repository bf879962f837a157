"""
Rule definitions evaluated by the results collector.

A rule is either a `Constraint` (a leaf test on a single property value) or a
logical combination of rules. All rule values are immutable so the same
constraint object can appear in many violation trees.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Union

from attrs import field, frozen


class Constraint(ABC):
    """Leaf test applied to a property value.

    Subclasses decide what passing means; the collector only calls `test`
    and the reporting layer only calls `str()`.
    """

    @abstractmethod
    def test(self, value: Any) -> bool:
        """Return True if `value` satisfies the constraint."""


@frozen
class FunctionConstraint(Constraint):
    """Constraint backed by a plain callable."""

    description: str
    func: Callable[[Any], bool] = field(eq=False)

    def test(self, value: Any) -> bool:
        return bool(self.func(value))

    def __str__(self) -> str:
        return self.description


def _as_tuple(rules) -> tuple:
    return tuple(rules)


@frozen
class All:
    """Every nested rule must hold."""

    rules: tuple["Rule", ...] = field(converter=_as_tuple)


@frozen
class AnyOf:
    """At least one nested rule must hold."""

    rules: tuple["Rule", ...] = field(converter=_as_tuple)


@frozen
class Not:
    """The nested rule must not hold."""

    rule: "Rule"


Rule = Union[Constraint, All, AnyOf, Not]


def predicate(description: str, func: Callable[[Any], bool]) -> FunctionConstraint:
    """
    Wrap a callable as a named constraint.

    Params:
        description: Text shown for the constraint in violation messages
        func: Test applied to the property value

    Returns:
        An immutable constraint
    """
    return FunctionConstraint(description, func)


def all_of(*rules: Rule) -> All:
    return All(rules)


def any_of(*rules: Rule) -> AnyOf:
    return AnyOf(rules)


def not_(rule: Rule) -> Not:
    return Not(rule)
