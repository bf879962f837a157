"""
Exception classes for violation tree building and rule collection.

Protocol errors signal a defect in whatever drives the builder (unbalanced
push/pop, attaching twice to a negation). They are never raised for a rule
that simply fails; failing rules are recorded as data in the violation map.
"""

from typing import Any


class RuleResultsError(Exception):
    """Base exception for all ruleresults errors."""

    pass


class BuilderProtocolError(RuleResultsError):
    """Raised when the builder is driven out of its push/pop protocol."""

    def __init__(self, operation: str, reason: str):
        """
        Initialize the exception.

        Params:
            operation: Builder operation that was misused (e.g. "pop")
            reason: What was wrong with the call
        """
        self.operation = operation
        self.reason = reason
        super().__init__(f"Invalid '{operation}': {reason}")


class EmptyStackError(BuilderProtocolError):
    """Raised when popping or peeking with no open node."""

    def __init__(self, operation: str):
        super().__init__(operation, "no node is open for the current property")


class NoPropertyNameError(BuilderProtocolError):
    """Raised when a node is pushed before any property name was set."""

    def __init__(self, operation: str):
        super().__init__(operation, "no property name set; call set_property_name first")


class NegationOccupiedError(BuilderProtocolError):
    """Raised when a second node is attached to a negation."""

    def __init__(self, existing: Any, incoming: Any):
        """
        Initialize the exception.

        Params:
            existing: The node already negated
            incoming: The node that was attached a second time
        """
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            "attach",
            f"negation already holds {existing!r}, cannot also negate {incoming!r}",
        )


class LeafHasNoChildrenError(BuilderProtocolError):
    """Raised when a node is attached beneath an unclosed leaf."""

    def __init__(self, leaf: Any, incoming: Any):
        self.leaf = leaf
        self.incoming = incoming
        super().__init__(
            "attach",
            f"leaf {leaf!r} is still open and cannot hold {incoming!r}; pop it first",
        )


class PropertyAccessError(RuleResultsError):
    """Raised when a subject does not expose a property a rule targets."""

    def __init__(self, property_name: str, subject: Any):
        self.property_name = property_name
        self.subject = subject
        super().__init__(
            f"Cannot read property '{property_name}' of {type(subject).__name__}"
        )
