"""
Tests for the exception hierarchy.
"""

from ruleresults.exceptions import (
    BuilderProtocolError,
    EmptyStackError,
    LeafHasNoChildrenError,
    NegationOccupiedError,
    PropertyAccessError,
    RuleResultsError,
)


class TestHierarchy:
    """Tests that protocol errors share a common base."""

    def test_protocol_errors(self):
        """Test every builder misuse is a BuilderProtocolError."""
        for error in (
            EmptyStackError("pop"),
            NegationOccupiedError("a", "b"),
            LeafHasNoChildrenError("a", "b"),
        ):
            assert isinstance(error, BuilderProtocolError)
            assert isinstance(error, RuleResultsError)

    def test_property_access_error_is_not_protocol_error(self):
        """Test property access failures are a separate category."""
        error = PropertyAccessError("age", object())
        assert isinstance(error, RuleResultsError)
        assert not isinstance(error, BuilderProtocolError)


class TestMessages:
    """Tests for exception messages and attributes."""

    def test_empty_stack_message(self):
        """Test the operation is named in the message."""
        error = EmptyStackError("peek")
        assert error.operation == "peek"
        assert "peek" in str(error)
        assert "no node is open" in str(error)

    def test_property_access_message(self):
        """Test the property and subject type are named."""

        class Person:
            pass

        error = PropertyAccessError("age", Person())
        assert error.property_name == "age"
        assert "'age'" in str(error)
        assert "Person" in str(error)
