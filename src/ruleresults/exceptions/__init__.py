"""
ruleresults exception classes.

This package provides all exception types used when building violation
trees and collecting rule results.
"""

from ruleresults.exceptions.core import (
    BuilderProtocolError,
    EmptyStackError,
    LeafHasNoChildrenError,
    NegationOccupiedError,
    NoPropertyNameError,
    PropertyAccessError,
    RuleResultsError,
)

__all__ = [
    "RuleResultsError",
    "BuilderProtocolError",
    "EmptyStackError",
    "LeafHasNoChildrenError",
    "NegationOccupiedError",
    "NoPropertyNameError",
    "PropertyAccessError",
]
