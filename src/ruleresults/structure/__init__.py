"""
Violation tree building.

This package provides the push/pop results builder and the observers it
reports build events to.
"""

from ruleresults.structure.builder import ValidationResultsBuilder
from ruleresults.structure.observers import BuildObserver, LoggingObserver

__all__ = [
    "ValidationResultsBuilder",
    "BuildObserver",
    "LoggingObserver",
]
