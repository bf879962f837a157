"""
ruleresults - Pruned violation trees for nested validation rules

ruleresults records, for each property that fails its rules, the minimal
and/or/not tree of constraints explaining the failure.
"""

from importlib.metadata import version

from ruleresults.core.nodes import Conjunction, Disjunction, Leaf, Negation
from ruleresults.reporting import ValidationReport, render
from ruleresults.rules import (
    ValidationResultsCollector,
    all_of,
    any_of,
    not_,
    predicate,
)
from ruleresults.structure import ValidationResultsBuilder

__version__ = version("ruleresults")

__all__ = [
    "__version__",
    "ValidationResultsBuilder",
    "ValidationResultsCollector",
    "ValidationReport",
    "Conjunction",
    "Disjunction",
    "Negation",
    "Leaf",
    "predicate",
    "all_of",
    "any_of",
    "not_",
    "render",
]
