"""
Rule definitions and the collector that evaluates them.
"""

from ruleresults.rules.collector import (
    ValidationResultsCollector,
    collect_results,
    get_property_value,
)
from ruleresults.rules.constraints import (
    All,
    AnyOf,
    Constraint,
    FunctionConstraint,
    Not,
    Rule,
    all_of,
    any_of,
    not_,
    predicate,
)

__all__ = [
    "Constraint",
    "FunctionConstraint",
    "All",
    "AnyOf",
    "Not",
    "Rule",
    "predicate",
    "all_of",
    "any_of",
    "not_",
    "ValidationResultsCollector",
    "collect_results",
    "get_property_value",
]
