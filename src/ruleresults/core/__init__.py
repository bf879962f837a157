"""
Core node types for ruleresults violation trees.
"""

from ruleresults.core.nodes import (
    CompoundNode,
    Conjunction,
    Disjunction,
    Leaf,
    Negation,
    NodeKind,
    PredicateNode,
    is_compound,
)

__all__ = [
    "NodeKind",
    "PredicateNode",
    "CompoundNode",
    "Conjunction",
    "Disjunction",
    "Negation",
    "Leaf",
    "is_compound",
]
