"""
Rendering and reporting of violation trees.
"""

from ruleresults.reporting.render import render, to_dict
from ruleresults.reporting.report import PropertyViolation, ValidationReport

__all__ = [
    "render",
    "to_dict",
    "PropertyViolation",
    "ValidationReport",
]
