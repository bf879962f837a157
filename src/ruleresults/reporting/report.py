"""
Pydantic report models built from a builder's violation map.
"""

from typing import Any, Mapping

from pydantic import BaseModel, Field

from ruleresults.core.nodes import PredicateNode
from ruleresults.reporting.render import render, to_dict


class PropertyViolation(BaseModel):
    """Why a single property failed validation."""

    property_name: str
    message: str = Field(..., description="Rendered failure expression")
    tree: dict[str, Any] = Field(
        default_factory=dict, description="Violation tree as nested dictionaries"
    )

    @classmethod
    def from_tree(cls, property_name: str, root: PredicateNode) -> "PropertyViolation":
        return cls(property_name=property_name, message=render(root), tree=to_dict(root))


class ValidationReport(BaseModel):
    """Violations collected for one subject."""

    violations: list[PropertyViolation] = Field(default_factory=list)

    @classmethod
    def from_results(cls, results: Mapping[str, PredicateNode]) -> "ValidationReport":
        """
        Build a report from a `results()` mapping.

        Params:
            results: Property name -> violation tree

        Returns:
            Report with one violation per property, sorted by property name
        """
        return cls(
            violations=[
                PropertyViolation.from_tree(name, results[name])
                for name in sorted(results)
            ]
        )

    @property
    def has_errors(self) -> bool:
        """True when the report holds at least one violation."""
        return bool(self.violations)

    def get(self, property_name: str) -> PropertyViolation | None:
        """
        Find the violation reported for a property.

        Params:
            property_name: Property to look up

        Returns:
            The violation, or None if the property passed or was not validated
        """
        for violation in self.violations:
            if violation.property_name == property_name:
                return violation
        return None

    def messages(self) -> dict[str, str]:
        """Property name -> rendered failure message."""
        return {v.property_name: v.message for v in self.violations}

    def merge(self, other: "ValidationReport") -> "ValidationReport":
        """
        Combine two reports, e.g. from builders run in parallel.

        Violations in `other` replace those for the same property in this report.
        """
        merged = {v.property_name: v for v in self.violations}
        merged.update({v.property_name: v for v in other.violations})
        return ValidationReport(violations=[merged[name] for name in sorted(merged)])
