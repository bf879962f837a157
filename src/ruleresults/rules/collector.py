"""
Rule evaluation driver for the results builder.

The collector walks a rule for each property of a subject and reports every
step to a `ValidationResultsBuilder`, so that after a run the builder holds a
pruned violation tree for each property that failed.
"""

from typing import Any, Mapping

from ruleresults.exceptions import PropertyAccessError
from ruleresults.rules.constraints import All, AnyOf, Constraint, Not, Rule
from ruleresults.structure.builder import ValidationResultsBuilder


def get_property_value(subject: Any, property_name: str) -> Any:
    """
    Read a property from a mapping or an object.

    Params:
        subject: Object or mapping being validated
        property_name: Key or attribute name

    Returns:
        The property value

    Raises:
        PropertyAccessError: If the subject has no such key or attribute
    """
    if isinstance(subject, Mapping):
        if property_name not in subject:
            raise PropertyAccessError(property_name, subject)
        return subject[property_name]
    try:
        return getattr(subject, property_name)
    except AttributeError as e:
        raise PropertyAccessError(property_name, subject) from e


class ValidationResultsCollector:
    """Evaluates property rules and records failures in a results builder.

    Params:
        builder: Builder to drive, a fresh one is created when omitted
        collect_all_errors: When False a conjunction stops at its first failing
            rule, so only that rule is reported
    """

    def __init__(
        self,
        builder: ValidationResultsBuilder | None = None,
        collect_all_errors: bool = True,
    ):
        self.builder = builder if builder is not None else ValidationResultsBuilder()
        self.collect_all_errors = collect_all_errors

    def collect(
        self, subject: Any, rules: Mapping[str, Rule]
    ) -> ValidationResultsBuilder:
        """
        Evaluate a rule per property of `subject`.

        Params:
            subject: Object or mapping being validated
            rules: Property name -> rule for that property

        Returns:
            The builder holding the violation tree of every failed property

        Raises:
            PropertyAccessError: If a property named in `rules` cannot be read
        """
        for property_name, rule in rules.items():
            self.collect_property(subject, property_name, rule)
        return self.builder

    def collect_property(self, subject: Any, property_name: str, rule: Rule) -> bool:
        """
        Evaluate one property's rule.

        Returns:
            True if the property satisfied its rule
        """
        value = get_property_value(subject, property_name)
        self.builder.set_property_name(property_name)
        return self._visit(rule, value)

    def _visit(self, rule: Rule, value: Any) -> bool:
        if isinstance(rule, All):
            return self._visit_all(rule, value)
        if isinstance(rule, AnyOf):
            return self._visit_any(rule, value)
        if isinstance(rule, Not):
            return self._visit_not(rule, value)
        if isinstance(rule, Constraint):
            self.builder.push(rule)
            result = rule.test(value)
            self.builder.pop(result)
            return result
        raise TypeError(f"Unsupported rule type: {type(rule).__name__}")

    def _visit_all(self, rule: All, value: Any) -> bool:
        self.builder.push_and()
        result = True
        for nested in rule.rules:
            if not self._visit(nested, value):
                result = False
                if not self.collect_all_errors:
                    break
        self.builder.pop(result)
        return result

    def _visit_any(self, rule: AnyOf, value: Any) -> bool:
        self.builder.push_or()
        result = False
        for nested in rule.rules:
            if self._visit(nested, value):
                result = True
                break
        self.builder.pop(result)
        return result

    def _visit_not(self, rule: Not, value: Any) -> bool:
        self.builder.push_not()
        result = not self._visit(rule.rule, value)
        self.builder.pop(result)
        return result


def collect_results(
    subject: Any, rules: Mapping[str, Rule], collect_all_errors: bool = True
) -> ValidationResultsBuilder:
    """Evaluate `rules` against `subject` with a fresh builder."""
    collector = ValidationResultsCollector(collect_all_errors=collect_all_errors)
    return collector.collect(subject, rules)
