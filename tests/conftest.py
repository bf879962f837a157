"""
Shared test fixtures and utilities for the ruleresults test suite.
"""

import pytest

from ruleresults.structure import BuildObserver, ValidationResultsBuilder


class RecordingObserver(BuildObserver):
    """Observer that keeps every event as a tuple for assertions."""

    def __init__(self):
        self.events = []

    def on_attach(self, parent, node):
        self.events.append(("attach", parent, node))

    def on_push(self, node, depth):
        self.events.append(("push", node, depth))

    def on_pop(self, node, result, depth):
        self.events.append(("pop", node, result, depth))

    def on_excise(self, parent, node):
        self.events.append(("excise", parent, node))

    def on_store(self, property_name, root):
        self.events.append(("store", property_name, root))

    def on_discard(self, property_name, root):
        self.events.append(("discard", property_name, root))

    def kinds(self):
        return [event[0] for event in self.events]


@pytest.fixture
def recorder():
    return RecordingObserver()


@pytest.fixture
def builder(recorder):
    """Builder wired to a recording observer.

    Usage:
        def test_something(builder, recorder):
            builder.set_property_name("age")
            ...
            assert "store" in recorder.kinds()
    """
    return ValidationResultsBuilder(observer=recorder)
