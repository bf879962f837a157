"""
Observers notified while a violation tree is being built.

The builder reports every structural change to an observer. The base
`BuildObserver` ignores all events; `LoggingObserver` writes them to a
standard library logger at DEBUG level and is what the builder uses unless
told otherwise.
"""

import logging

from ruleresults.core.nodes import Negation, PredicateNode

_default_logger = logging.getLogger("ruleresults.structure.builder")


class BuildObserver:
    """No-op receiver of builder events. Subclass and override what you need."""

    def on_attach(self, parent: PredicateNode, node: PredicateNode) -> None:
        pass

    def on_push(self, node: PredicateNode, depth: int) -> None:
        pass

    def on_pop(self, node: PredicateNode, result: bool, depth: int) -> None:
        pass

    def on_excise(self, parent: PredicateNode, node: PredicateNode) -> None:
        pass

    def on_store(self, property_name: str, root: PredicateNode) -> None:
        pass

    def on_discard(self, property_name: str, root: PredicateNode) -> None:
        pass


class LoggingObserver(BuildObserver):
    """Log builder events.

    Params:
        logger: Logger to write to, defaults to `ruleresults.structure.builder`
        level: Logging level used for every event
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG):
        self.logger = logger or _default_logger
        self.level = level

    def _log(self, msg: str, *args) -> None:
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, msg, *args)

    def on_attach(self, parent: PredicateNode, node: PredicateNode) -> None:
        if isinstance(parent, Negation):
            self._log("Negating [%r]", node)
        else:
            self._log("Aggregating nested [%r] into [%r]", node, parent)

    def on_push(self, node: PredicateNode, depth: int) -> None:
        self._log("[%r] is at the top; stack has %d elements", node, depth)

    def on_pop(self, node: PredicateNode, result: bool, depth: int) -> None:
        self._log(
            "Top [%r] popped; result was %s; stack now has %d elements",
            node,
            result,
            depth,
        )

    def on_excise(self, parent: PredicateNode, node: PredicateNode) -> None:
        self._log("Removing [%r] from [%r]; tested true", node, parent)

    def on_store(self, property_name: str, root: PredicateNode) -> None:
        self._log("Done collecting results for '%s'; results are [%r]", property_name, root)

    def on_discard(self, property_name: str, root: PredicateNode) -> None:
        self._log("Property '%s' passed; discarding [%r]", property_name, root)
