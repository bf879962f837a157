"""
Text and dictionary renderings of violation trees.
"""

from typing import Any

from ruleresults.core.nodes import (
    Conjunction,
    Disjunction,
    Leaf,
    Negation,
    PredicateNode,
    is_compound,
)

_JOINERS = {Conjunction: " and ", Disjunction: " or "}
_EMPTY = {Conjunction: "true", Disjunction: "false"}


def render(node: PredicateNode) -> str:
    """
    Render a violation tree as a readable expression.

    Constraints render with their own `str()`. Nested compounds with more than
    one child are parenthesised; a compound with a single child renders as
    that child.

    Params:
        node: Root of the tree to render

    Returns:
        Expression text, e.g. "required and (min 3 or not blank)"
    """
    if isinstance(node, Leaf):
        return str(node.constraint)
    if isinstance(node, Negation):
        if node.child is None:
            return "not"
        return f"not {_render_nested(node.child)}"
    if not node.children:
        return _EMPTY[type(node)]
    if len(node.children) == 1:
        return render(node.children[0])
    return _JOINERS[type(node)].join(_render_nested(c) for c in node.children)


def _render_nested(node: PredicateNode) -> str:
    text = render(node)
    if is_compound(node) and len(node.children) > 1:
        return f"({text})"
    return text


def to_dict(node: PredicateNode) -> dict[str, Any]:
    """
    Convert a violation tree to JSON-compatible dictionaries.

    Params:
        node: Root of the tree to convert

    Returns:
        Nested dictionaries keyed by "type" plus "children", "child" or "constraint"
    """
    if isinstance(node, Leaf):
        return {"type": node.kind.value, "constraint": str(node.constraint)}
    if isinstance(node, Negation):
        child = to_dict(node.child) if node.child is not None else None
        return {"type": node.kind.value, "child": child}
    return {"type": node.kind.value, "children": [to_dict(c) for c in node.children]}
