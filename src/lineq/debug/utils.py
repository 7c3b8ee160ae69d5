from typing import Union

from ..expr import Binary, Expr, FunctionCall, Grouping, Negation, Number, Variable
from ..value import Monomial, Sum, Value


def print_tree(expr: Expr, func=print, _depth: int = 0) -> None:
    """One line per node, children indented under their parent, with the column each node starts at.

    >>> print_tree(parse("3x = 2").lhs)
    [2] *
      [1] 3
      [2] x
    """
    column = "?" if expr.token is None else str(expr.token.column)
    if isinstance(expr, Binary):
        label = expr.operator.lexeme
    elif isinstance(expr, Negation):
        label = "-"
    elif isinstance(expr, Grouping):
        label = "group"
    elif isinstance(expr, FunctionCall):
        label = f"call {expr.name}"
    else:
        label = repr(expr)

    func(f"{'  ' * _depth}[{column}] {label}")
    for child in expr.children():
        print_tree(child, func=func, _depth=_depth + 1)


def debug_repr(obj: Union[Expr, Value]) -> str:
    """Shows the structure, not just the pretty repr. Sum([1, 2x]) and Sum([Sum([1]), 2x]) look the same
    when printed normally."""
    if isinstance(obj, Monomial):
        return f"Monomial({obj.coefficient!r}, {obj.variable!r})"
    if isinstance(obj, Sum):
        return "Sum([" + ", ".join(debug_repr(v) for v in obj.values) + "])"
    if isinstance(obj, Number):
        return f"Number({obj.value!r})"
    if isinstance(obj, Variable):
        return f"Variable({obj.name!r})"
    if isinstance(obj, Binary):
        return f"Binary({debug_repr(obj.left)}, {obj.operator.lexeme!r}, {debug_repr(obj.right)})"
    if isinstance(obj, FunctionCall):
        return f"FunctionCall({obj.name!r}, {debug_repr(obj.arg)})"
    if isinstance(obj, (Negation, Grouping)):
        return f"{obj.__class__.__name__}({debug_repr(obj.inner)})"
    raise NotImplementedError(f"debug_repr not implemented for {obj.__class__.__name__}")
