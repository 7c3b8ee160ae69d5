"""Text -> CanonicalEquation.

tokenizer -> parser -> evaluator (both sides) -> fold the two values into one terms dict & constant.
"""

import time
import warnings
from typing import Dict, List, Tuple

from .debug.utils import debug_repr, print_tree
from .equation import CanonicalEquation
from .evaluator import Evaluator
from .parser import Parser
from .tokenizer import Source
from .value import Sum, Value


def simplify_equation(source: Source, **kwargs) -> CanonicalEquation:
    """
    Simplifies a linear equation into sum(terms[v] * v) + constant = 0.

    Args:
        source: the equation, e.g. "3*(x + 2y - 5) = -4*(-8y + 10x + 2)". A str, bytes or a binary stream.
    kwargs:
        debug: prints the parsed trees and the value of each side before folding them.

    Returns:
        The canonical equation.

    Raises:
        SimplifierError (a ValueError) if the text isn't a linear equation. str(error) says what went wrong
        and in which column.
    """
    return Simplifier(**kwargs).simplify(source)


class Simplifier:
    """Stateless apart from the class-level logger, so a single instance can be reused freely."""

    logger = None

    def __init__(self, *, debug: bool = False):
        self._debug = debug
        self._evaluator = Evaluator()

    def simplify(self, source: Source) -> CanonicalEquation:
        start = time.time()
        result = None
        try:
            result = self._simplify(source)
        finally:
            if self.logger is not None:
                self.logger.log(_describe(source), time.time() - start, result)

        if not result.is_finite:
            warnings.warn(f"{_describe(source)} simplified to non-finite values: {result}")
        return result

    def _simplify(self, source: Source) -> CanonicalEquation:
        equation = Parser.from_source(source).equation()
        lhs = self._evaluator.evaluate(equation.lhs)
        rhs = self._evaluator.evaluate(equation.rhs)

        if self._debug:
            for side, tree, value in (("lhs", equation.lhs, lhs), ("rhs", equation.rhs, rhs)):
                print(f"{side}:")
                print_tree(tree)
                print(f"  => {debug_repr(value)}")

        return fold(lhs, rhs)


def fold(lhs: Value, rhs: Value) -> CanonicalEquation:
    """lhs and rhs -> one terms dict & constant.

    Variable terms are added with sign +1 for lhs and -1 for rhs. Constants are not treated the same way
    everywhere: a side that is a bare constant adds +c (lhs) or -c (rhs), while constants inside a sum
    subtract c * sign. Both paths are pinned by tests; don't unify them without checking every caller.
    """
    terms: Dict[str, float] = {}
    constant = 0.0
    constant = _fold_side(lhs, terms, constant, 1.0)
    constant = _fold_side(rhs, terms, constant, -1.0)
    return CanonicalEquation(terms, constant)


def _fold_side(value: Value, terms: Dict[str, float], constant: float, sign: float) -> float:
    """Adds value's variable terms into terms (in place). Returns the new constant."""
    if isinstance(value, Sum):
        return _fold_sum(value.values, terms, constant, sign)
    if value.variable is not None:
        terms[value.variable] = terms.get(value.variable, 0.0) + value.coefficient * sign
        return constant
    return constant + value.coefficient * sign


def _fold_sum(values: List[Value], terms: Dict[str, float], constant: float, sign: float) -> float:
    for value in values:
        if isinstance(value, Sum):
            constant = _fold_sum(value.values, terms, constant, sign)
        elif value.variable is not None:
            terms[value.variable] = terms.get(value.variable, 0.0) + value.coefficient * sign
        else:
            constant -= value.coefficient * sign
    return constant


def _describe(source: Source) -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("utf-8", errors="replace")
    return repr(source)


def evaluate_sides(source: Source) -> Tuple[Value, Value]:
    """The values of both sides, before folding. Mostly useful for debugging & tests."""
    equation = Parser.from_source(source).equation()
    evaluator = Evaluator()
    return evaluator.evaluate(equation.lhs), evaluator.evaluate(equation.rhs)
