"""Expression tree -> Value.

One bottom-up pass over the tree, no backtracking. Linearity is enforced as we go: anything that would
produce a term of degree 2 (x * y, x / y, x ^ 2, 2 ^ x) raises an EvaluatorError pointing at the
offending token.

Multiplication and division distribute over sums by building the full cross product of terms. Like terms
are NOT combined here, so the number of terms grows multiplicatively with every grouped sum in a product.
"""

import warnings
from typing import Callable, List

from .errors import (
    ExpressionTooDeep,
    InvalidBinaryOperator,
    NonConstantBase,
    NonConstantExponent,
    UnsupportedExpression,
    VariableDivision,
    VariableMultiplication,
)
from .expr import Binary, Expr, Grouping, Negation, Number, Variable
from .tokenizer import TokenType
from .utils import divide, power
from .value import Monomial, Sum, Value

MonomialFn = Callable[[Monomial, Monomial], Monomial]


def _add(left: Value, right: Value) -> Value:
    if isinstance(left, Monomial) and isinstance(right, Monomial):
        if left.variable == right.variable:
            return Monomial(left.coefficient + right.coefficient, left.variable)
        return Sum([left, right])
    if isinstance(left, Sum) and isinstance(right, Sum):
        return Sum(left.values + right.values)
    if isinstance(left, Sum):
        return Sum(left.values + [right])
    return Sum(right.values + [left])


class Evaluator:
    # tweakable params
    EXPANSION_WARNING_THRESHOLD = 1024  # terms produced by one product before we warn about it

    def evaluate(self, expr: Expr) -> Value:
        try:
            return self._evaluate(expr)
        except RecursionError:
            raise ExpressionTooDeep(expr.token) from None

    def _evaluate(self, expr: Expr) -> Value:
        if isinstance(expr, Number):
            return Monomial(expr.value)
        if isinstance(expr, Variable):
            return Monomial(1.0, expr.name)
        if isinstance(expr, Negation):
            return self._evaluate(expr.inner).negate()
        if isinstance(expr, Grouping):
            return self._evaluate(expr.inner)
        if isinstance(expr, Binary):
            return self._evaluate_binary(expr)
        raise UnsupportedExpression(expr.token)

    def _evaluate_binary(self, expr: Binary) -> Value:
        type_ = expr.operator.type
        if type_ is TokenType.PLUS:
            return _add(self._evaluate(expr.left), self._evaluate(expr.right))
        if type_ is TokenType.MINUS:
            return _add(self._evaluate(expr.left), self._evaluate(expr.right).negate())
        if type_ is TokenType.STAR:
            return self._multiply(expr)
        if type_ is TokenType.SLASH:
            return self._divide(expr)
        if type_ is TokenType.HAT:
            return self._power(expr)
        raise InvalidBinaryOperator(expr.operator)

    def _multiply(self, expr: Binary) -> Value:
        left = self._evaluate(expr.left)
        right = self._evaluate(expr.right)

        def multiply(a: Monomial, b: Monomial) -> Monomial:
            if a.variable is not None and b.variable is not None:
                raise VariableMultiplication(expr.operator, expr.left.token, expr.right.token)
            variable = a.variable if a.variable is not None else b.variable
            return Monomial(a.coefficient * b.coefficient, variable)

        if isinstance(left, Monomial) and isinstance(right, Monomial):
            return multiply(left, right)
        return Sum(self._expand(left.as_list(), right.as_list(), multiply, expr))

    def _divide(self, expr: Binary) -> Value:
        """Division by a sum is done term by term, (a + b) / (c + d) = a/c + a/d + b/c + b/d.

        That's not what division means, but it is the established behaviour & callers rely on it.
        Within a term-wise division only a pair of two variables is rejected; 6 / (2x + 3) gives 3x + 2.
        """
        numerator = self._evaluate(expr.left)
        denominator = self._evaluate(expr.right)

        def divide_terms(a: Monomial, b: Monomial) -> Monomial:
            if a.variable is not None and b.variable is not None:
                raise VariableDivision(expr.left.token, expr.right.token)
            variable = a.variable if a.variable is not None else b.variable
            return Monomial(divide(a.coefficient, b.coefficient), variable)

        if isinstance(numerator, Monomial) and isinstance(denominator, Monomial):
            if denominator.variable is not None:
                raise VariableDivision(expr.left.token, expr.right.token)
            return Monomial(divide(numerator.coefficient, denominator.coefficient), numerator.variable)
        return Sum(self._expand(numerator.as_list(), denominator.as_list(), divide_terms, expr))

    def _power(self, expr: Binary) -> Value:
        base = self._evaluate(expr.left)
        exponent = self._evaluate(expr.right)

        if not (isinstance(base, Monomial) and base.is_constant):
            raise NonConstantBase(expr.left.token)
        if not (isinstance(exponent, Monomial) and exponent.is_constant):
            raise NonConstantExponent(expr.right.token)
        return Monomial(power(base.coefficient, exponent.coefficient))

    def _expand(self, lefts: List[Value], rights: List[Value], fn: MonomialFn, expr: Binary) -> List[Value]:
        result = cross(lefts, rights, fn)
        count = count_terms(result)
        if count > self.EXPANSION_WARNING_THRESHOLD:
            warnings.warn(
                f"Expanding {expr!r} produced {count} terms. "
                "Products of grouped sums grow multiplicatively; consider simplifying the groups first."
            )
        return result


def cross(lefts: List[Value], rights: List[Value], fn: MonomialFn) -> List[Value]:
    """Applies fn to every (left, right) pair. A pair involving a sum is expanded into a nested Sum."""
    result = []
    for left in lefts:
        for right in rights:
            if isinstance(left, Monomial) and isinstance(right, Monomial):
                result.append(fn(left, right))
            else:
                result.append(Sum(cross(left.as_list(), right.as_list(), fn)))
    return result


def count_terms(values: List[Value]) -> int:
    """Number of monomials in values, counting through nested sums."""
    return sum(count_terms(v.values) if isinstance(v, Sum) else 1 for v in values)
