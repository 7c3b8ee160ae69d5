from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .expr import Expr
from .latex import format_number, latex_number, latex_term


@dataclass
class Equation:
    """A parsed equation: one expression tree per side."""

    lhs: Expr
    rhs: Expr

    def __repr__(self) -> str:
        return f"{self.lhs!r} = {self.rhs!r}"

    def latex(self) -> str:
        return f"{self.lhs.latex()} = {self.rhs.latex()}"


@dataclass
class CanonicalEquation:
    """sum(terms[v] * v) + constant = 0

    Every variable of the input shows up in terms exactly once. Terms that cancel out stay in the dict
    with a 0 coefficient; only the string representations skip them.
    """

    terms: Dict[str, float]
    constant: float

    # coefficients smaller than this (in absolute value) aren't printed, except for the first one.
    DISPLAY_EPSILON: ClassVar[float] = 1e-20

    def variables(self) -> List[str]:
        return sorted(self.terms)

    def _displayed_terms(self) -> List[Tuple[str, float]]:
        items = list(self.terms.items())
        return items[:1] + [(v, c) for v, c in items[1:] if not abs(c) < self.DISPLAY_EPSILON]

    def __str__(self) -> str:
        displayed = self._displayed_terms()
        if not displayed:
            return f"0 = {format_number(self.constant)}"

        variable, coefficient = displayed[0]
        string = f"{format_number(coefficient)}{variable}"
        for variable, coefficient in displayed[1:]:
            sign = "-" if coefficient < 0 else "+"
            string += f" {sign} {format_number(abs(coefficient))}{variable}"
        return f"{string} = {format_number(self.constant)}"

    def latex(self) -> str:
        displayed = self._displayed_terms()
        if not displayed:
            return f"0 = {latex_number(self.constant)}"

        string = latex_term(displayed[0][1], displayed[0][0])
        for variable, coefficient in displayed[1:]:
            if coefficient < 0:
                string += " - " + latex_term(-coefficient, variable)
            else:
                string += " + " + latex_term(coefficient, variable)
        return f"{string} = {latex_number(self.constant)}"

    def as_array(self, variables: Optional[Sequence[str]] = None) -> Tuple[np.ndarray, float]:
        """Coefficient vector in the order of `variables` (default: sorted names) & the constant.

        Variables that aren't in the equation get a 0 coefficient.
        """
        if variables is None:
            variables = self.variables()
        coefficients = np.array([self.terms.get(v, 0.0) for v in variables], dtype=float)
        return coefficients, self.constant

    def evalf(self, subs: Dict[str, float]) -> float:
        """Evaluates the left hand side, sum(terms[v] * subs[v]) + constant."""
        variables = self.variables()
        missing = [v for v in variables if v not in subs]
        if missing:
            raise ValueError(f"No value given for {', '.join(missing)} in {self}")

        coefficients, constant = self.as_array(variables)
        values = np.array([subs[v] for v in variables], dtype=float)
        return float(np.dot(coefficients, values) + constant)

    @property
    def is_finite(self) -> bool:
        coefficients, constant = self.as_array()
        return bool(np.isfinite(coefficients).all() and np.isfinite(constant))
