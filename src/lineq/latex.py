"""Latex utility functions"""

import math
from typing import Optional


def format_number(value: float) -> str:
    """Plain-text number: integral floats lose their trailing '.0'."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def latex_number(value: float) -> str:
    if math.isnan(value):
        return "\\text{NaN}"
    if math.isinf(value):
        return "\\infty" if value > 0 else "-\\infty"
    return format_number(value)


def group(inner_latex: str) -> str:
    """wrap latex with curly brackets if necessary"""
    return inner_latex if len(inner_latex) == 1 else "{" + inner_latex + "}"


def bracketfy(inner_latex: str) -> str:
    return f"\\left( {inner_latex} \\right)"


def latex_term(coefficient: float, variable: Optional[str]) -> str:
    """coefficient * variable, with the 1 / -1 coefficient hidden when there is a variable."""
    if variable is None:
        return latex_number(coefficient)
    if coefficient == 1:
        return variable
    if coefficient == -1:
        return "-" + variable
    return latex_number(coefficient) + variable
