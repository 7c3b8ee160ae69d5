import math

import numpy as np
import pytest

from lineq.equation import CanonicalEquation
from lineq.parser import parse


def test_str():
    assert str(CanonicalEquation({"x": 43.0, "y": -26.0}, 7.0)) == "43x - 26y = 7"
    assert str(CanonicalEquation({"x": 0.0, "z": 2.5}, -1.0)) == "0x + 2.5z = -1"
    assert str(CanonicalEquation({}, 3.0)) == "0 = 3"


def test_tiny_terms_are_hidden_except_the_first():
    assert str(CanonicalEquation({"x": 1.0, "y": 1e-30}, 0.0)) == "1x = 0"
    assert str(CanonicalEquation({"x": 1e-30, "y": 2.0}, 0.0)) == "1e-30x + 2y = 0"


def test_latex():
    assert CanonicalEquation({"x": 1.0, "y": -1.0, "z": 2.5}, -2.0).latex() == "x - y + 2.5z = -2"
    assert CanonicalEquation({"x": 1.0}, -math.inf).latex() == "x = -\\infty"
    assert CanonicalEquation({}, math.nan).latex() == "0 = \\text{NaN}"


def test_as_array():
    equation = CanonicalEquation({"y": 2.0, "x": 1.0}, 3.0)
    coefficients, constant = equation.as_array()
    np.testing.assert_array_equal(coefficients, [1.0, 2.0])
    assert constant == 3.0

    coefficients, _ = equation.as_array(["x", "z", "y"])
    np.testing.assert_array_equal(coefficients, [1.0, 0.0, 2.0])


def test_evalf():
    equation = CanonicalEquation({"x": 2.0, "y": -1.0}, 1.0)
    assert equation.evalf({"x": 1, "y": 3}) == 0
    with pytest.raises(ValueError, match="y"):
        equation.evalf({"x": 1})


def test_is_finite():
    assert CanonicalEquation({"x": 1.0}, 0.0).is_finite
    assert not CanonicalEquation({"x": math.inf}, 0.0).is_finite
    assert not CanonicalEquation({"x": 1.0}, math.nan).is_finite


def test_parsed_equation():
    equation = parse("x + 1 = 2y")
    assert repr(equation) == "(+ x 1) = (* 2 y)"
    assert equation.latex() == "x + 1 = 2 \\cdot y"
