import io
import math

import pytest

from lineq.debug.logger import Logger
from lineq.debug.test_utils import assert_canonical, assert_fails, m, s
from lineq.errors import *
from lineq.simplify import Simplifier, fold, simplify_equation


@pytest.mark.parametrize(
    ["source", "terms", "constant"],
    [
        ["x = 5", {"x": 1}, -5],
        ["3*(x+2y-5) = -4*(-8y+10x+2)", {"x": 43, "y": -26}, 7],
        ["(24x+12y+6)/3 = 0", {"x": 8, "y": 4}, -2],
        ["2x+3x-2 = x+y+2", {"x": 4, "y": -1}, 4],
        ["-2x -6x -3y = -5 -x -y -10", {"x": -7, "y": -2}, -15],
    ],
)
def test_simplify(source, terms, constant):
    assert_canonical(source, terms, constant)


def test_cancelled_terms_are_kept():
    assert_canonical("x - x = 2", {"x": 0.0}, -2)
    assert str(simplify_equation("x - x = 2")) == "0x = -2"


def test_constant_folding():
    # a bare constant side and a constant inside a sum are folded with opposite signs
    assert_canonical("5 = x", {"x": -1}, 5)
    assert_canonical("x + 5 = 0", {"x": 1}, -5)
    assert_canonical("x + 1 = 4", {"x": 1}, -5)
    assert_canonical("0 = x + 4", {"x": -1}, 4)


def test_fold_nested_sums():
    result = fold(s(m(1.0, "x"), s(m(2.0), m(3.0, "y"))), m(4.0))
    assert result.terms == {"x": 1.0, "y": 3.0}
    assert result.constant == -6.0


def test_terms_keep_order_of_appearance():
    result = simplify_equation("z + 2y = x")
    assert list(result.terms) == ["z", "y", "x"]
    assert result.variables() == ["x", "y", "z"]


def test_multi_letter_identifiers():
    assert_canonical("2xy + xy = 3", {"xy": 3}, -3)
    assert_fails("x y = 3", VariableMultiplication, 3)


@pytest.mark.parametrize(
    ["source", "message"],
    [
        ["y/x = 2", "Evaluation Error: Cannot divide by a variable denominator. Column 3"],
        ["x^2 = 1", "Evaluation Error: The base of a power must be a constant. Column 1"],
        ["x = 3 $", "Syntax Error: Character '$' is not recognized by the tokenizer. Column 7"],
        ["x + 1", "Parser Error: Expected '=', but the input ended unexpectedly. Column 6"],
    ],
)
def test_error_messages(source, message):
    with pytest.raises(SimplifierError) as e:
        simplify_equation(source)
    assert str(e.value) == message


def test_errors_are_value_errors():
    for source in ["x = ", "x = y/x", "x = #"]:
        with pytest.raises(ValueError):
            simplify_equation(source)


def test_non_finite_results_warn():
    with pytest.warns(UserWarning, match="non-finite"):
        result = simplify_equation("x = 1/0")
    assert result.constant == -math.inf
    assert not result.is_finite

    with pytest.warns(UserWarning, match="non-finite"):
        result = simplify_equation("x = 0/0")
    assert math.isnan(result.constant)


def test_sources():
    expected = simplify_equation("2x = 4")
    assert simplify_equation(b"2x = 4") == expected
    assert simplify_equation(io.BytesIO(b"2x = 4")) == expected


def test_simplifier_is_reusable():
    simplifier = Simplifier()
    assert simplifier.simplify("x = 1").constant == -1
    assert simplifier.simplify("x = 2").constant == -2


def test_evalf_on_solution():
    result = simplify_equation("2x = 4")
    assert result.evalf({"x": 2}) == 0
    assert result.evalf({"x": 3}) == 2


def test_logger(monkeypatch, tmp_path):
    logger = Logger(path=str(tmp_path / "log"))
    monkeypatch.setattr(Simplifier, "logger", logger)

    simplify_equation("3x = 6")
    with pytest.raises(ParserError):
        simplify_equation("x = ")

    assert set(logger.data) == {"3x = 6", "x = "}
    assert logger.data["3x = 6"].result.terms == {"x": 3}
    assert logger.data["x = "].result is None

    logger.dump()
    lines = (tmp_path / "log.txt").read_text().splitlines()
    assert lines[0] == "Equation: time taken (s)"
    assert any(line.startswith("3x = 6: ") and line.endswith("-> 3x = -6") for line in lines)
    assert any(line.startswith("x = : ") and line.endswith("-> FAILED") for line in lines)


def test_debug_output(capsys):
    simplify_equation("3x = 6", debug=True)
    out = capsys.readouterr().out
    assert "lhs:\n[2] *\n  [1] 3\n  [2] x\n  => Monomial(3.0, 'x')\n" in out
    assert "rhs:\n[6] 6\n  => Monomial(6.0, None)\n" in out
