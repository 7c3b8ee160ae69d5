from lineq.debug.logger import Logger
from lineq.debug.utils import debug_repr, print_tree
from lineq.parser import parse
from lineq.simplify import evaluate_sides


def test_print_tree():
    lines = []
    print_tree(parse("3x + 1 = 0").lhs, func=lines.append)
    assert lines == ["[4] +", "  [2] *", "    [1] 3", "    [2] x", "  [6] 1"]


def test_debug_repr_of_values():
    lhs, rhs = evaluate_sides("x + 1 = 2")
    assert debug_repr(lhs) == "Sum([Monomial(1.0, 'x'), Monomial(1.0, None)])"
    assert debug_repr(rhs) == "Monomial(2.0, None)"


def test_debug_repr_of_exprs():
    equation = parse("-(x) = 2^y")
    assert debug_repr(equation.lhs) == "Negation(Grouping(Variable('x')))"
    assert debug_repr(equation.rhs) == "Binary(Number(2.0), '^', Variable('y'))"


def test_logger_sort():
    logger = Logger()
    logger.log("a", 0.1, None)
    logger.log("b", 0.3, None)
    logger.log("c", 0.2, None)
    logger.sort()
    assert list(logger.data) == ["b", "c", "a"]
