from .equation import CanonicalEquation, Equation
from .errors import *
from .evaluator import Evaluator
from .expr import Binary, Expr, FunctionCall, Grouping, Negation, Number, Variable
from .parser import Parser, parse
from .simplify import Simplifier, evaluate_sides, simplify_equation
from .tokenizer import Token, TokenType, Tokenizer, tokenize
from .value import Monomial, Sum, Value
