"""RULES OF EXPRs:

1. Exprs shall NOT be mutated after they are built. The parser builds one tree per side of the equation,
the evaluator reads it once and then it's thrown away.

2. Each node keeps the token it was built from so that errors can point at a column. Tokens don't take part
in equality: two trees are == if they have the same structure, wherever they came from.

repr() gives the s-expression form, e.g. "(+ x (group (* 2 y)))".
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from .latex import bracketfy, format_number, group, latex_number
from .tokenizer import Token, TokenType


def _token_field():
    return field(default=None, compare=False, repr=False)


def _parenthesize(label: str, *exprs: "Expr") -> str:
    return "(" + " ".join([label] + [repr(e) for e in exprs]) + ")"


class Expr(ABC):
    """Base class for all expressions."""

    token: Optional[Token]

    @abstractmethod
    def children(self) -> List["Expr"]:
        raise NotImplementedError(f"Cannot get children of {self.__class__.__name__}")

    @abstractmethod
    def __repr__(self) -> str:
        raise NotImplementedError(f"Cannot represent {self.__class__.__name__}")

    @abstractmethod
    def latex(self) -> str:
        raise NotImplementedError(f"Cannot convert {self.__class__.__name__} to latex")

    def variables(self) -> List[str]:
        """All variable names in the tree, in order of first appearance."""
        names = []
        for child in self.children():
            for name in child.variables():
                if name not in names:
                    names.append(name)
        return names


@dataclass(frozen=True)
class Number(Expr):
    value: float
    token: Optional[Token] = _token_field()

    def children(self) -> List[Expr]:
        return []

    def __repr__(self) -> str:
        return format_number(self.value)

    def latex(self) -> str:
        return latex_number(self.value)


@dataclass(frozen=True)
class Variable(Expr):
    name: str
    token: Optional[Token] = _token_field()

    def children(self) -> List[Expr]:
        return []

    def variables(self) -> List[str]:
        return [self.name]

    def __repr__(self) -> str:
        return self.name

    def latex(self) -> str:
        return self.name


@dataclass(frozen=True)
class Negation(Expr):
    inner: Expr
    token: Optional[Token] = _token_field()

    def children(self) -> List[Expr]:
        return [self.inner]

    def __repr__(self) -> str:
        return _parenthesize("-", self.inner)

    def latex(self) -> str:
        if isinstance(self.inner, Binary):
            return "-" + bracketfy(self.inner.latex())
        return "-" + self.inner.latex()


@dataclass(frozen=True)
class Grouping(Expr):
    """An expression between parentheses."""

    inner: Expr
    token: Optional[Token] = _token_field()

    def children(self) -> List[Expr]:
        return [self.inner]

    def __repr__(self) -> str:
        return _parenthesize("group", self.inner)

    def latex(self) -> str:
        return bracketfy(self.inner.latex())


@dataclass(frozen=True)
class Binary(Expr):
    """left <operator> right. Implicit multiplications get a synthesized '*' operator."""

    left: Expr
    operator: Token
    right: Expr
    token: Optional[Token] = _token_field()

    def children(self) -> List[Expr]:
        return [self.left, self.right]

    def __repr__(self) -> str:
        return _parenthesize(self.operator.lexeme, self.left, self.right)

    def latex(self) -> str:
        type_ = self.operator.type
        left, right = self.left.latex(), self.right.latex()
        if type_ is TokenType.SLASH:
            # the fraction bar does the grouping
            left = self.left.inner.latex() if isinstance(self.left, Grouping) else left
            right = self.right.inner.latex() if isinstance(self.right, Grouping) else right
            return "\\frac" + "{" + left + "}" + "{" + right + "}"
        if type_ is TokenType.HAT:
            right = self.right.inner.latex() if isinstance(self.right, Grouping) else right
            return left + "^" + group(right)
        if type_ is TokenType.STAR:
            return f"{left} \\cdot {right}"
        return f"{left} {self.operator.lexeme} {right}"

    # __eq__ compares the operator by type only; the synthesized '*' of "3x" equals an explicit one.
    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Binary)
            and self.operator.type == other.operator.type
            and self.left == other.left
            and self.right == other.right
        )

    def __hash__(self) -> int:
        return hash((self.operator.type, self.left, self.right))


@dataclass(frozen=True)
class FunctionCall(Expr):
    """name(arg). Reserved: the grammar has no syntax for it and the evaluator rejects it."""

    name: str
    arg: Expr
    token: Optional[Token] = _token_field()

    def children(self) -> List[Expr]:
        return [self.arg]

    def __repr__(self) -> str:
        return f"(call {self.name} {self.arg!r})"

    def latex(self) -> str:
        return f"\\operatorname{{{self.name}}}" + bracketfy(self.arg.latex())
