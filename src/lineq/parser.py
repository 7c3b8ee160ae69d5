"""Recursive descent parser. Lowest to highest precedence:

    equation   := expression "=" expression
    expression := factor (("+"|"-") factor)*
    factor     := monomial (("*"|"/") monomial)*
    monomial   := "-" monomial | primary suffix?
    primary    := NUMBER | IDENTIFIER | "(" expression ")"

suffix:
    - IDENTIFIER or "(" right after a primary is an implicit multiplication: 3x, 2(x + 1), x(1 + y)
    - "^" primary is a power. The exponent is one primary only: 2^x, 2^(x + 1), but 2^x y is (2^x) y
"""

from typing import List, Optional

from .equation import Equation
from .errors import (
    ExpectedEof,
    ExpectedPrimary,
    ExpectedTokenFoundEof,
    InvalidExponent,
    NestingTooDeep,
    ParserError,
    UnexpectedEof,
    WrongToken,
)
from .expr import Binary, Expr, Grouping, Negation, Number, Variable
from .tokenizer import Source, Token, TokenType, tokenize


class Parser:
    def __init__(self, tokens: List[Token]):
        self._tokens = tokens
        self._current = 0

    @classmethod
    def from_source(cls, source: Source) -> "Parser":
        """Tokenizes the whole source before any parsing happens."""
        return cls(tokenize(source))

    def equation(self) -> Equation:
        lhs = self._side()
        self._expect(TokenType.EQUAL)
        rhs = self._side()

        trailing = self._peek()
        if trailing is not None:
            raise ExpectedEof(trailing)
        return Equation(lhs, rhs)

    def _side(self) -> Expr:
        start = self._peek()
        column = start.column if start is not None else self._end_column
        try:
            return self._expression()
        except RecursionError:
            raise NestingTooDeep(column) from None

    def _expression(self) -> Expr:
        expr = self._factor()
        while True:
            operator = self._match(TokenType.PLUS, TokenType.MINUS)
            if operator is None:
                return expr
            expr = Binary(expr, operator, self._factor(), token=operator)

    def _factor(self) -> Expr:
        expr = self._monomial()
        while True:
            operator = self._match(TokenType.STAR, TokenType.SLASH)
            if operator is None:
                return expr
            expr = Binary(expr, operator, self._monomial(), token=operator)

    def _monomial(self) -> Expr:
        minus = self._match(TokenType.MINUS)
        if minus is not None:
            return Negation(self._monomial(), token=minus)

        primary = self._primary()
        following = self._peek()
        if following is None:
            return primary

        if following.type in (TokenType.IDENTIFIER, TokenType.LPAREN):
            star = Token(TokenType.STAR, "*", following.column)
            return Binary(primary, star, self._monomial(), token=star)
        if following.type is TokenType.HAT:
            self._advance()
            return Binary(primary, following, self._exponent(), token=following)
        return primary

    def _primary(self) -> Expr:
        token = self._peek()
        if token is None:
            raise UnexpectedEof(self._end_column)

        if token.type is TokenType.NUMBER:
            self._advance()
            return Number(token.value, token=token)
        if token.type is TokenType.IDENTIFIER:
            self._advance()
            return Variable(token.value, token=token)
        if token.type is TokenType.LPAREN:
            self._advance()
            inner = self._expression()
            self._expect(TokenType.RPAREN)
            return Grouping(inner, token=token)
        raise ExpectedPrimary(token)

    def _exponent(self) -> Expr:
        token = self._peek()
        if token is None:
            raise UnexpectedEof(self._end_column)
        try:
            return self._primary()
        except ParserError as e:
            raise InvalidExponent(token) from e

    ##------------ token helpers ------------##

    def _peek(self) -> Optional[Token]:
        if self._current < len(self._tokens):
            return self._tokens[self._current]
        return None

    def _advance(self) -> Optional[Token]:
        token = self._peek()
        if token is not None:
            self._current += 1
        return token

    def _match(self, *types: TokenType) -> Optional[Token]:
        """Consumes & returns the next token if it is one of types."""
        token = self._peek()
        if token is not None and token.type in types:
            return self._advance()
        return None

    def _expect(self, type_: TokenType) -> Token:
        token = self._peek()
        if token is None:
            raise ExpectedTokenFoundEof(type_, self._end_column)
        if token.type is not type_:
            raise WrongToken(type_, token)
        return self._advance()

    @property
    def _end_column(self) -> int:
        """The column right after the last token."""
        if not self._tokens:
            return 1
        last = self._tokens[-1]
        return last.column + len(last.lexeme)


def parse(source: Source) -> Equation:
    return Parser.from_source(source).equation()
