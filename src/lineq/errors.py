"""Everything that can go wrong while simplifying an equation.

Errors are grouped by the stage that raises them (tokenizer, parser, evaluator) and all share the
SimplifierError base, so callers only need to catch one thing. They are meant for humans: str(err)
is a one-line message prefixed by the stage and suffixed by the (1-based) column it points at.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .tokenizer import Token, TokenType


class SimplifierError(ValueError):
    """Base class for every error raised while simplifying an equation."""

    stage = "Simplifier Error"

    def __init__(self, message: str, column: int):
        self.message = message
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.stage}: {self.message}. Column {self.column}"


def _describe_token(token: "Token") -> str:
    return f"{token.type.value} {token.lexeme!r}" if token.type.value != token.lexeme else repr(token.lexeme)


def _describe_byte(byte: int) -> str:
    char = chr(byte)
    if byte < 128 and char.isprintable():
        return repr(char)
    return f"0x{byte:02x}"


##------------ Tokenizer ------------##


class TokenizerError(SimplifierError):
    stage = "Syntax Error"


class UnknownCharacter(TokenizerError):
    def __init__(self, byte: int, column: int):
        self.byte = byte
        super().__init__(f"Character {_describe_byte(byte)} is not recognized by the tokenizer", column)


class NoUtf8(TokenizerError):
    def __init__(self, column: int):
        super().__init__("Input string contains non-UTF8 sequences", column)


##------------ Parser ------------##


class ParserError(SimplifierError):
    stage = "Parser Error"


class WrongToken(ParserError):
    def __init__(self, expected: "TokenType", found: "Token"):
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected.value!r}, but found {_describe_token(found)} instead", found.column)


class ExpectedTokenFoundEof(ParserError):
    def __init__(self, expected: "TokenType", column: int):
        self.expected = expected
        super().__init__(f"Expected {expected.value!r}, but the input ended unexpectedly", column)


class UnexpectedEof(ParserError):
    def __init__(self, column: int):
        super().__init__("Unexpected end of input", column)


class NestingTooDeep(ParserError):
    """column: where the side of the equation that nests too deeply starts."""

    def __init__(self, column: int):
        super().__init__("Expression is nested too deeply", column)


class ExpectedEof(ParserError):
    """There are tokens left over after a complete equation."""

    def __init__(self, found: "Token"):
        self.found = found
        super().__init__(f"Expected end of input, but found {_describe_token(found)} instead", found.column)


class ExpectedPrimary(ParserError):
    def __init__(self, found: "Token"):
        self.found = found
        super().__init__(
            f"Expected number, identifier or left parenthesis, but found {_describe_token(found)} instead",
            found.column,
        )


class InvalidExponent(ParserError):
    def __init__(self, found: "Token"):
        self.found = found
        super().__init__(
            f"Exponent must be a number, an identifier or a group, but found {_describe_token(found)} instead",
            found.column,
        )


##------------ Evaluator ------------##


class EvaluatorError(SimplifierError):
    """token: the token the error points at. Every subclass sets a fixed message."""

    stage = "Evaluation Error"
    description = "Cannot evaluate expression"

    def __init__(self, token: Optional["Token"]):
        self.token = token
        super().__init__(self.description, token.column if token is not None else 0)


class VariableDivision(EvaluatorError):
    description = "Cannot divide by a variable denominator"

    def __init__(self, numerator: "Token", denominator: "Token"):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(denominator)


class VariableMultiplication(EvaluatorError):
    description = "Cannot multiply a variable times another variable"

    def __init__(self, operator: "Token", left: "Token", right: "Token"):
        self.left = left
        self.right = right
        super().__init__(operator)


class NonConstantBase(EvaluatorError):
    description = "The base of a power must be a constant"


class NonConstantExponent(EvaluatorError):
    description = "The exponent of a power must be a constant"


class InvalidBinaryOperator(EvaluatorError):
    def __init__(self, token: "Token"):
        self.description = f"Token {token.lexeme!r} is not a valid binary operator"
        super().__init__(token)


class ExpressionTooDeep(EvaluatorError):
    description = "Expression is nested too deeply to evaluate"


class UnsupportedExpression(EvaluatorError):
    description = "Function calls are not supported"
