"""Byte-level scanner.

The tokenizer is lazy: iterating over a Tokenizer reads the source one byte at a time and yields
tokens as soon as they are complete. It is finite and can't be restarted (iter(tokenizer) is the
tokenizer itself). Errors are raised from the iterator at the point they are hit.
"""

import io
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, List, Optional, TextIO, Union

from .errors import NoUtf8, UnknownCharacter

Source = Union[str, bytes, BinaryIO, TextIO]

DECIMAL_SEPARATOR = ord(".")
WHITESPACE = b" \t"
NEWLINES = b"\n\r"


class TokenType(Enum):
    """The value is how the token type is described in error messages."""

    NUMBER = "number"
    IDENTIFIER = "identifier"
    LPAREN = "("
    RPAREN = ")"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    HAT = "^"
    EQUAL = "="


_SINGLE_CHAR_TOKENS = {ord(t.value): t for t in TokenType if len(t.value) == 1}


@dataclass(frozen=True)
class Token:
    """A token & where it starts.

    value: the parsed float for numbers, the name for identifiers, None otherwise.
    column: 1-based, counted in bytes from the start of the line.
    """

    type: TokenType
    lexeme: str
    column: int
    value: Union[float, str, None] = None

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.column})"


def _is_digit(byte: int) -> bool:
    return ord("0") <= byte <= ord("9")


def _is_identifier_start(byte: int) -> bool:
    return ord("a") <= byte <= ord("z") or ord("A") <= byte <= ord("Z") or byte == ord("_")


def _is_identifier_part(byte: int) -> bool:
    return _is_identifier_start(byte) or _is_digit(byte)


class Tokenizer:
    """Turns a source into tokens.

    source: a str (encoded as utf-8), bytes, or a binary or text stream with a read() method.
    """

    def __init__(self, source: Source):
        if isinstance(source, str):
            source = source.encode("utf-8")
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)
        self._input = source
        self._column = 0
        self._current: Optional[int] = None
        self._pending = b""
        self._started = False

    def __iter__(self) -> "Tokenizer":
        return self

    def __next__(self) -> Token:
        if not self._started:
            self._started = True
            self._advance()

        token = self._scan_token()
        if token is None:
            raise StopIteration
        return token

    def _advance(self) -> Optional[int]:
        """Moves one byte forward and returns the new current byte (None at the end of input)."""
        if not self._pending:
            chunk = self._input.read(1)
            # text streams hand out characters, which may be several bytes once encoded
            self._pending = chunk.encode("utf-8") if isinstance(chunk, str) else chunk
        if not self._pending:
            self._current = None
            return None
        self._current = self._pending[0]
        self._pending = self._pending[1:]
        self._column += 1
        return self._current

    def _skip_whitespace(self) -> None:
        while self._current is not None:
            if self._current in NEWLINES:
                self._column = 0
            elif self._current not in WHITESPACE:
                return
            self._advance()

    def _scan_token(self) -> Optional[Token]:
        self._skip_whitespace()
        current = self._current
        if current is None:
            return None

        column = self._column
        if current in _SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(_SINGLE_CHAR_TOKENS[current], chr(current), column)
        if _is_digit(current):
            return self._number(column)
        if _is_identifier_start(current):
            return self._identifier(column)

        # consume it so that a caller who keeps iterating doesn't get stuck on the same byte
        self._advance()
        raise UnknownCharacter(current, column)

    def _number(self, column: int) -> Token:
        lexeme = bytearray()
        seen_separator = False
        while self._current is not None:
            if self._current == DECIMAL_SEPARATOR:
                if seen_separator:
                    break
                seen_separator = True
            elif not _is_digit(self._current):
                break
            lexeme.append(self._current)
            self._advance()

        text = self._decode(lexeme, column)
        return Token(TokenType.NUMBER, text, column, float(text))

    def _identifier(self, column: int) -> Token:
        lexeme = bytearray()
        while self._current is not None and _is_identifier_part(self._current):
            lexeme.append(self._current)
            self._advance()

        text = self._decode(lexeme, column)
        return Token(TokenType.IDENTIFIER, text, column, text)

    @staticmethod
    def _decode(lexeme: bytearray, column: int) -> str:
        try:
            return lexeme.decode("utf-8")
        except UnicodeDecodeError:
            raise NoUtf8(column) from None


def tokenize(source: Source) -> List[Token]:
    """Reads the whole source. Raises the first TokenizerError encountered."""
    return list(Tokenizer(source))
