"""Tokenizer for MCDOC schema sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional, Union

from .errors import LexerError, SourcePos


class TokenKind(Enum):
    """The kinds of token the lexer produces."""

    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()
    TRUE = auto()
    FALSE = auto()
    USE = auto()
    STRUCT = auto()
    ENUM = auto()
    TYPE = auto()
    DISPATCH = auto()
    TO = auto()
    SUPER = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    COLON = auto()
    DOUBLE_COLON = auto()
    SEMICOLON = auto()
    COMMA = auto()
    QUESTION = auto()
    PIPE = auto()
    AT = auto()
    HASH = auto()
    DOT = auto()
    DOT_DOT_DOT = auto()
    DOT_DOT = auto()
    PERCENT = auto()
    EQUAL = auto()
    EQUALS = auto()
    LESS = auto()
    GREATER = auto()
    ANNOTATION = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    EOF = auto()
    NEWLINE = auto()
    WHITESPACE = auto()


@dataclass(frozen=True)
class Token:
    """A token kind with its text or numeric value, where it has one."""

    kind: TokenKind
    value: Union[str, float, None] = None


@dataclass(frozen=True)
class Position:
    """Line and column (from 1) and byte offset (from 0) in the source."""

    line: int = 0
    column: int = 0
    offset: int = 0


@dataclass(frozen=True)
class TokenWithPos:
    """A token together with the position where it starts."""

    token: Token
    position: Position


_KEYWORDS = {
    "use": TokenKind.USE,
    "struct": TokenKind.STRUCT,
    "enum": TokenKind.ENUM,
    "type": TokenKind.TYPE,
    "dispatch": TokenKind.DISPATCH,
    "to": TokenKind.TO,
    "super": TokenKind.SUPER,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}

_SINGLE = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "?": TokenKind.QUESTION,
    "|": TokenKind.PIPE,
    "@": TokenKind.AT,
    "%": TokenKind.PERCENT,
    "=": TokenKind.EQUAL,
    "<": TokenKind.LESS,
    ">": TokenKind.GREATER,
}

_DIGITS = frozenset("0123456789")


def _is_digit(ch: Optional[str]) -> bool:
    return ch is not None and ch in _DIGITS


class Lexer:
    """Splits MCDOC text into tokens, skipping spaces and comments."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = 0
        self._line = 1
        self._column = 1
        self._offset = 0

    def _current(self) -> Optional[str]:
        return self._text[self._index] if self._index < len(self._text) else None

    def _peek(self) -> Optional[str]:
        nxt = self._index + 1
        return self._text[nxt] if nxt < len(self._text) else None

    def _here(self) -> SourcePos:
        return SourcePos(self._line, self._column)

    def _advance(self) -> None:
        ch = self._current()
        if ch is None:
            return
        self._offset += len(ch.encode("utf-8", "surrogatepass"))
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        self._index += 1

    def _skip_while_digits(self) -> None:
        while _is_digit(self._current()):
            self._advance()

    def _skip_whitespace_and_comments(self) -> None:
        while (ch := self._current()) is not None:
            if ch in " \t\r":
                self._advance()
            elif ch == "/" and self._peek() == "/":
                while self._current() is not None and self._current() != "\n":
                    self._advance()
            elif ch == "/" and self._peek() == "*":
                self._skip_block_comment()
            else:
                break

    def _skip_block_comment(self) -> None:
        self._advance()
        self._advance()
        depth = 1
        while depth > 0 and self._current() is not None:
            ch, nxt = self._current(), self._peek()
            if ch == "/" and nxt == "*":
                depth += 1
                self._advance()
                self._advance()
            elif ch == "*" and nxt == "/":
                depth -= 1
                self._advance()
                self._advance()
            else:
                self._advance()
        if depth > 0:
            raise LexerError("Unterminated block comment", self._here())

    def _read_identifier(self) -> str:
        start = self._index
        while (ch := self._current()) is not None and (ch.isalnum() or ch == "_"):
            self._advance()
        return self._text[start:self._index]

    def _read_number(self) -> float:
        start = self._index
        if self._current() == "." and _is_digit(self._peek()):
            self._advance()
            self._skip_while_digits()
        else:
            self._skip_while_digits()
            if self._current() == "." and _is_digit(self._peek()):
                self._advance()
                self._skip_while_digits()
        number_text = self._text[start:self._index]
        try:
            return float(number_text)
        except ValueError:
            raise LexerError(
                f"Invalid number format: {number_text}", self._here()
            ) from None

    def _read_string(self) -> str:
        quote = self._current()
        self._advance()
        start = self._index
        while (ch := self._current()) is not None:
            if ch == quote:
                content = self._text[start:self._index]
                self._advance()
                return content
            if ch == "\\":
                self._advance()
                if self._current() is not None:
                    self._advance()
            else:
                self._advance()
        raise LexerError("Unterminated string literal", self._here())

    def _read_annotation(self) -> str:
        start = self._index
        self._advance()
        if self._current() != "[":
            raise LexerError("Expected '[' after '#' in annotation", self._here())
        self._advance()
        depth = 1
        while depth > 0 and (ch := self._current()) is not None:
            if ch == "[":
                depth += 1
            elif ch == "]":
                depth -= 1
            self._advance()
        if depth > 0:
            raise LexerError("Unterminated annotation", self._here())
        return self._text[start:self._index]

    def _read_token(self, pos: SourcePos) -> Token:
        ch = self._current()
        if ch is None:
            return Token(TokenKind.EOF)
        if ch == "\n":
            self._advance()
            return Token(TokenKind.NEWLINE)
        if ch in _SINGLE:
            self._advance()
            return Token(_SINGLE[ch])
        if ch == ":":
            self._advance()
            if self._current() == ":":
                self._advance()
                return Token(TokenKind.DOUBLE_COLON)
            return Token(TokenKind.COLON)
        if ch == ".":
            self._advance()
            if self._current() != ".":
                return Token(TokenKind.DOT)
            self._advance()
            if self._current() == ".":
                self._advance()
                return Token(TokenKind.DOT_DOT_DOT)
            return Token(TokenKind.DOT_DOT)
        if ch == "#":
            return Token(TokenKind.ANNOTATION, self._read_annotation())
        if ch in "\"'":
            return Token(TokenKind.STRING, self._read_string())
        if ch == "-":
            nxt = self._peek()
            if _is_digit(nxt) or nxt == ".":
                self._advance()
                return Token(TokenKind.NUMBER, -self._read_number())
            raise LexerError("Unexpected character: '-'", pos)
        if ch in _DIGITS:
            return Token(TokenKind.NUMBER, self._read_number())
        if ch.isalpha() or ch == "_":
            ident = self._read_identifier()
            kind = _KEYWORDS.get(ident)
            return Token(kind) if kind is not None else Token(TokenKind.IDENTIFIER, ident)
        raise LexerError(f"Unexpected character: '{ch}'", pos)

    def next_token(self) -> TokenWithPos:
        """Read and return the next token; EOF is returned at the end."""
        self._skip_whitespace_and_comments()
        position = Position(self._line, self._column, self._offset)
        token = self._read_token(SourcePos(self._line, self._column))
        return TokenWithPos(token, position)

    def __iter__(self) -> Iterator[TokenWithPos]:
        while True:
            item = self.next_token()
            yield item
            if item.token.kind is TokenKind.EOF:
                return

    def tokenize(self) -> List[TokenWithPos]:
        """Return all remaining tokens, ending with an EOF token."""
        return list(self)


def tokenize(text: str) -> List[TokenWithPos]:
    """Tokenize a whole MCDOC text."""
    return Lexer(text).tokenize()