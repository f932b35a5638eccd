"""Error types raised while reading and checking MCDOC sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


@dataclass(frozen=True)
class SourcePos:
    """A line and column in a source text, both starting at 1."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class ErrorType(Enum):
    """Category of a ParseError; the values are the serialised names."""

    LEXER = "lexer"
    SYNTAX = "syntax"
    RESOLUTION = "resolution"
    VALIDATION = "validation"
    CONTEXT = "context"
    INVALID_RESOURCE_ID = "invalidResourceId"
    MODULE_NOT_FOUND = "moduleNotFound"
    CIRCULAR_DEPENDENCY = "circularDependency"


class ParseError(Exception):
    """Base class of every MCDOC error."""

    _error_type: ErrorType = ErrorType.CONTEXT

    def __init__(self, text: str, pos: Optional[SourcePos] = None) -> None:
        super().__init__(text)
        self.pos = pos

    def error_type(self) -> ErrorType:
        """Return the category of this error."""
        return self._error_type

    def position(self) -> Optional[SourcePos]:
        """Return the source position, if the error carries one."""
        return self.pos


class LexerError(ParseError):
    """A character sequence that cannot be turned into a token."""

    _error_type = ErrorType.LEXER

    def __init__(self, message: str, pos: SourcePos) -> None:
        self.message = message
        super().__init__(f"{message} at {pos.line}:{pos.column}", pos)


class McDocSyntaxError(ParseError):
    """A token that does not fit the grammar."""

    _error_type = ErrorType.SYNTAX

    def __init__(self, expected: str, found: str, pos: SourcePos) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Expected '{expected}', found '{found}' at {pos.line}:{pos.column}", pos
        )


class ResolutionError(ParseError):
    """A name or path that could not be resolved."""

    _error_type = ErrorType.RESOLUTION

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.message = message
        self.path = path
        text = message if path is None else f"{message} (path: {path})"
        super().__init__(text)


class ValidationError(ParseError):
    """A value that does not match its schema."""

    _error_type = ErrorType.VALIDATION

    def __init__(
        self, message: str, path: str, pos: Optional[SourcePos] = None
    ) -> None:
        self.message = message
        self.path = path
        text = f"{message} at '{path}'"
        if pos is not None:
            text += f" ({pos.line}:{pos.column})"
        super().__init__(text, pos)


class ContextError(ParseError):
    """An error described by the context it occurred in."""

    _error_type = ErrorType.CONTEXT

    def __init__(
        self, message: str, context: str, pos: Optional[SourcePos] = None
    ) -> None:
        self.message = message
        self.context = context
        text = f"{message} in {context}"
        if pos is not None:
            text += f" ({pos.line}:{pos.column})"
        super().__init__(text, pos)


class InvalidResourceIdError(ParseError):
    """A resource identifier that cannot be parsed."""

    _error_type = ErrorType.INVALID_RESOURCE_ID

    def __init__(self, resource_id: str) -> None:
        self.resource_id = resource_id
        super().__init__(f"Invalid resource identifier: '{resource_id}'")


class ModuleMissingError(ParseError):
    """A module referenced from another one that does not exist."""

    _error_type = ErrorType.MODULE_NOT_FOUND

    def __init__(self, module: str, origin: str) -> None:
        self.module = module
        self.origin = origin
        super().__init__(f"Module not found: {module} from {origin}")


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class CircularDependencyError(ParseError):
    """Modules that depend on each other in a cycle."""

    _error_type = ErrorType.CIRCULAR_DEPENDENCY

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        listed = ", ".join(_quote(name) for name in self.cycle)
        super().__init__(f"Circular dependency detected: [{listed}]")