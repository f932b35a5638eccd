"""Lexer, error types and resource identifiers for the MCDOC schema language."""

__version__ = "0.1.0"
__all__ = ["errors", "lexer", "resource"]