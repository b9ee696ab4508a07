"""
Super Tiny Compiler Error Hierarchy
===================================

This module defines the exception hierarchy for the compiler.
All exceptions inherit from STCError, allowing callers to catch every
compiler failure with a single except clause.

Exception Hierarchy
-------------------
STCError (base)
├── LexerError - problems found while scanning characters
│   ├── UnknownCharacterError - character outside every token class
│   └── UnterminatedLiteralError - quote opened but never closed
└── ParserError - problems found while walking tokens
    ├── UnexpectedEndOfInputError - token sequence ended mid-expression
    └── NestingTooDeepError - calls nested past the parser's depth limit

Error Message Format
--------------------
Tokens carry no line information, so positions are plain indices:
character offsets for the lexer and token indices for the parser.

    offset 7: error: unterminated string literal
    hint: add a closing '"' to complete the literal
"""

from typing import Optional


# =============================================================================
# Base Exception
# =============================================================================

class STCError(Exception):
    """
    Base exception for all compiler errors.

    Attributes:
        message: The error description
        position: Index where the error was detected (optional)
        hint: A suggestion for fixing the error (optional)
    """

    # Label used when formatting the position ("offset 3", "token 5")
    position_label = "offset"

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.position = position
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with position and hint.

        Example output:
            token 4: error: unexpected end of input
            hint: add ')' to close the call expression
        """
        parts = []

        if self.position is not None:
            parts.append(f"{self.position_label} {self.position}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexer Errors
# =============================================================================

class LexerError(STCError):
    """Base exception for errors raised while tokenizing source text."""
    pass


class UnknownCharacterError(LexerError):
    """
    Character outside every recognised token class.

    In lenient mode the lexer does not raise this; it stops scanning and
    keeps the error on ``Lexer.error`` instead.
    """

    def __init__(self, char: str, position: Optional[int] = None):
        self.char = char
        super().__init__(
            f"unknown character {char!r} (U+{ord(char):04X})",
            position=position,
        )


class UnterminatedLiteralError(LexerError):
    """
    Quoted literal that reaches the end of input without a closing quote.

    Example:
        (print "hello)
    """

    def __init__(self, quote: str, position: Optional[int] = None):
        self.quote = quote
        kind = "string" if quote == '"' else "character"
        super().__init__(
            f"unterminated {kind} literal",
            position=position,
            hint=f"add a closing {quote!r} to complete the literal",
        )


# =============================================================================
# Parser Errors
# =============================================================================

class ParserError(STCError):
    """Base exception for errors raised while building the AST."""

    position_label = "token"


class UnexpectedEndOfInputError(ParserError):
    """
    Token sequence ended inside a call expression.

    Raised for unbalanced input such as ``(add 2 2`` or a lone ``(``.
    """

    def __init__(self, position: Optional[int] = None, hint: Optional[str] = None):
        super().__init__(
            "unexpected end of input",
            position=position,
            hint=hint or "add ')' to close the call expression",
        )


class NestingTooDeepError(ParserError):
    """
    Call expressions nested deeper than the parser allows.

    The position is the index of the '(' that crossed the limit.
    """

    def __init__(self, position: Optional[int] = None, limit: Optional[int] = None):
        self.limit = limit
        super().__init__(
            f"call expressions nested more than {limit} deep" if limit else "nesting too deep",
            position=position,
            hint="split the expression into smaller top-level calls",
        )
