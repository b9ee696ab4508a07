"""
Lexer (Tokenizer)
=================

This module converts LISP-style source text into a flat list of tokens
for the parser.

Token Categories
----------------
| Type       | Example        | Value       |
|------------|----------------|-------------|
| PAREN      | ( )            | "(" / ")"   |
| IDENTIFIER | add, str_cat2  | "add"       |
| NUMBER     | 42             | "42"        |
| CHAR       | 'H'            | "H"         |
| STRING     | "ello"         | "ello"      |

Values are always the matched text. Numbers are not converted, and
escape sequences inside quotes are kept verbatim (``"a\\"b"`` yields the
value ``a\\"b``). Quote delimiters are not part of the value.

Quotes and Backslashes
----------------------
A quote opens a literal only when the character before it is not a
backslash. Inside a literal, a quote closes it when the previous
character is not a backslash, or when that backslash is itself escaped
(``\\\\``). Only two characters of look-back are used, so ``\\\\\\"``
still closes the literal.

Unknown Characters
------------------
By default an unknown character stops scanning and the tokens collected
so far are returned; the error is kept on ``Lexer.error``. Pass
``strict=True`` to raise ``UnknownCharacterError`` instead.

Example Usage
-------------
>>> from stc.lexer import tokenize
>>> for token in tokenize("(add 2 2)"):
...     print(token)
Token(PAREN, '(')
Token(IDENTIFIER, 'add')
Token(NUMBER, '2')
Token(NUMBER, '2')
Token(PAREN, ')')
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional
import logging
import string

from stc.errors import UnknownCharacterError, UnterminatedLiteralError

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """The five lexical categories of the source language."""

    PAREN = auto()          # ( or )
    IDENTIFIER = auto()     # call names
    NUMBER = auto()         # decimal digit runs
    CHAR = auto()           # '...'
    STRING = auto()         # "..."


# Names used by the diagnostic token listing
TOKEN_KIND_NAMES: dict[TokenType, str] = {
    TokenType.PAREN: "Paren",
    TokenType.IDENTIFIER: "Identifier",
    TokenType.NUMBER: "Number",
    TokenType.CHAR: "Char",
    TokenType.STRING: "Str",
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical element.

    Attributes:
        type: The TokenType classification
        value: The matched text (without quote delimiters)
    """
    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

    def is_open_paren(self) -> bool:
        """Return True if this token is '('."""
        return self.type == TokenType.PAREN and self.value == "("

    def is_close_paren(self) -> bool:
        """Return True if this token is ')'."""
        return self.type == TokenType.PAREN and self.value == ")"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes source text in a single left-to-right pass.

    Usage:
        lexer = Lexer(source)
        tokens = lexer.tokenize()
        if lexer.error:
            ...  # scanning stopped early at an unknown character

    Attributes:
        source: The text being tokenized
        strict: Raise on unknown characters instead of stopping quietly
        error: The UnknownCharacterError that stopped a lenient scan
    """

    WHITESPACE = " \t\n"

    DIGITS = string.digits

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    QUOTES = {
        "'": TokenType.CHAR,
        '"': TokenType.STRING,
    }

    def __init__(self, source: str, strict: bool = False):
        self.source = source
        self.strict = strict
        self.error: Optional[UnknownCharacterError] = None

        self._length = len(source)
        self._pos = 0

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            Tokens in source order (possibly partial, see ``error``)

        Raises:
            UnterminatedLiteralError: If a quote is never closed
            UnknownCharacterError: On an unknown character in strict mode
        """
        self._pos = 0
        self.error = None
        tokens: list[Token] = []

        # A NUL between tokens ends the input; inside a literal it is content
        while not self._at_end() and self._peek() != "\0":
            char = self._peek()

            if char in self.WHITESPACE:
                self._pos += 1
                continue

            token = self._scan_token(char)
            if token is None:
                break
            tokens.append(token)

        logger.debug(f"Tokenized {len(tokens)} tokens from {self._length} characters")
        return tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= self._length

    def _peek(self, offset: int = 0) -> str:
        """
        Look at the character at current position + offset.

        Returns empty string outside the source, so look-behind at the
        start of input is safe.
        """
        return self._char_at(self._pos + offset)

    def _char_at(self, index: int) -> str:
        if index < 0 or index >= self._length:
            return ""
        return self.source[index]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self, char: str) -> Optional[Token]:
        """
        Classify the character at the cursor and scan one token.

        Returns:
            The scanned token, or None when lenient scanning stops
        """
        if char in "()":
            self._pos += 1
            return Token(TokenType.PAREN, char)

        if char in self.DIGITS:
            return Token(TokenType.NUMBER, self._scan_run(self.DIGITS))

        if char in self.QUOTES and self._peek(-1) != "\\":
            return self._scan_quoted(char)

        if char in self.IDENT_START:
            return Token(TokenType.IDENTIFIER, self._scan_run(self.IDENT_CHARS))

        return self._unknown_character(char)

    def _scan_run(self, allowed: str) -> str:
        """Consume the longest run of characters from ``allowed``."""
        start = self._pos
        while not self._at_end() and self._peek() in allowed:
            self._pos += 1
        return self.source[start:self._pos]

    def _scan_quoted(self, quote: str) -> Token:
        """
        Scan a quoted literal starting at the opening quote.

        Raises:
            UnterminatedLiteralError: If input ends before the closing quote
        """
        start = self._pos
        self._pos += 1  # opening quote

        while not self._at_end():
            if self._peek() == quote and self._is_closing_quote(self._pos):
                value = self.source[start + 1:self._pos]
                self._pos += 1  # closing quote
                return Token(self.QUOTES[quote], value)
            self._pos += 1

        raise UnterminatedLiteralError(quote, start)

    def _is_closing_quote(self, index: int) -> bool:
        """Apply the two-character backslash look-back to a quote."""
        if self._char_at(index - 1) != "\\":
            return True
        return self._char_at(index - 2) == "\\"

    def _unknown_character(self, char: str) -> None:
        error = UnknownCharacterError(char, self._pos)
        if self.strict:
            raise error
        logger.warning(f"Unknown character {char!r} at offset {self._pos}, stopping")
        self.error = error
        return None


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, strict: bool = False) -> list[Token]:
    """
    Tokenize source text.

    Args:
        source: The text to scan
        strict: Raise UnknownCharacterError instead of stopping early

    Returns:
        List of tokens in source order
    """
    return Lexer(source, strict=strict).tokenize()


def format_tokens(tokens: Iterable[Token], indent: str = "  ") -> str:
    """
    Render tokens as a flat diagnostic listing.

    Example:
          type = Paren  value = (
          type = Identifier  value = add
    """
    return "\n".join(
        f"{indent}type = {TOKEN_KIND_NAMES[token.type]}  value = {token.value}"
        for token in tokens
    )
