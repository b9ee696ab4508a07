"""
Recursive Descent Parser
========================

This module builds an AST from the token list produced by the lexer.

Grammar
-------
program    ::= call*
call       ::= '(' NAME param* ')'
param      ::= call | NUMBER | CHAR | STRING

The parser is deliberately lenient where the grammar is not met:

- A call whose head is not an IDENTIFIER gets the name ``""``; the head
  token is consumed either way.
- Tokens that cannot be params (identifiers after the head) are skipped.
- Top-level parsing stops at the first token that is not ``(``; the
  remaining tokens are ignored.

Running out of tokens inside a call raises UnexpectedEndOfInputError.
Nesting calls deeper than ``MAX_NESTING_DEPTH`` raises NestingTooDeepError,
which keeps the recursive parser, generator and printer inside the
interpreter stack.

Example Usage
-------------
>>> from stc.parser import parse_source
>>> ast = parse_source("(add 2 (subtract 4 2))")
>>> ast.body[0].name
'add'
"""

from typing import Sequence
import logging

from stc.ast import (
    CallExpression,
    NumberLiteral,
    Param,
    Program,
    StringLiteral,
)
from stc.errors import NestingTooDeepError, UnexpectedEndOfInputError
from stc.lexer import Token, TokenType, tokenize

logger = logging.getLogger(__name__)

# Deepest call nesting accepted by the parser
MAX_NESTING_DEPTH = 256


class Parser:
    """
    Recursive descent parser over a token list.

    Usage:
        parser = Parser(tokens)
        program = parser.parse()

    Attributes:
        tokens: List of tokens to parse
        max_depth: Deepest call nesting accepted
    """

    def __init__(self, tokens: Sequence[Token], max_depth: int = MAX_NESTING_DEPTH):
        self.tokens = list(tokens)
        self.max_depth = max_depth

        # Current position in token list
        self._pos = 0

    def parse(self) -> Program:
        """
        Parse the token list into an AST.

        Returns:
            Program containing every top-level call expression

        Raises:
            UnexpectedEndOfInputError: If a call expression is not closed
            NestingTooDeepError: If calls nest deeper than max_depth
        """
        self._pos = 0
        body = []

        while not self._at_end() and self._peek().is_open_paren():
            body.append(self._parse_call_expression())
            self._pos += 1  # closing ')'

        if not self._at_end():
            logger.debug(
                f"Ignoring {len(self.tokens) - self._pos} trailing tokens "
                f"starting at token {self._pos} ({self._peek()!r})"
            )

        logger.debug(f"Parsed {len(body)} top-level call expressions")
        return Program(body=tuple(body))

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self._pos >= len(self.tokens)

    def _peek(self) -> Token:
        """Return the current token (caller checks _at_end first)."""
        return self.tokens[self._pos]

    def _expect_token(self, call_start: int) -> Token:
        """
        Return the current token, failing if the tokens ran out.

        Args:
            call_start: Index of the '(' of the call being parsed

        Raises:
            UnexpectedEndOfInputError: If no token remains
        """
        if self._at_end():
            raise UnexpectedEndOfInputError(
                self._pos,
                hint=f"add ')' to close the call expression opened at token {call_start}",
            )
        return self.tokens[self._pos]

    # =========================================================================
    # Call Expression Parsing
    # =========================================================================

    def _parse_call_expression(self, depth: int = 1) -> CallExpression:
        """
        Parse a call expression starting at its opening paren.

        Leaves the cursor on the call's closing paren; the caller steps
        past it.
        """
        start = self._pos
        if depth > self.max_depth:
            raise NestingTooDeepError(start, self.max_depth)
        self._pos += 1  # opening '('

        head = self._expect_token(start)
        if head.type == TokenType.IDENTIFIER:
            name = head.value
        else:
            logger.debug(f"Call at token {start} has no name (found {head!r})")
            name = ""
        self._pos += 1

        params: list[Param] = []
        while True:
            token = self._expect_token(start)

            if token.is_close_paren():
                break

            if token.is_open_paren():
                params.append(self._parse_call_expression(depth + 1))
            elif token.type == TokenType.NUMBER:
                params.append(NumberLiteral(token.value))
            elif token.type in (TokenType.CHAR, TokenType.STRING):
                params.append(StringLiteral(token.value))
            else:
                logger.debug(f"Skipping {token!r} at token {self._pos} in call '{name}'")

            self._pos += 1

        return CallExpression(name=name, params=tuple(params))


# =============================================================================
# Convenience Functions
# =============================================================================

def parse(tokens: Sequence[Token]) -> Program:
    """Parse a token list into a Program."""
    return Parser(tokens).parse()


def parse_source(source: str, strict: bool = False) -> Program:
    """
    Tokenize and parse source text in one step.

    Args:
        source: The source text
        strict: Passed to the lexer (raise on unknown characters)

    Returns:
        The root Program node

    Raises:
        STCError: If lexing or parsing fails
    """
    return parse(tokenize(source, strict=strict))
