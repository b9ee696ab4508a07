# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the LISP-style source tokenizer.
#
# Test coverage includes:
#   - Parens, identifiers, numbers, char and string literals
#   - Whitespace handling and NUL termination
#   - Backslash look-back rules for quotes
#   - Lenient and strict handling of unknown characters
#   - Unterminated literals
# =============================================================================

import logging

import pytest

from stc.errors import UnknownCharacterError, UnterminatedLiteralError
from stc.lexer import Lexer, Token, TokenType, format_tokens, tokenize


def values(source: str) -> list[tuple[TokenType, str]]:
    """Helper returning (type, value) pairs for compact assertions."""
    return [(t.type, t.value) for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Spaces, tabs, and newlines are skipped."""
        assert tokenize("  \t\n  ") == []

    def test_simple_call(self):
        """(add 2 2) yields exactly five tokens."""
        assert tokenize("(add 2 2)") == [
            Token(TokenType.PAREN, "("),
            Token(TokenType.IDENTIFIER, "add"),
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.PAREN, ")"),
        ]

    def test_nested_call(self):
        """Nested parens are emitted in source order."""
        assert values("(add 2 (subtract 4 2))") == [
            (TokenType.PAREN, "("),
            (TokenType.IDENTIFIER, "add"),
            (TokenType.NUMBER, "2"),
            (TokenType.PAREN, "("),
            (TokenType.IDENTIFIER, "subtract"),
            (TokenType.NUMBER, "4"),
            (TokenType.NUMBER, "2"),
            (TokenType.PAREN, ")"),
            (TokenType.PAREN, ")"),
        ]

    def test_parens_need_no_whitespace(self):
        assert values("((a))") == [
            (TokenType.PAREN, "("),
            (TokenType.PAREN, "("),
            (TokenType.IDENTIFIER, "a"),
            (TokenType.PAREN, ")"),
            (TokenType.PAREN, ")"),
        ]

    def test_token_repr(self):
        assert repr(Token(TokenType.NUMBER, "42")) == "Token(NUMBER, '42')"

    def test_paren_predicates(self):
        assert Token(TokenType.PAREN, "(").is_open_paren()
        assert Token(TokenType.PAREN, ")").is_close_paren()
        assert not Token(TokenType.STRING, "(").is_open_paren()


# =============================================================================
# Numbers and Identifiers
# =============================================================================

class TestNumbersAndIdentifiers:
    """Greedy digit and identifier runs."""

    def test_multi_digit_number(self):
        """Digits are kept as text, leading zeros included."""
        assert values("007") == [(TokenType.NUMBER, "007")]

    def test_number_at_end_of_input(self):
        """A run ending the input does not read past it."""
        assert values("123") == [(TokenType.NUMBER, "123")]

    def test_identifier_with_underscore_and_digits(self):
        assert values("_str_cat2") == [(TokenType.IDENTIFIER, "_str_cat2")]

    def test_number_then_identifier(self):
        """A digit run stops at the first letter."""
        assert values("12ab") == [
            (TokenType.NUMBER, "12"),
            (TokenType.IDENTIFIER, "ab"),
        ]

    def test_identifier_at_end_of_input(self):
        assert values("(x") == [
            (TokenType.PAREN, "("),
            (TokenType.IDENTIFIER, "x"),
        ]


# =============================================================================
# Quoted Literals
# =============================================================================

class TestQuotedLiterals:
    """Char and string literals, including backslash handling."""

    def test_string_literal(self):
        """Delimiters are not part of the value."""
        assert values('(strcat "ello" "world")') == [
            (TokenType.PAREN, "("),
            (TokenType.IDENTIFIER, "strcat"),
            (TokenType.STRING, "ello"),
            (TokenType.STRING, "world"),
            (TokenType.PAREN, ")"),
        ]

    def test_char_literal(self):
        assert values("'H'") == [(TokenType.CHAR, "H")]

    def test_empty_string(self):
        assert values('""') == [(TokenType.STRING, "")]

    def test_string_with_spaces_and_parens(self):
        """Anything between the quotes is content."""
        assert values('"a (b) c"') == [(TokenType.STRING, "a (b) c")]

    def test_escaped_quote_is_kept_verbatim(self):
        """A backslash-quote does not close the literal."""
        assert values(r'"a\"b"') == [(TokenType.STRING, r"a\"b")]

    def test_escaped_backslash_before_quote_closes(self):
        """An escaped backslash does not escape the following quote."""
        assert values(r'"a\\" 1') == [
            (TokenType.STRING, "a\\\\"),
            (TokenType.NUMBER, "1"),
        ]

    def test_other_quote_kind_inside_literal(self):
        assert values("\"it's\"") == [(TokenType.STRING, "it's")]

    def test_quote_at_start_of_input(self):
        """Look-back at offset 0 is safe."""
        assert values("'a'") == [(TokenType.CHAR, "a")]

    def test_non_ascii_content(self):
        assert values('"héllo wörld"') == [(TokenType.STRING, "héllo wörld")]

    def test_unterminated_string(self):
        with pytest.raises(UnterminatedLiteralError) as exc_info:
            tokenize('(print "hello)')
        assert exc_info.value.position == 7
        assert exc_info.value.quote == '"'
        assert "unterminated string literal" in str(exc_info.value)

    def test_unterminated_char(self):
        with pytest.raises(UnterminatedLiteralError) as exc_info:
            tokenize("'a")
        assert "character literal" in str(exc_info.value)

    def test_escaped_closing_quote_leaves_literal_open(self):
        with pytest.raises(UnterminatedLiteralError):
            tokenize(r'"abc\"')

    def test_unterminated_strict_mode_also_raises(self):
        with pytest.raises(UnterminatedLiteralError):
            tokenize('"abc', strict=True)


# =============================================================================
# Unknown Characters
# =============================================================================

class TestUnknownCharacters:
    """Lenient early stop and strict failure."""

    def test_unknown_first_character_returns_empty(self):
        """Lexing halts without raising."""
        assert tokenize("#") == []

    def test_unknown_character_returns_partial_tokens(self):
        assert values("(add 2 # 3)") == [
            (TokenType.PAREN, "("),
            (TokenType.IDENTIFIER, "add"),
            (TokenType.NUMBER, "2"),
        ]

    def test_error_is_recorded_on_lexer(self):
        lexer = Lexer("(a ; b)")
        lexer.tokenize()
        assert isinstance(lexer.error, UnknownCharacterError)
        assert lexer.error.char == ";"
        assert lexer.error.position == 3

    def test_clean_input_has_no_error(self):
        lexer = Lexer("(a 1)")
        lexer.tokenize()
        assert lexer.error is None

    def test_lenient_stop_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="stc.lexer"):
            tokenize("(a $)")
        assert "Unknown character '$'" in caplog.text

    def test_strict_mode_raises(self):
        with pytest.raises(UnknownCharacterError) as exc_info:
            tokenize("(add 2 # 3)", strict=True)
        assert exc_info.value.position == 7
        assert "offset 7: error: unknown character '#'" in str(exc_info.value)

    def test_carriage_return_is_unknown(self):
        """Only space, tab, and newline count as whitespace."""
        assert values("(a)\r\n(b)") == [
            (TokenType.PAREN, "("),
            (TokenType.IDENTIFIER, "a"),
            (TokenType.PAREN, ")"),
        ]

    def test_quote_after_backslash_is_unknown(self):
        """A backslash is never a token, and neither is the quote after it."""
        assert tokenize("\\'a'") == []

    def test_non_ascii_letter_is_unknown(self):
        assert values("(é)") == [(TokenType.PAREN, "(")]

    def test_nul_terminates_input(self):
        assert values("(a)\0(b)") == [
            (TokenType.PAREN, "("),
            (TokenType.IDENTIFIER, "a"),
            (TokenType.PAREN, ")"),
        ]

    def test_nul_inside_literal_is_content(self):
        """Only a NUL between tokens ends the input."""
        assert values('"ab\0c"') == [(TokenType.STRING, "ab\0c")]

    def test_nul_after_number_ends_input(self):
        assert values("(f 12\0 3)") == [
            (TokenType.PAREN, "("),
            (TokenType.IDENTIFIER, "f"),
            (TokenType.NUMBER, "12"),
        ]


# =============================================================================
# Token Listing
# =============================================================================

class TestFormatTokens:
    """Diagnostic token listing."""

    def test_listing(self):
        listing = format_tokens(tokenize("(strcat 'H' \"i\" 1)"))
        assert listing.splitlines() == [
            "  type = Paren  value = (",
            "  type = Identifier  value = strcat",
            "  type = Char  value = H",
            "  type = Str  value = i",
            "  type = Number  value = 1",
            "  type = Paren  value = )",
        ]

    def test_empty_listing(self):
        assert format_tokens([]) == ""
