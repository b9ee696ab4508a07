"""
Super Tiny Compiler
===================

A small compiler that translates LISP-style call expressions into
C-style call expressions:

    (add 2 2)                 add(2,2)
    (subtract 4 2)            subtract(4,2)
    (add 2 (subtract 4 2))    add(2,subtract(4,2))

Pipeline
--------
    Source → Lexer → Tokens → Parser → AST → Code Generator → Target text

Main Components
---------------
- **lexer**: ``tokenize()`` turns text into PAREN, IDENTIFIER, NUMBER,
  CHAR, and STRING tokens
- **parser**: ``parse()`` builds a Program of nested CallExpressions
- **codegen**: ``generate()`` renders the AST as C-style calls
- **compiler**: ``Compiler`` / ``compile_source()`` run the whole pipeline
- **cli**: the ``stc`` command-line tool

Quick Start
-----------
    >>> from stc import tokenize, parse, generate
    >>> generate(parse(tokenize("(add 2 (subtract 4 2))")))
    'add(2,subtract(4,2))'
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from stc.errors import (
    STCError,
    LexerError,
    UnknownCharacterError,
    UnterminatedLiteralError,
    ParserError,
    UnexpectedEndOfInputError,
    NestingTooDeepError,
)
from stc.lexer import Lexer, Token, TokenType, tokenize, format_tokens
from stc.ast import (
    Program,
    CallExpression,
    NumberLiteral,
    StringLiteral,
    Param,
    Node,
    ASTPrinter,
)
from stc.parser import MAX_NESTING_DEPTH, Parser, parse, parse_source
from stc.codegen import CodeGenerator, generate, generate_expression
from stc.compiler import (
    Compiler,
    CompilerOptions,
    CompilerResult,
    compile_source,
    compile_file,
    EXAMPLE_SOURCE,
)

__all__ = [
    # Version info
    "__version__",
    # Errors
    "STCError",
    "LexerError",
    "UnknownCharacterError",
    "UnterminatedLiteralError",
    "ParserError",
    "UnexpectedEndOfInputError",
    "NestingTooDeepError",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "format_tokens",
    # AST
    "Program",
    "CallExpression",
    "NumberLiteral",
    "StringLiteral",
    "Param",
    "Node",
    "ASTPrinter",
    # Parser
    "Parser",
    "MAX_NESTING_DEPTH",
    "parse",
    "parse_source",
    # Code generator
    "CodeGenerator",
    "generate",
    "generate_expression",
    # Compiler
    "Compiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_source",
    "compile_file",
    "EXAMPLE_SOURCE",
]
