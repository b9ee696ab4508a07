"""
Compiler Main Module
====================

This module provides the main compiler interface. It runs the complete
pipeline:

    Source → Lex → Parse → Generate → C-style calls

Usage
-----
Command line:
    $ stc compile program.lisp -o program.c

Programmatic:
    >>> from stc import compile_source
    >>> compile_source("(add 2 (subtract 4 2))")
    'add(2,subtract(4,2))'

Error Handling
--------------
Failures raise an STCError subclass after being recorded on the
CompilerResult. A lenient lexer stop (unknown character) is not a
failure: it is recorded as a warning and compilation continues with the
tokens read so far.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from stc.ast import Program
from stc.codegen import CodeGenerator
from stc.errors import STCError
from stc.lexer import Lexer, Token
from stc.parser import Parser

logger = logging.getLogger(__name__)


# Program run by ``stc demo``
EXAMPLE_SOURCE = "(add 2 (subtract 4 2))\n(strcat 'H' (strcat \"ello\" \"world\"))"


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        strict: Raise UnknownCharacterError instead of stopping lexing
                early at an unknown character.
        banner: Generate the "Code is:" listing format with indented lines.
        indent: Line prefix for banner output.
    """
    strict: bool = False
    banner: bool = False
    indent: str = "  "


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        filename: Source filename
        success: True if compilation succeeded
        tokens: Tokens produced by the lexer
        ast: Abstract syntax tree (if parsing succeeded)
        code: Generated target text (if successful)
        token_count: Number of tokens lexed
        errors: Errors raised during compilation
        warnings: Warning messages (e.g. lexing stopped early)
    """
    filename: str = ""
    success: bool = False
    tokens: list[Token] = field(default_factory=list)
    ast: Optional[Program] = None
    code: str = ""
    token_count: int = 0
    errors: list[STCError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class Compiler:
    """
    Runs source text through the lexer, parser, and code generator.

    Example:
        compiler = Compiler(CompilerOptions(banner=True))
        result = compiler.compile_source("(add 2 2)")
        print(result.code)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Compile source text.

        Args:
            source: Source text
            filename: Source filename for log messages

        Returns:
            CompilerResult with tokens, AST, and generated code

        Raises:
            STCError: If any stage fails
        """
        result = CompilerResult(filename=filename)

        try:
            # Stage 1: Lexical analysis
            lexer = Lexer(source, strict=self.options.strict)
            result.tokens = lexer.tokenize()
            result.token_count = len(result.tokens)
            if lexer.error is not None:
                result.warnings.append(f"lexing stopped early: {lexer.error}")
            logger.debug(f"{filename}: {result.token_count} tokens")

            # Stage 2: Parsing
            result.ast = Parser(result.tokens).parse()
            logger.debug(f"{filename}: {len(result.ast.body)} call expressions")

            # Stage 3: Code generation
            generator = CodeGenerator(banner=self.options.banner, indent=self.options.indent)
            result.code = generator.generate(result.ast)
            result.success = True

        except STCError as e:
            result.errors.append(e)
            logger.debug(f"{filename}: compilation failed: {e}")
            raise

        return result

    def compile_file(self, filepath: str) -> CompilerResult:
        """
        Compile a source file.

        Raises:
            STCError: If compilation fails
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.compile_source(source, str(filepath))


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_source(
    source: str,
    filename: str = "<input>",
    options: Optional[CompilerOptions] = None,
) -> str:
    """
    Compile source text to C-style call expressions.

    This is the primary high-level interface.

    Example:
        >>> compile_source("(strcat \\"ello\\" \\"world\\")")
        'strcat("ello","world")'
    """
    return Compiler(options).compile_source(source, filename).code


def compile_file(
    filepath: str,
    output_path: Optional[str] = None,
    options: Optional[CompilerOptions] = None,
) -> str:
    """
    Compile a source file, optionally writing the result.

    Returns:
        Generated code
    """
    result = Compiler(options).compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.code, encoding="utf-8")

    return result.code
