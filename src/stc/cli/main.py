"""
stc - Super Tiny Compiler Command-Line Interface
================================================

Usage Examples
--------------
Compile to stdout:
    $ stc compile program.lisp

With output file:
    $ stc compile program.lisp -o program.c

From stdin:
    $ echo '(add 2 (subtract 4 2))' | stc compile -

Inspect the pipeline:
    $ stc tokens program.lisp
    $ stc ast program.lisp
    $ stc demo

Verbose mode (debug logging from every stage):
    $ stc -v compile program.lisp
"""

import logging
from pathlib import Path
from typing import Optional, TextIO

import click

from stc import __version__
from stc.ast import ASTPrinter
from stc.cli.errors import handle_cli_exception
from stc.compiler import EXAMPLE_SOURCE, Compiler, CompilerOptions, CompilerResult
from stc.lexer import Lexer, format_tokens


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores options common to every command.
    """

    def __init__(self) -> None:
        self.verbose: bool = False

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(name)s: %(message)s" if self.verbose else "%(levelname)s: %(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


def run_compiler(
    ctx: Context,
    input_file: TextIO,
    options: CompilerOptions,
) -> CompilerResult:
    """Read ``input_file`` and compile it, exiting on any failure."""
    try:
        source = input_file.read()
        return Compiler(options).compile_source(source, input_file.name)
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


input_argument = click.argument(
    "input_file",
    type=click.File("r", encoding="utf-8"),
)

strict_option = click.option(
    "--strict",
    is_flag=True,
    help="Fail on unknown characters instead of stopping at them",
)


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(version=__version__, prog_name="stc")
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    Compile LISP-style call expressions into C-style calls.

    \b
    Commands:
      compile   Translate source to C-style calls
      tokens    Show the lexer output
      ast       Show the parser output
      demo      Run the built-in example through every stage

    \b
    Example:
      (add 2 (subtract 4 2))  ->  add(2,subtract(4,2))

    INPUT_FILE may be '-' to read from stdin.
    """
    ctx.verbose = verbose
    ctx.setup_logging()


# =============================================================================
# Compile Command
# =============================================================================

@main.command("compile")
@input_argument
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: stdout)",
)
@strict_option
@click.option(
    "--banner",
    is_flag=True,
    help="Prefix output with 'Code is:' and indent each line",
)
@pass_context
def compile_command(
    ctx: Context,
    input_file: TextIO,
    output: Optional[Path],
    strict: bool,
    banner: bool,
) -> None:
    """
    Translate INPUT_FILE to C-style call expressions.

    \b
    Examples:
        stc compile calc.lisp              # Print to stdout
        stc compile calc.lisp -o calc.c    # Write to file
        stc compile --strict calc.lisp     # Reject unknown characters
    """
    options = CompilerOptions(strict=strict, banner=banner)
    result = run_compiler(ctx, input_file, options)

    # Banner output already ends each line with a newline
    if output is None:
        click.echo(result.code, nl=not banner)
        return

    text = result.code if banner else result.code + "\n"
    try:
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        handle_cli_exception(e, verbose=ctx.verbose)

    if ctx.verbose:
        click.echo(f"Tokenized: {result.token_count} tokens")
        click.echo(f"Parsed: {len(result.ast.body)} call expressions")
    click.echo(f"Compiled {input_file.name} -> {output}")


# =============================================================================
# Inspection Commands
# =============================================================================

@main.command("tokens")
@input_argument
@strict_option
@pass_context
def tokens_command(ctx: Context, input_file: TextIO, strict: bool) -> None:
    """
    Print the tokens of INPUT_FILE, one per line.

    Only the lexer runs, so input that does not parse is still listed.
    """
    try:
        tokens = Lexer(input_file.read(), strict=strict).tokenize()
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)

    click.echo(format_tokens(tokens))


@main.command("ast")
@input_argument
@strict_option
@pass_context
def ast_command(ctx: Context, input_file: TextIO, strict: bool) -> None:
    """Print the syntax tree of INPUT_FILE."""
    result = run_compiler(ctx, input_file, CompilerOptions(strict=strict))
    click.echo(ASTPrinter().print(result.ast))


@main.command("demo")
@pass_context
def demo_command(ctx: Context) -> None:
    """
    Run the built-in example through every stage.

    Prints the token listing, the AST listing, and the generated code.
    """
    try:
        result = Compiler(CompilerOptions(banner=True)).compile_source(EXAMPLE_SOURCE, "<demo>")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)

    click.echo("Token is:")
    click.echo(format_tokens(result.tokens))
    click.echo()
    click.echo("AST is:")
    click.echo(ASTPrinter().print(result.ast))
    click.echo()
    click.echo(result.code, nl=False)


if __name__ == "__main__":
    main()
