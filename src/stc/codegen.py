"""
C-Style Code Generator
======================

This module renders an AST as C-style call expressions.

    (add 2 (subtract 4 2))        ->  add(2,subtract(4,2))
    (strcat 'H' (strcat "e" "l")) ->  strcat("H",strcat("e","l"))

Rules
-----
- A call renders as ``name(`` params joined by ``,`` ``)``, no spaces.
- NumberLiteral values are emitted verbatim.
- StringLiteral values are wrapped in double quotes; the content is not
  re-escaped, since it still holds the escapes from the source.
- Top-level calls are joined with newlines.

With ``banner=True`` the generator produces the listing format used by
``stc demo``::

    Code is:
      add(2,subtract(4,2))
"""

import logging

from stc.ast import CallExpression, NumberLiteral, Program, StringLiteral

logger = logging.getLogger(__name__)

BANNER = "Code is:"


class CodeGenerator:
    """
    Generates target text from a Program.

    Attributes:
        banner: Emit the "Code is:" header with indented lines
        indent: Line prefix used in banner mode
    """

    def __init__(self, banner: bool = False, indent: str = "  "):
        self.banner = banner
        self.indent = indent

    def generate(self, program: Program) -> str:
        """
        Generate code for every top-level call expression.

        Returns:
            Newline-separated expressions ("" for an empty program)
        """
        lines = [self.generate_expression(call) for call in program.body]
        logger.debug(f"Generated {len(lines)} expressions")

        if not self.banner:
            return "\n".join(lines)

        out = [BANNER + "\n"]
        for line in lines:
            out.append(f"{self.indent}{line}\n")
        return "".join(out)

    def generate_expression(self, call: CallExpression) -> str:
        """Render a single call expression, recursing into nested calls."""
        args = []
        for param in call.params:
            if isinstance(param, CallExpression):
                args.append(self.generate_expression(param))
            elif isinstance(param, NumberLiteral):
                args.append(param.value)
            elif isinstance(param, StringLiteral):
                args.append(f'"{param.value}"')
            else:
                raise TypeError(f"unexpected param node: {type(param).__name__}")
        return f"{call.name}({','.join(args)})"


# =============================================================================
# Convenience Functions
# =============================================================================

def generate(program: Program) -> str:
    """Generate newline-joined C-style calls for a Program."""
    return CodeGenerator().generate(program)


def generate_expression(call: CallExpression) -> str:
    """Generate the C-style text of one call expression."""
    return CodeGenerator().generate_expression(call)
