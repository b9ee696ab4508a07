"""
Abstract Syntax Tree (AST) Definitions
======================================

This module defines the node types produced by the parser and consumed
by the code generator.

Node Types
----------
Program          - root, owns the top-level call expressions
CallExpression   - ``(name param...)``, owns its params
NumberLiteral    - digit text, kept verbatim
StringLiteral    - quoted text (string and character literals alike)

The AST is a sum type rather than a class hierarchy: the nodes share no
base class and are grouped by the ``Node`` and ``Param`` unions. Nodes
are frozen dataclasses with tuple children, so a tree cannot be changed
after the parser builds it and no node is ever shared.

Character literals are folded into StringLiteral, so ``'H'`` and ``"H"``
produce the same node.
"""

from dataclasses import dataclass
from typing import Union


# =============================================================================
# Leaf Nodes
# =============================================================================

@dataclass(frozen=True)
class NumberLiteral:
    """Numeric literal; ``value`` is the source digits, never parsed."""
    value: str


@dataclass(frozen=True)
class StringLiteral:
    """Quoted literal content without the delimiters."""
    value: str


# =============================================================================
# Call Expressions and Program Root
# =============================================================================

@dataclass(frozen=True)
class CallExpression:
    """
    A function call form ``(name param...)``.

    Attributes:
        name: Identifier following the opening paren ("" if missing)
        params: Literal or nested call arguments in source order
    """
    name: str
    params: tuple["Param", ...] = ()


@dataclass(frozen=True)
class Program:
    """
    Root node of the AST.

    Attributes:
        body: Top-level call expressions in source order
    """
    body: tuple[CallExpression, ...] = ()


Param = Union[CallExpression, NumberLiteral, StringLiteral]

Node = Union[Program, CallExpression, NumberLiteral, StringLiteral]


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter:
    """
    Pretty printer for AST debugging.

    Produces the indentation-based listing used by the ``stc ast`` command.
    Each nesting level adds one indent step; literal params sit one step
    deeper than the call they belong to.

    Usage:
        printer = ASTPrinter()
        output = printer.print(ast)
        print(output)
    """

    def __init__(self, indent: str = "  "):
        self.indent = indent
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, node: Node) -> str:
        """Print the AST and return as string."""
        self.output = []
        self.indent_level = 0
        self.visit(node)
        return "\n".join(self.output)

    def visit(self, node: Node) -> None:
        if isinstance(node, Program):
            self._visit_program(node)
        elif isinstance(node, CallExpression):
            self._visit_call(node)
        elif isinstance(node, NumberLiteral):
            self._emit(f"type = NumberLiteral  value = {node.value}")
        elif isinstance(node, StringLiteral):
            self._emit(f"type = StringLiteral  value = {node.value}")
        else:
            raise TypeError(f"not an AST node: {type(node).__name__}")

    def _emit(self, text: str) -> None:
        """Emit a line with current indentation."""
        self.output.append(f"{self.indent * self.indent_level}{text}")

    def _visit_program(self, node: Program) -> None:
        self.indent_level += 1
        for call in node.body:
            self.visit(call)
        self.indent_level -= 1

    def _visit_call(self, node: CallExpression) -> None:
        self._emit(f"type = CallExpression  name = {node.name}")
        self.indent_level += 1
        for param in node.params:
            self.visit(param)
        self.indent_level -= 1
