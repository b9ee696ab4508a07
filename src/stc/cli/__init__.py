"""
Super Tiny Compiler Command-Line Interface
==========================================

The ``stc`` tool is a Click group with one command per pipeline view:

- **compile**: source → C-style calls
- **tokens**: source → token listing
- **ast**: source → AST listing
- **demo**: run the built-in example through every stage
"""

from stc.cli.main import main

__all__ = ["main"]
