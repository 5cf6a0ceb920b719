"""
loxlex Command-Line Interface
=============================

This package provides the command-line tools for loxlex:

- **loxscan**: dump the token stream of a Lox source file

Each tool is implemented as a Click-based CLI application with
help text and unified error reporting.
"""

__all__ = ["loxscan"]
