"""
pylox Command-Line Interface
============================

- **loxscan**: scan a Lox file, or lines typed at a prompt, and print
  the tokens

The tool is a Click application; error output and exit codes are
shared through ``pylox.cli.errors``.
"""

__all__ = ["loxscan"]
