"""
toylex Command-Line Interface
=============================

- **tlex**: scan a source file and print its tokens

The tool is a Click application with its exit codes defined in
``toylex.cli.errors``.
"""

__all__ = ["tlex"]
