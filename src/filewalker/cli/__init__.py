"""
Command-line interface implementation.

This module provides the ``filewalker`` command: argument parsing, the
search header, streamed match output and the statistics block.
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
