"""
CLI entry point for filewalker.

This module serves as the entry point when filewalker.cli is executed as a module
with `python -m filewalker.cli`.
"""

from .main import main

if __name__ == "__main__":
    main()
