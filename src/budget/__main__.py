"""
CLI entry point for the budget package.

This allows running the package with: python -m budget
"""

from .cli import main

if __name__ == "__main__":
    main()
