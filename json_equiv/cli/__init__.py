"""
JSON Equiv Command Line Interface.

This package provides command-line tools for comparing JSON files and printing
their canonical form.
"""

# Import the main CLI entry point
from .main import cli

# Re-export for easier imports
__all__ = [
    'cli',
]
