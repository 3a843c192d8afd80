"""
fflint-action CLI module.

This module provides the command-line interface for fflint-action.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
