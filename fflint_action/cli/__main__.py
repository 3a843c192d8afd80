"""
Entry point for running the fflint-action CLI as a module.

Usage: python -m fflint_action.cli [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
