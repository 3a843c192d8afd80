"""
Entry point for running fflint-action as a module.

Usage: python -m fflint_action [options]
"""

from fflint_action.cli.parser import main

if __name__ == "__main__":
    main()
