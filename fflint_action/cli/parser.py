"""
fflint-action CLI argument parser.

This module implements the command-line entry point using argparse. Every
flag is optional; unset flags fall back to INPUT_* environment values, the
YAML config file and finally the built-in defaults.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from fflint_action.config import load_config
from fflint_action.runner import run
from fflint_action.workflow import WorkflowCommandHandler, running_in_ci, set_failed

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("fflint-action")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """fflint-action command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="fflint-action",
            description="Download fflint, cache it and run it against a file set",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--version", action="version", version=f"fflint-action {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./fflint-action.yaml)",
        )
        parser.add_argument(
            "--cache-dir",
            type=Path,
            metavar="PATH",
            help="Tool cache root (default: $RUNNER_TOOL_CACHE or ~/.fflint-action/tool-cache)",
        )

        inputs = parser.add_argument_group("action inputs")
        inputs.add_argument(
            "--tool-version",
            dest="tool_version",
            metavar="VERSION",
            help="fflint release to use (default: latest)",
        )
        inputs.add_argument(
            "--command",
            metavar="COMMAND",
            help="fflint subcommand (default: ext)",
        )
        inputs.add_argument(
            "--args",
            metavar="ARGS",
            help="Extra arguments passed before the file glob",
        )
        inputs.add_argument(
            "--files",
            metavar="GLOB",
            help="Files to check (default: **/*)",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        overrides = {
            "version": parsed_args.tool_version,
            "command": parsed_args.command,
            "args": parsed_args.args,
            "files": parsed_args.files,
        }

        try:
            config = load_config(config_file=parsed_args.config, overrides=overrides)
            result = run(config, cache_root=parsed_args.cache_dir)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except Exception as e:
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return set_failed(str(e))

        if not result.ok:
            logger.debug(f"Run ended with {result.outcome.value}")
            return set_failed(result.message)

        return 0

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Inside a CI job, records are written as workflow commands and debug
        records are always emitted; the runner decides whether to show them.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        if running_in_ci() and not args.quiet:
            handler = WorkflowCommandHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)
            return

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
