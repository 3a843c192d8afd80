"""
CI runner workflow commands.

Runners parse specially formatted stdout lines (``::warning::text``) into
annotations. WorkflowCommandHandler renders log records that way so the
rest of the code only ever talks to the standard logging module.
"""

import logging
import os
import sys
from typing import Optional, TextIO

_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_data(message: str) -> str:
    """Escape a message for use as workflow command data."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_command(command: str, message: str) -> str:
    """Format a workflow command line, e.g. ``::error::boom``."""
    return f"::{command}::{escape_data(message)}"


def running_in_ci(environ=None) -> bool:
    """True when running inside a GitHub Actions job."""
    environ = os.environ if environ is None else environ
    return environ.get("GITHUB_ACTIONS") == "true"


class WorkflowCommandHandler(logging.StreamHandler):
    """Logging handler that writes records as workflow commands."""

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__(stream if stream is not None else sys.stdout)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _COMMANDS.get(record.levelno)
        if command is None:
            return message
        return format_command(command, message)


def set_failed(message: str, stream: Optional[TextIO] = None) -> int:
    """
    Report the job as failed.

    Writes an error command and returns the exit code the process should
    terminate with.
    """
    stream = stream if stream is not None else sys.stdout
    stream.write(format_command("error", message) + "\n")
    stream.flush()
    return 1
