"""
Tests for workflow command output.
"""

import io
import logging

from fflint_action.workflow import (
    WorkflowCommandHandler,
    escape_data,
    format_command,
    running_in_ci,
    set_failed,
)


class TestFormatting:
    """Test command formatting."""

    def test_escape_data(self):
        assert escape_data("50%\r\nnext") == "50%25%0D%0Anext"

    def test_format_command(self):
        assert format_command("warning", "Unknown OS aix") == "::warning::Unknown OS aix"


class TestRunningInCi:
    """Test CI detection."""

    def test_github_actions(self):
        assert running_in_ci({"GITHUB_ACTIONS": "true"}) is True

    def test_local(self):
        assert running_in_ci({}) is False


class TestWorkflowCommandHandler:
    """Test the logging handler."""

    def _logger(self, stream):
        log = logging.getLogger("fflint_action.tests.workflow")
        log.handlers = []
        log.propagate = False
        log.setLevel(logging.DEBUG)
        handler = WorkflowCommandHandler(stream)
        handler.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(handler)
        return log

    def test_levels(self):
        """Test each level maps to its command."""
        stream = io.StringIO()
        log = self._logger(stream)

        log.debug("Downloaded to /tmp/x")
        log.info("Extracting fflint")
        log.warning("Unknown arch s390x")
        log.error("failed")

        assert stream.getvalue().splitlines() == [
            "::debug::Downloaded to /tmp/x",
            "Extracting fflint",
            "::warning::Unknown arch s390x",
            "::error::failed",
        ]


class TestSetFailed:
    """Test set_failed."""

    def test_writes_error_and_returns_one(self):
        stream = io.StringIO()

        assert set_failed("exit code 2", stream) == 1
        assert stream.getvalue() == "::error::exit code 2\n"
