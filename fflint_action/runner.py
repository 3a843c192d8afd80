"""
Run fflint against a file set.

Installs the requested fflint version and spawns it as a single shell
command line:

    <exe> <command> <args> <files>

The pieces are joined with spaces and not quoted, so the shell expands
globs and splits arguments exactly as it would for a hand-written line.
"""

import enum
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fflint_action.config import ActionConfig
from fflint_action.core.exceptions import ToolExecutionError
from fflint_action.core.platform import PlatformTag
from fflint_action.installer import install

logger = logging.getLogger(__name__)


class RunOutcome(enum.Enum):
    """How a run ended."""

    SUCCESS = "success"
    INSTALL_FAILED = "install_failed"
    TOOL_FAILED = "tool_failed"


@dataclass
class RunResult:
    """Result of a run."""

    outcome: RunOutcome
    exit_code: int = 0
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is RunOutcome.SUCCESS


def build_command_line(exe_path: Path, config: ActionConfig) -> str:
    """Join the executable and inputs into one command line."""
    return f"{exe_path} {config.command} {config.args} {config.files}"


def run_tool(exe_path: Path, config: ActionConfig) -> int:
    """
    Spawn fflint through the host shell and wait for it.

    Args:
        exe_path: fflint executable
        config: Action inputs

    Returns:
        The process exit code (always 0)

    Raises:
        ToolExecutionError: If fflint exits with a non-zero status
        OSError: If the shell itself cannot be started
    """
    command_line = build_command_line(exe_path, config)
    logger.info(f"[command]{command_line}")

    result = subprocess.run(command_line, shell=True)

    if result.returncode != 0:
        raise ToolExecutionError(command_line, result.returncode)
    return result.returncode


def run(
    config: ActionConfig,
    platform: Optional[PlatformTag] = None,
    cache_root: Optional[Path] = None,
) -> RunResult:
    """
    Install fflint and run it.

    Install failures and tool failures are both returned rather than
    raised; the outcome tells them apart.

    Args:
        config: Action inputs
        platform: Platform tag override (host platform if None)
        cache_root: Tool cache root override

    Returns:
        RunResult describing how the run ended
    """
    try:
        exe_path = install(config.version, platform=platform, cache_root=cache_root)
    except Exception as e:
        logger.debug("Installation failed", exc_info=True)
        return RunResult(RunOutcome.INSTALL_FAILED, exit_code=1, message=str(e))

    try:
        run_tool(exe_path, config)
    except ToolExecutionError as e:
        return RunResult(RunOutcome.TOOL_FAILED, exit_code=e.exit_code, message=str(e))
    except OSError as e:
        return RunResult(RunOutcome.TOOL_FAILED, exit_code=1, message=str(e))

    return RunResult(RunOutcome.SUCCESS)
