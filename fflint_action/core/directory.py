"""
Directory resolution for fflint-action.

CI runners announce a scratch directory and a shared tool cache through
environment variables. Outside a runner both fall back to local defaults.

Directory Structure:
    Temp root (RUNNER_TEMP or the system temp dir):
        - <uuid>          : downloaded archives
        - <uuid>/         : extraction directories

    Tool cache (RUNNER_TOOL_CACHE or ~/.fflint-action/tool-cache):
        - <tool>/<version>/<arch>/          : cached tool installation
        - <tool>/<version>/<arch>.complete  : marker written after caching
"""

import os
import tempfile
from pathlib import Path


class DirectoryError(Exception):
    """Base exception for directory-related errors."""

    pass


def get_temp_dir() -> Path:
    """
    Get the scratch directory for downloads and extraction.

    Returns:
        Path: RUNNER_TEMP if set, otherwise the system temp directory.
    """
    runner_temp = os.environ.get("RUNNER_TEMP")
    if runner_temp:
        return Path(runner_temp)
    return Path(tempfile.gettempdir())


def get_tool_cache_dir() -> Path:
    """
    Get the root of the tool cache.

    Returns:
        Path: RUNNER_TOOL_CACHE if set, otherwise a per-user directory.
            - Windows: %USERPROFILE%\\.fflint-action\\tool-cache
            - Linux/macOS: ~/.fflint-action/tool-cache

    Raises:
        DirectoryError: On Windows when USERPROFILE is not set.
    """
    tool_cache = os.environ.get("RUNNER_TOOL_CACHE")
    if tool_cache:
        return Path(tool_cache)

    if os.name == "nt":
        user_profile = os.environ.get("USERPROFILE")
        if not user_profile:
            raise DirectoryError(
                "USERPROFILE environment variable is not set. "
                "Cannot determine tool cache directory."
            )
        return Path(user_profile) / ".fflint-action" / "tool-cache"
    return Path.home() / ".fflint-action" / "tool-cache"
