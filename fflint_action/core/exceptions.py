"""
Centralized exception hierarchy for fflint-action.

Every failure raised by the installer or runner derives from
FflintActionError so the entry point can report it through a single
failure channel.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class FflintActionError(Exception):
    """Base exception for all fflint-action errors."""

    pass


# ============================================================================
# Installation Exceptions
# ============================================================================


class DownloadError(FflintActionError):
    """Raised when the release archive cannot be downloaded."""

    pass


class ArchiveExtractionError(FflintActionError):
    """Failed to extract an archive."""

    pass


class InsecureArchiveError(ArchiveExtractionError):
    """Archive contains insecure paths (directory traversal attempt)."""

    pass


class ToolCacheError(FflintActionError):
    """Raised when an extracted tool cannot be stored in the tool cache."""

    pass


# ============================================================================
# Execution Exceptions
# ============================================================================


class ToolExecutionError(FflintActionError):
    """Raised when fflint exits with a non-zero status."""

    def __init__(self, command_line: str, exit_code: int):
        self.command_line = command_line
        self.exit_code = exit_code
        super().__init__(
            f"The process '{command_line}' failed with exit code {exit_code}"
        )


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(FflintActionError):
    """Raised when action configuration cannot be loaded."""

    pass
