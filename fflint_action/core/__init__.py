"""
Core functionality for fflint-action.

This package contains the download, extraction, caching and platform
modules the installer is built on.
"""

from .platform import (
    PlatformTag,
    detect_platform_tag,
    host_os,
    host_arch,
)

from .download import download_tool

from .filesystem import extract_zip, extract_tar

from .tool_cache import cache_dir, find

from .exceptions import (
    FflintActionError,
    DownloadError,
    ArchiveExtractionError,
    InsecureArchiveError,
    ToolCacheError,
    ToolExecutionError,
    ConfigurationError,
)

__all__ = [
    "PlatformTag",
    "detect_platform_tag",
    "host_os",
    "host_arch",
    "download_tool",
    "extract_zip",
    "extract_tar",
    "cache_dir",
    "find",
    "FflintActionError",
    "DownloadError",
    "ArchiveExtractionError",
    "InsecureArchiveError",
    "ToolCacheError",
    "ToolExecutionError",
    "ConfigurationError",
]
