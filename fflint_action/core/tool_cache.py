"""
Version-keyed tool cache.

Stores extracted tool directories under ``<root>/<tool>/<version>/<arch>``
and marks each finished entry with a sibling ``<arch>.complete`` file so a
half-copied directory is never reported as cached. Writes to one entry are
serialized with a file lock.

Usage:
    from fflint_action.core.tool_cache import cache_dir, find

    path = cache_dir(extracted, "fflint-gha", "0.0.12")
    assert find("fflint-gha", "0.0.12") == path
"""

import logging
import shutil
from pathlib import Path
from typing import Optional, Union

from filelock import FileLock, Timeout as LockTimeout

from fflint_action.core.directory import get_tool_cache_dir
from fflint_action.core.exceptions import ToolCacheError
from fflint_action.core.filesystem import copy_tree
from fflint_action.core.platform import host_arch

logger = logging.getLogger(__name__)


def _entry_path(tool: str, version: str, arch: str, cache_root: Optional[Path]) -> Path:
    root = Path(cache_root) if cache_root is not None else get_tool_cache_dir()
    return root / tool / version / arch


def _marker_path(entry: Path) -> Path:
    return entry.parent / f"{entry.name}.complete"


def cache_dir(
    source_dir: Union[str, Path],
    tool: str,
    version: str,
    arch: Optional[str] = None,
    cache_root: Optional[Path] = None,
    timeout: int = 300,
) -> Path:
    """
    Copy an extracted directory into the tool cache.

    An existing entry for the same key is replaced.

    Args:
        source_dir: Directory to cache
        tool: Tool name part of the key
        version: Version part of the key
        arch: CPU part of the key (host CPU if None)
        cache_root: Cache root (RUNNER_TOOL_CACHE or per-user default if None)
        timeout: Seconds to wait for a concurrent writer of the same entry

    Returns:
        Path to the cached directory

    Raises:
        ToolCacheError: If source_dir is not a directory or the lock times out
    """
    source_dir = Path(source_dir)
    arch = arch or host_arch()

    logger.info(f"Caching tool {tool} {version} {arch}")
    logger.debug(f"source dir: {source_dir}")

    if not source_dir.is_dir():
        raise ToolCacheError(f"sourceDir is not a directory: {source_dir}")

    entry = _entry_path(tool, version, arch, cache_root)
    entry.parent.mkdir(parents=True, exist_ok=True)
    marker = _marker_path(entry)
    lock = FileLock(entry.parent / f"{arch}.lock", timeout=timeout)

    try:
        with lock:
            if marker.exists():
                marker.unlink()
            if entry.exists():
                logger.debug(f"Replacing existing cache entry {entry}")
                shutil.rmtree(entry)

            copy_tree(source_dir, entry)
            marker.write_text("")
            logger.debug("finished caching tool")
    except LockTimeout as e:
        raise ToolCacheError(
            f"Could not acquire cache lock for {tool} {version} after {timeout}s"
        ) from e

    return entry


def find(
    tool: str,
    version: str,
    arch: Optional[str] = None,
    cache_root: Optional[Path] = None,
) -> Optional[Path]:
    """
    Look up a completed cache entry.

    Returns:
        Path to the cached directory, or None if it is absent or incomplete
    """
    if not tool:
        raise ValueError("tool parameter is required")
    if not version:
        raise ValueError("version parameter is required")

    entry = _entry_path(tool, version, arch or host_arch(), cache_root)
    logger.debug(f"checking cache: {entry}")

    if entry.is_dir() and _marker_path(entry).exists():
        logger.debug(f"Found tool in cache {tool} {version}")
        return entry

    logger.debug("not found")
    return None
