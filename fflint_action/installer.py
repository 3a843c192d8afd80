"""
fflint installer.

Downloads the fflint release archive for the host platform, extracts it,
stores the result in the tool cache and returns the path of the fflint
executable inside the cache entry.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from fflint_action.core.download import download_tool
from fflint_action.core.filesystem import extract_tar, extract_zip
from fflint_action.core.platform import PlatformTag, detect_platform_tag
from fflint_action.core.tool_cache import cache_dir, find

logger = logging.getLogger(__name__)

TOOL_NAME = "fflint-gha"
LATEST = "latest"
# TODO: resolve "latest" from `fflint version --output=json` instead of pinning
LATEST_FALLBACK_VERSION = "0.0.12"
DOWNLOAD_URL_TEMPLATE = (
    "https://github.com/FileFormatInfo/fflint/releases/download/"
    "{version}/fflint_{os_name}_{arch}.{ext}"
)


def archive_extension(tag: PlatformTag) -> str:
    """Return the release archive extension for a platform."""
    return "zip" if tag.is_windows else "tar.gz"


def executable_name(tag: PlatformTag) -> str:
    """Return the fflint executable file name for a platform."""
    return "fflint.exe" if tag.is_windows else "fflint"


def build_download_url(version: str, tag: PlatformTag) -> str:
    """
    Build the release download URL.

    The version is embedded exactly as given, so 'latest' and 'v'-prefixed
    tags appear verbatim in the URL.

    Example:
        >>> build_download_url("v2.0.0", PlatformTag("Linux", "x86_64", "linux", "x64"))
        'https://github.com/FileFormatInfo/fflint/releases/download/v2.0.0/fflint_Linux_x86_64.tar.gz'
    """
    return DOWNLOAD_URL_TEMPLATE.format(
        version=version,
        os_name=tag.os_name,
        arch=tag.arch,
        ext=archive_extension(tag),
    )


def resolve_cache_version(version: str) -> str:
    """
    Resolve the version used as the tool cache key.

    Args:
        version: Requested version ('latest', 'v1.2.3' or '1.2.3')

    Returns:
        LATEST_FALLBACK_VERSION for 'latest', otherwise the version with a
        single leading 'v' removed
    """
    if version == LATEST:
        return LATEST_FALLBACK_VERSION
    if version.startswith("v"):
        return version[1:]
    return version


class FflintInstaller:
    """
    Download, extract and cache fflint.

    Each step must succeed before the next runs; exceptions from the
    downloader, extractor or cache propagate unchanged.
    """

    def __init__(
        self,
        platform: Optional[PlatformTag] = None,
        cache_root: Optional[Path] = None,
        log: Optional[logging.Logger] = None,
    ):
        """
        Initialize fflint installer.

        Args:
            platform: Platform tag (detected from the host if None)
            cache_root: Tool cache root (runner default if None)
            log: Logger for progress messages (module logger if None)
        """
        self.log = log or logger
        self.platform = platform or detect_platform_tag(log=self.log)
        self.cache_root = cache_root

    def install(self, version: str) -> Path:
        """
        Install fflint and return the executable path.

        Args:
            version: 'latest' or a release tag, with or without a 'v' prefix

        Returns:
            Path to the fflint executable in the tool cache. Its existence is
            not checked.

        A pinned version already in the tool cache is reused without a
        download. 'latest' is always downloaded since its cache key is a
        placeholder.
        """
        real_version = resolve_cache_version(version)
        arch = self.platform.raw_arch or None

        if version != LATEST:
            cached = find(TOOL_NAME, real_version, arch=arch, cache_root=self.cache_root)
            if cached is not None:
                self.log.info(f"Found fflint {real_version} in cache")
                return self._exe_path(cached)

        download_url = build_download_url(version, self.platform)

        self.log.info(f"Downloading {download_url}")
        download_path = download_tool(download_url)
        self.log.debug(f"Downloaded to {download_path}")

        archive_path = download_path
        extract_path = None
        try:
            archive_path = self._archive_path(download_path)

            self.log.info("Extracting fflint")
            extract_path = self._extract(archive_path)
            self.log.debug(f"Extracted to {extract_path}")

            cache_path = cache_dir(
                extract_path,
                TOOL_NAME,
                real_version,
                arch=arch,
                cache_root=self.cache_root,
            )
            self.log.debug(f"Cached to {cache_path}")
        finally:
            archive_path.unlink(missing_ok=True)
            if extract_path is not None:
                shutil.rmtree(extract_path, ignore_errors=True)

        return self._exe_path(cache_path)

    def _exe_path(self, cache_path: Path) -> Path:
        exe_path = cache_path / executable_name(self.platform)
        self.log.debug(f"Exe path is {exe_path}")
        return exe_path

    def _archive_path(self, download_path: Path) -> Path:
        """Give a Windows download the .zip name the extractor expects."""
        # Downloads are saved without an extension
        if self.platform.is_windows and not download_path.name.endswith(".zip"):
            new_path = download_path.with_name(download_path.name + ".zip")
            download_path.rename(new_path)
            return new_path
        return download_path

    def _extract(self, archive_path: Path) -> Path:
        if self.platform.is_windows:
            return extract_zip(archive_path)
        return extract_tar(archive_path)


def install(
    version: str,
    platform: Optional[PlatformTag] = None,
    cache_root: Optional[Path] = None,
    log: Optional[logging.Logger] = None,
) -> Path:
    """
    Install fflint for the host platform.

    Convenience wrapper around FflintInstaller.

    Args:
        version: 'latest' or a release tag
        platform: Platform tag (detected from the host if None)
        cache_root: Tool cache root (runner default if None)
        log: Logger for progress messages

    Returns:
        Path to the fflint executable
    """
    installer = FflintInstaller(platform=platform, cache_root=cache_root, log=log)
    return installer.install(version)
