"""
Archive extraction for fflint-action.

The caller picks the extractor; formats are never sniffed from the file
name or contents. Every member path is validated before anything is
written so a crafted archive cannot escape the destination directory.
"""

import logging
import shutil
import sys
import tarfile
import uuid
import zipfile
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Union

from fflint_action.core.directory import get_temp_dir
from fflint_action.core.exceptions import ArchiveExtractionError, InsecureArchiveError

logger = logging.getLogger(__name__)


def is_relative_to(path: Path, parent: Path) -> bool:
    """Check whether ``path`` lies inside ``parent``."""
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


def _validate_archive_path(path: str, destination: Path) -> None:
    """
    Validate that an archive member path is safe to extract.

    Args:
        path: Member path from archive
        destination: Extraction destination

    Raises:
        InsecureArchiveError: If path attempts directory traversal
    """
    member_path = (destination / path).resolve()

    if not is_relative_to(member_path, destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{path}' attempts directory traversal. "
            "This is a security risk and extraction has been blocked."
        )


def _prepare_destination(destination: Optional[Union[str, Path]]) -> Path:
    if destination is None:
        destination = get_temp_dir() / str(uuid.uuid4())
    destination = Path(destination)
    destination.mkdir(parents=True, exist_ok=True)
    return destination


@contextmanager
def _discard_on_error(destination: Path, owned: bool):
    """Remove a temp extraction directory if extraction into it fails."""
    try:
        yield
    except BaseException:
        if owned:
            shutil.rmtree(destination, ignore_errors=True)
        raise


def extract_zip(
    archive_path: Union[str, Path],
    destination: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Extract a ZIP archive.

    Args:
        archive_path: Path to the archive file
        destination: Directory to extract to (new temp dir if None)

    Returns:
        Path to the extraction directory

    Raises:
        ArchiveExtractionError: If the archive is missing or not a valid zip
        InsecureArchiveError: If the archive contains malicious paths
    """
    archive_path = Path(archive_path)
    if not archive_path.exists():
        raise ArchiveExtractionError(f"Archive not found: {archive_path}")

    owned = destination is None
    destination = _prepare_destination(destination)
    logger.debug(f"Extracting zip {archive_path} to {destination}")

    with _discard_on_error(destination, owned):
        _extract_zip_members(archive_path, destination)

    return destination


def _extract_zip_members(archive_path: Path, destination: Path) -> None:
    try:
        with zipfile.ZipFile(archive_path, "r") as zf:
            members = zf.namelist()

            for member in members:
                _validate_archive_path(member, destination)

            for member in members:
                zf.extract(member, destination)
    except zipfile.BadZipFile as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}") from e


def extract_tar(
    archive_path: Union[str, Path],
    destination: Optional[Union[str, Path]] = None,
    mode: str = "r:gz",
) -> Path:
    """
    Extract a tar archive, gzip-compressed by default.

    Args:
        archive_path: Path to the archive file
        destination: Directory to extract to (new temp dir if None)
        mode: tarfile open mode

    Returns:
        Path to the extraction directory

    Raises:
        ArchiveExtractionError: If the archive is missing or not a valid tar
        InsecureArchiveError: If the archive contains malicious paths
    """
    archive_path = Path(archive_path)
    if not archive_path.exists():
        raise ArchiveExtractionError(f"Archive not found: {archive_path}")

    owned = destination is None
    destination = _prepare_destination(destination)
    logger.debug(f"Extracting tar {archive_path} to {destination}")

    with _discard_on_error(destination, owned):
        _extract_tar_members(archive_path, destination, mode)

    return destination


def _extract_tar_members(archive_path: Path, destination: Path, mode: str) -> None:
    try:
        with tarfile.open(archive_path, mode) as tar:
            for member in tar.getmembers():
                _validate_archive_path(member.name, destination)

            # Python 3.12+ applies the data filter; older versions rely on
            # the validation above
            if sys.version_info >= (3, 12):
                tar.extractall(destination, filter="data")
            else:
                tar.extractall(destination)
    except tarfile.TarError as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}") from e


def copy_tree(source: Path, destination: Path) -> None:
    """
    Copy the contents of ``source`` into ``destination``.

    Args:
        source: Directory whose contents are copied
        destination: Target directory (created if missing)
    """
    destination.mkdir(parents=True, exist_ok=True)
    for item in source.iterdir():
        target = destination / item.name
        if item.is_dir() and not item.is_symlink():
            shutil.copytree(item, target, symlinks=True)
        else:
            shutil.copy2(item, target, follow_symlinks=False)
