"""
Pytest configuration and shared fixtures for fflint-action tests.
"""

import io
import tarfile
import tempfile
import zipfile
from pathlib import Path
from typing import Generator

import pytest

from fflint_action.core.platform import PlatformTag


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def runner_dirs(temp_dir: Path, monkeypatch) -> dict:
    """Point RUNNER_TEMP and RUNNER_TOOL_CACHE at isolated directories."""
    runner_temp = temp_dir / "runner-temp"
    tool_cache = temp_dir / "tool-cache"
    runner_temp.mkdir()
    tool_cache.mkdir()

    monkeypatch.setenv("RUNNER_TEMP", str(runner_temp))
    monkeypatch.setenv("RUNNER_TOOL_CACHE", str(tool_cache))

    return {"temp": runner_temp, "cache": tool_cache}


@pytest.fixture
def clean_inputs(monkeypatch):
    """Remove action inputs and CI markers inherited from the environment."""
    for name in (
        "INPUT_VERSION",
        "INPUT_COMMAND",
        "INPUT_ARGS",
        "INPUT_FILES",
        "GITHUB_ACTIONS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def linux_tag() -> PlatformTag:
    return PlatformTag("Linux", "x86_64", "linux", "x64")


@pytest.fixture
def windows_tag() -> PlatformTag:
    return PlatformTag("Windows", "x86_64", "win32", "x64")


@pytest.fixture
def darwin_tag() -> PlatformTag:
    return PlatformTag("Darwin", "arm64", "darwin", "arm64")


def _tar_gz_bytes(files: dict) -> bytes:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        for name, content in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(content)
            info.mode = 0o755
            tar.addfile(info, io.BytesIO(content))
    return buffer.getvalue()


def _zip_bytes(files: dict) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def fflint_tar_gz() -> bytes:
    """Release archive bytes for a non-Windows host."""
    return _tar_gz_bytes({"fflint": b"#!/bin/sh\necho fflint\n", "LICENSE": b"MIT"})


@pytest.fixture
def fflint_zip() -> bytes:
    """Release archive bytes for a Windows host."""
    return _zip_bytes({"fflint.exe": b"MZ", "LICENSE": b"MIT"})


@pytest.fixture
def sample_tar_gz_archive(temp_dir: Path, fflint_tar_gz: bytes) -> Path:
    archive_path = temp_dir / "fflint.tar.gz"
    archive_path.write_bytes(fflint_tar_gz)
    return archive_path


@pytest.fixture
def sample_zip_archive(temp_dir: Path, fflint_zip: bytes) -> Path:
    archive_path = temp_dir / "fflint.zip"
    archive_path.write_bytes(fflint_zip)
    return archive_path


@pytest.fixture
def malicious_zip_archive(temp_dir: Path) -> Path:
    """Create a ZIP archive with a directory traversal entry."""
    archive_path = temp_dir / "malicious.zip"
    archive_path.write_bytes(_zip_bytes({"../../evil.txt": b"malicious"}))
    return archive_path


@pytest.fixture
def malicious_tar_archive(temp_dir: Path) -> Path:
    """Create a tar.gz archive with a directory traversal entry."""
    archive_path = temp_dir / "malicious.tar.gz"
    archive_path.write_bytes(_tar_gz_bytes({"../../evil.txt": b"malicious"}))
    return archive_path
