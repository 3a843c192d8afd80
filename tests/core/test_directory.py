"""
Unit tests for directory resolution.
"""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from fflint_action.core.directory import DirectoryError, get_temp_dir, get_tool_cache_dir


class TestGetTempDir:
    """Test get_temp_dir."""

    def test_runner_temp(self, monkeypatch, tmp_path):
        """Test RUNNER_TEMP wins."""
        monkeypatch.setenv("RUNNER_TEMP", str(tmp_path))
        assert get_temp_dir() == tmp_path

    def test_system_temp_fallback(self, monkeypatch):
        """Test system temp dir is used outside a runner."""
        monkeypatch.delenv("RUNNER_TEMP", raising=False)
        assert get_temp_dir() == Path(tempfile.gettempdir())


class TestGetToolCacheDir:
    """Test get_tool_cache_dir."""

    def test_runner_tool_cache(self, monkeypatch, tmp_path):
        """Test RUNNER_TOOL_CACHE wins."""
        monkeypatch.setenv("RUNNER_TOOL_CACHE", str(tmp_path))
        assert get_tool_cache_dir() == tmp_path

    def test_home_fallback(self, monkeypatch, tmp_path):
        """Test per-user fallback outside a runner."""
        monkeypatch.delenv("RUNNER_TOOL_CACHE", raising=False)
        monkeypatch.setenv("USERPROFILE", str(tmp_path))

        with patch("pathlib.Path.home", return_value=tmp_path):
            result = get_tool_cache_dir()

        assert result == tmp_path / ".fflint-action" / "tool-cache"

    def test_windows_requires_userprofile(self, monkeypatch):
        """Test missing USERPROFILE raises on Windows."""
        monkeypatch.delenv("RUNNER_TOOL_CACHE", raising=False)
        monkeypatch.delenv("USERPROFILE", raising=False)

        with patch("os.name", "nt"):
            with pytest.raises(DirectoryError, match="USERPROFILE"):
                get_tool_cache_dir()
