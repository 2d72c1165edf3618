"""Tests for weikio_mcp.tools.base module."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.monkeypatch import MonkeyPatch


@pytest.fixture(autouse=True)
def reset_base():
    """Reset configuration to defaults after each test."""
    yield
    from weikio_mcp.tools import base

    base.configure(cli_path="weikio", mcp_mode="read-write")


@pytest.mark.unit
class TestMCPMode:
    """Tests for MCP mode functions."""

    def test_default_mode_is_read_write(self, monkeypatch: MonkeyPatch) -> None:
        """Test that default mode is read-write when env var not set."""
        monkeypatch.delenv("WEIKIO_MCP_MODE", raising=False)
        from weikio_mcp.tools import base

        importlib.reload(base)
        assert base.get_mcp_mode() == "read-write"

    def test_initializes_from_env_var(self, monkeypatch: MonkeyPatch) -> None:
        """Test mode initializes from env var."""
        monkeypatch.setenv("WEIKIO_MCP_MODE", "read-only")
        from weikio_mcp.tools import base

        importlib.reload(base)
        assert base.get_mcp_mode() == "read-only"

    def test_configure_mode_case_insensitive(self) -> None:
        """Test configure normalizes the mode to lower case."""
        from weikio_mcp.tools.base import configure, get_mcp_mode

        configure(cli_path="weikio", mcp_mode="READ-ONLY")
        assert get_mcp_mode() == "read-only"

        configure(cli_path="weikio", mcp_mode="Read-Write")
        assert get_mcp_mode() == "read-write"

    def test_configure_invalid_mode_keeps_previous_settings(self) -> None:
        """Test an invalid mode raises without touching the current configuration."""
        from weikio_mcp.tools.base import configure, get_cli_path, get_mcp_mode

        configure(cli_path="/opt/weikio", mcp_mode="read-only")
        with pytest.raises(ValueError, match="Invalid WEIKIO_MCP_MODE"):
            configure(cli_path="/other", mcp_mode="sometimes")

        assert get_mcp_mode() == "read-only"
        assert get_cli_path() == "/opt/weikio"

    def test_invalid_env_var_raises_error(self, monkeypatch: MonkeyPatch) -> None:
        """Test invalid WEIKIO_MCP_MODE env var raises ValueError."""
        monkeypatch.setenv("WEIKIO_MCP_MODE", "invalid-mode")
        from weikio_mcp.tools import base

        importlib.reload(base)
        with pytest.raises(ValueError, match="Invalid WEIKIO_MCP_MODE"):
            base.get_mcp_mode()


@pytest.mark.unit
class TestCliPath:
    """Tests for CLI path configuration."""

    def test_default_cli_path(self, monkeypatch: MonkeyPatch) -> None:
        """Test that the CLI defaults to the weikio executable on PATH."""
        monkeypatch.delenv("WEIKIO_CLI_PATH", raising=False)
        monkeypatch.delenv("WEIKIO_MCP_MODE", raising=False)
        from weikio_mcp.tools import base

        importlib.reload(base)
        assert base.get_cli_path() == "weikio"

    def test_cli_path_from_env_var(self, monkeypatch: MonkeyPatch) -> None:
        """Test that WEIKIO_CLI_PATH overrides the executable."""
        monkeypatch.setenv("WEIKIO_CLI_PATH", "/opt/weikio/bin/weikio")
        monkeypatch.delenv("WEIKIO_MCP_MODE", raising=False)
        from weikio_mcp.tools import base

        importlib.reload(base)
        assert base.get_cli_path() == "/opt/weikio/bin/weikio"

    def test_blank_cli_path_falls_back_to_default(self) -> None:
        """Test that an empty CLI path is replaced by the default."""
        from weikio_mcp.tools.base import configure, get_cli_path

        configure(cli_path="  ", mcp_mode="read-write")
        assert get_cli_path() == "weikio"


@pytest.mark.unit
class TestIsReadWriteMode:
    """Tests for is_read_write_mode function."""

    def test_returns_true_when_read_write(self) -> None:
        """Test is_read_write_mode returns True when mode is read-write."""
        from weikio_mcp.tools.base import configure, is_read_write_mode

        configure(cli_path="weikio", mcp_mode="read-write")
        assert is_read_write_mode() is True

    def test_returns_false_when_read_only(self) -> None:
        """Test is_read_write_mode returns False when mode is read-only."""
        from weikio_mcp.tools.base import configure, is_read_write_mode

        configure(cli_path="weikio", mcp_mode="read-only")
        assert is_read_write_mode() is False
