"""Process-wide settings for the Weik.io tools.

The CLI path and the operation mode are fixed when the server starts. In
``read-only`` mode nothing that changes a Weik.io instance (``apply_config``)
is exposed or runs, and the agent has no way to lift that restriction.
"""

from __future__ import annotations

import os

VALID_MODES = ("read-only", "read-write")
DEFAULT_CLI_PATH = "weikio"

_cli_path: str = ""
_mcp_mode: str = ""
_configured: bool = False


def configure(cli_path: str, mcp_mode: str) -> None:
    global _cli_path, _mcp_mode, _configured
    normalized = mcp_mode.lower()
    if normalized not in VALID_MODES:
        raise ValueError(f"Invalid WEIKIO_MCP_MODE: {mcp_mode}. Must be one of: {VALID_MODES}")
    _cli_path = cli_path.strip() or DEFAULT_CLI_PATH
    _mcp_mode = normalized
    _configured = True


def _ensure_configured() -> None:
    if _configured:
        return
    configure(
        cli_path=os.environ.get("WEIKIO_CLI_PATH", DEFAULT_CLI_PATH),
        mcp_mode=os.environ.get("WEIKIO_MCP_MODE", "read-write"),
    )


def get_cli_path() -> str:
    """Return the Weik.io CLI executable used for shell-out tools."""
    _ensure_configured()
    return _cli_path


def get_mcp_mode() -> str:
    _ensure_configured()
    return _mcp_mode


def is_read_write_mode() -> bool:
    _ensure_configured()
    return _mcp_mode == "read-write"
