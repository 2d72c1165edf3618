from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from weikio_mcp.tools.base import get_cli_path, is_read_write_mode

if TYPE_CHECKING:
    from fastmcp import FastMCP

logger = logging.getLogger(__name__)


class WeikioCLIError(RuntimeError):
    """The Weik.io CLI could not be started, exited non-zero, or wrote to stderr."""


async def run_weikio_command(*args: str) -> str:
    """Run the Weik.io CLI with ``args`` and return its stdout.

    Arguments are passed directly to the executable, never through a shell.
    Any stderr output is treated as a failure.
    """
    cli = get_cli_path()
    logger.debug(f"Running Weik.io CLI: {cli} {' '.join(args)}")
    try:
        process = await asyncio.create_subprocess_exec(
            cli,
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise WeikioCLIError(f"Weik.io CLI error: {e}") from e

    stdout, stderr = await process.communicate()
    error_output = stderr.decode(errors="replace").strip()
    if error_output:
        raise WeikioCLIError(f"Weik.io CLI error: {error_output}")
    if process.returncode != 0:
        raise WeikioCLIError(f"Weik.io CLI error: {cli} exited with status {process.returncode}")

    return stdout.decode(errors="replace")


async def _list_agents() -> str:
    return await run_weikio_command("agents", "ls")


async def _apply_config(filepath: str) -> str | dict:
    if not filepath:
        raise ValueError("Configuration file path is required")
    if not is_read_write_mode():
        return {"error": "apply_config is not available in read-only mode"}

    logger.info(f"Applying Weik.io configuration: filepath={filepath}")
    return await run_weikio_command("config", "apply", filepath)


def register_cli_tools(mcp: FastMCP) -> None:
    @mcp.tool(
        description="List all Weik.io agents",
        tags={"cli"},
        annotations={"readOnlyHint": True},
    )
    async def list_agents() -> str:
        return await _list_agents()

    @mcp.tool(
        description="Apply a Weik.io configuration file",
        tags={"cli", "write"},
        annotations={"readOnlyHint": False},
    )
    async def apply_config(filepath: str) -> str | dict:
        return await _apply_config(filepath)
