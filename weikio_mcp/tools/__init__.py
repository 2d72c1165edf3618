from __future__ import annotations

from weikio_mcp.tools.cli import register_cli_tools
from weikio_mcp.tools.docker_compose import register_docker_compose_tools
from weikio_mcp.tools.integration_types import register_integration_type_tools
from weikio_mcp.tools.metadata import register_metadata_tools

__all__ = [
    "register_cli_tools",
    "register_docker_compose_tools",
    "register_integration_type_tools",
    "register_metadata_tools",
]
