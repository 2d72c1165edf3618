#!/usr/bin/env python3
from __future__ import annotations

import asyncio
import logging
import os

from fastmcp import FastMCP

from weikio_mcp.logging_config import setup_logging
from weikio_mcp.metadata.store import MetadataStore, metadata_store_from_env
from weikio_mcp.tools import (
    register_cli_tools,
    register_docker_compose_tools,
    register_integration_type_tools,
    register_metadata_tools,
)
from weikio_mcp.tools.base import configure, get_mcp_mode, is_read_write_mode

logger = logging.getLogger(__name__)


def create_app(store: MetadataStore | None = None) -> FastMCP:
    """Create and configure the MCP server.

    Reads configuration from environment variables:

    - ``WEIKIO_CLI_PATH`` (optional, default: weikio)
    - ``WEIKIO_MCP_MODE`` (optional, default: read-write)
    - ``WEIKIO_MCP_LOG_LEVEL`` (optional, default: INFO)
    - ``WEIKIO_METADATA_DIR``, ``WEIKIO_METADATA_BASE_URL`` and
      ``WEIKIO_METADATA_TIMEOUT`` when no ``store`` is given
    """
    setup_logging(app_name="weikio-mcp", log_level=os.environ.get("WEIKIO_MCP_LOG_LEVEL", "INFO"))

    mcp_mode = os.environ.get("WEIKIO_MCP_MODE", "read-write")
    configure(cli_path=os.environ.get("WEIKIO_CLI_PATH", "weikio"), mcp_mode=mcp_mode)

    logger.info(f"Weik.io MCP Server starting in {get_mcp_mode()} mode")

    if store is None:
        store = metadata_store_from_env()

    mcp = FastMCP("weikio-server")

    register_cli_tools(mcp)
    register_integration_type_tools(mcp)
    register_metadata_tools(mcp, store)
    register_docker_compose_tools(mcp)

    # Read-only deployments never expose apply_config to the agent
    if not is_read_write_mode():
        mcp.disable(tags={"write"})

    return mcp


async def preload_metadata(store: MetadataStore) -> bool:
    """Load the metadata catalogs before serving; failures are logged, not raised."""
    logger.info("Initializing metadata store...")
    try:
        await store.initialize()
    except Exception as e:
        logger.warning(f"Failed to initialize metadata store: {e}")
        logger.warning("Server will start, but metadata operations may not work correctly")
        return False

    logger.info(
        f"Metadata store initialized: {store.component_count} components, "
        f"{store.kamelet_count} kamelets, {store.spi_bean_count} SPI beans"
    )
    return True


def main() -> None:
    """Main entry point for console script."""
    store = metadata_store_from_env()
    app = create_app(store)
    asyncio.run(preload_metadata(store))
    app.run()


if __name__ == "__main__":
    main()
