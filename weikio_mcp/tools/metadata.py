from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weikio_mcp.metadata.formatting import (
    format_component_details,
    format_component_summary,
    format_kamelet_details,
    format_kamelet_summary,
)
from weikio_mcp.metadata.store import MetadataUnavailableError

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from weikio_mcp.metadata.store import MetadataStore

logger = logging.getLogger(__name__)


async def _search_components(store: MetadataStore, query: str) -> str:
    if not query:
        raise ValueError("Search query is required")

    try:
        await store.initialize()
    except Exception as e:
        logger.exception("Error searching components")
        raise MetadataUnavailableError(f"Error searching components: {e}") from e

    logger.debug(f"Components loaded: {store.component_count}")
    components = store.search_components(query)
    logger.info(f"Search results for {query!r}: {len(components)} components found")

    if not components:
        return f'No components found matching "{query}"'

    lines = "\n".join(format_component_summary(c) for c in components)
    return f'Found {len(components)} components matching "{query}":\n\n{lines}'


async def _get_component_details(store: MetadataStore, name: str) -> str:
    if not name:
        raise ValueError("Component name is required")

    await store.initialize()
    component = store.get_component(name)
    if component is None:
        return f'Component "{name}" not found'
    return format_component_details(component)


async def _search_kamelets(store: MetadataStore, query: str) -> str:
    if not query:
        raise ValueError("Search query is required")

    try:
        await store.initialize()
    except Exception as e:
        logger.exception("Error searching kamelets")
        raise MetadataUnavailableError(f"Error searching kamelets: {e}") from e

    logger.debug(f"Kamelets loaded: {store.kamelet_count}")
    kamelets = store.search_kamelets(query)
    logger.info(f"Search results for {query!r}: {len(kamelets)} kamelets found")

    if not kamelets:
        return f'No kamelets found matching "{query}"'

    lines = "\n".join(format_kamelet_summary(k) for k in kamelets)
    return f'Found {len(kamelets)} kamelets matching "{query}":\n\n{lines}'


async def _get_kamelet_details(store: MetadataStore, name: str) -> str:
    if not name:
        raise ValueError("Kamelet name is required")

    await store.initialize()
    kamelet = store.get_kamelet(name)
    if kamelet is None:
        return f'Kamelet "{name}" not found'
    return format_kamelet_details(kamelet)


def register_metadata_tools(mcp: FastMCP, store: MetadataStore) -> None:
    @mcp.tool(
        description="Search for Apache Camel components by name, description, or label",
        tags={"metadata"},
        annotations={"readOnlyHint": True},
    )
    async def search_components(query: str) -> str:
        return await _search_components(store, query)

    @mcp.tool(
        description="Get detailed information about a specific Apache Camel component",
        tags={"metadata"},
        annotations={"readOnlyHint": True},
    )
    async def get_component_details(name: str) -> str:
        return await _get_component_details(store, name)

    @mcp.tool(
        description="Search for Apache Camel Kamelets by name, title, or description",
        tags={"metadata"},
        annotations={"readOnlyHint": True},
    )
    async def search_kamelets(query: str) -> str:
        return await _search_kamelets(store, query)

    @mcp.tool(
        description="Get detailed information about a specific Apache Camel Kamelet",
        tags={"metadata"},
        annotations={"readOnlyHint": True},
    )
    async def get_kamelet_details(name: str) -> str:
        return await _get_kamelet_details(store, name)
