"""Apache Camel component and kamelet metadata."""

from __future__ import annotations

from weikio_mcp.metadata.formatting import (
    format_component_details,
    format_component_summary,
    format_kamelet_details,
    format_kamelet_summary,
)
from weikio_mcp.metadata.normalize import process_component_data
from weikio_mcp.metadata.store import MetadataStore, MetadataUnavailableError, metadata_store_from_env

__all__ = [
    "MetadataStore",
    "MetadataUnavailableError",
    "format_component_details",
    "format_component_summary",
    "format_kamelet_details",
    "format_kamelet_summary",
    "metadata_store_from_env",
    "process_component_data",
]
