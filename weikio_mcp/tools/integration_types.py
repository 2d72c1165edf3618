"""Static catalog of the integration types Weik.io supports."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastmcp import FastMCP


@dataclass(frozen=True)
class IntegrationType:
    name: str
    description: str
    main_use_cases: list[str]
    capabilities: list[str]
    best_suited_for: list[str]
    limitations: list[str]
    examples: list[str]


INTEGRATION_TYPES: tuple[IntegrationType, ...] = (
    IntegrationType(
        name="Apache Camel Based Integration Flow",
        description=(
            "A flexible integration framework implementing Enterprise Integration Patterns "
            "with rule-based routing and mediation engine."
        ),
        main_use_cases=[
            "System-to-system integration",
            "API-based integrations",
            "Complex data transformations",
            "Event-driven architectures",
            "Message routing and orchestration",
        ],
        capabilities=[
            "Support for 300+ components and protocols",
            "Advanced routing and mediation",
            "Data transformation and validation",
            "Error handling and retry mechanisms",
            "Transaction support",
            "Monitoring and management",
        ],
        best_suited_for=[
            "Complex integration scenarios",
            "Integrations requiring data transformation",
            "API-based integrations",
            "Event processing",
            "Real-time data processing",
        ],
        limitations=[
            "More complex setup for simple file transfers",
            "Steeper learning curve for beginners",
        ],
        examples=[
            "Integrating CRM with ERP systems",
            "Building API gateways",
            "Implementing event-driven architectures",
            "Real-time data processing pipelines",
        ],
    ),
    IntegrationType(
        name="RCLONE Based Managed File Transfer (MFT)",
        description=(
            "A specialized solution for transferring files between different storage systems "
            "with advanced management capabilities."
        ),
        main_use_cases=[
            "File transfers between storage systems",
            "File synchronization",
            "Backup and archiving",
            "Secure file distribution",
        ],
        capabilities=[
            "Support for multiple file systems (SMB, SFTP, S3, Azure Blob, etc.)",
            "File synchronization and mirroring",
            "Bandwidth control and scheduling",
            "Encryption and secure transfers",
            "Checksumming and verification",
            "Filtering and exclusion rules",
        ],
        best_suited_for=[
            "Simple file transfers between storage systems",
            "Regular file synchronization tasks",
            "Backup and archiving workflows",
            "Large file transfers",
        ],
        limitations=[
            "Limited to file transfer operations",
            "Not suitable for complex data transformations",
            "Not designed for API integrations",
        ],
        examples=[
            "Syncing files from SFTP to S3 storage",
            "Backing up local directories to cloud storage",
            "Distributing files from central storage to multiple endpoints",
            "Secure transfer of sensitive files between organizations",
        ],
    ),
)


def get_integration_types() -> list[IntegrationType]:
    return list(INTEGRATION_TYPES)


def get_integration_type(name: str) -> IntegrationType | None:
    """Look up an integration type by name, ignoring case."""
    lowered = name.lower()
    return next((t for t in INTEGRATION_TYPES if t.name.lower() == lowered), None)


def register_integration_type_tools(mcp: FastMCP) -> None:
    @mcp.tool(
        description="Get information about supported integration types in Weik.io",
        tags={"integration_types"},
        annotations={"readOnlyHint": True},
    )
    async def get_supported_integration_types() -> str:
        return json.dumps([asdict(t) for t in get_integration_types()], indent=2)
