"""Shared fixtures and helpers for weikio_mcp tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import Mock

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

COMPONENTS_DOCUMENT = [
    {
        "component": {
            "name": "http",
            "title": "HTTP",
            "description": "Send requests to external HTTP servers using Apache HTTP Client 5.x. Supports TLS.",
            "label": "http",
            "scheme": "http",
            "groupId": "org.apache.camel",
            "artifactId": "camel-http",
            "version": "4.4.0",
            "supportLevel": "Stable",
            "producerOnly": True,
            "componentProperties": {
                "lazyStartProducer": {
                    "displayName": "Lazy Start Producer",
                    "type": "boolean",
                    "required": False,
                    "defaultValue": False,
                    "description": "Whether the producer should be started lazy.",
                }
            },
        },
        "headers": {"CamelHttpMethod": {"displayName": "Http Method", "type": "string"}},
        "properties": {"httpUri": {"displayName": "Http Uri", "type": "string", "required": True}},
    },
    {
        "component": {
            "name": "kafka",
            "title": "Kafka",
            "description": "Sent and receive messages to/from an Apache Kafka broker.",
            "label": "messaging",
            "scheme": "kafka",
        }
    },
    {"component": {"name": "timer", "title": "Timer", "label": "core,scheduling", "scheme": "timer"}},
]

KAMELETS_YAML = """\
apiVersion: camel.apache.org/v1
kind: Kamelet
metadata:
  name: aws-s3-source
  annotations:
    camel.apache.org/kamelet.support.level: Stable
    camel.apache.org/provider: Apache Software Foundation
    camel.apache.org/kamelet.group: AWS S3
  labels:
    camel.apache.org/kamelet.type: source
spec:
  definition:
    title: AWS S3 Source
    description: Receive data from an Amazon S3 Bucket. Files are consumed once.
    required:
      - bucketNameOrArn
    properties:
      bucketNameOrArn:
        title: Bucket Name
        description: The S3 Bucket name or Amazon Resource Name (ARN).
        type: string
      deleteAfterRead:
        title: Auto-delete Objects
        description: Specifies to delete objects after consuming them.
        type: boolean
        default: true
  dependencies:
    - "camel:aws2-s3"
    - "camel:kamelet"
---
apiVersion: camel.apache.org/v1
kind: Kamelet
metadata:
  name: log-sink
spec:
  definition:
    title: Log Sink
    description: Log data to the console.
---
---
apiVersion: camel.apache.org/v1
kind: Kamelet
metadata:
  name: orphan-kamelet
"""

SPI_BEANS_DOCUMENT = [{"name": "aws2-s3-client", "description": "S3 client", "type": "bean", "properties": {}}]


def make_transport(
    routes: dict[str, Callable[[], httpx.Response]], calls: list[str] | None = None
) -> httpx.MockTransport:
    """Build an httpx transport answering from ``routes``, keyed by URL path suffix."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request.url.path)
        for suffix, respond in routes.items():
            if request.url.path.endswith(suffix):
                return respond()
        return httpx.Response(404, text="not found")

    return httpx.MockTransport(handler)


def default_routes() -> dict[str, Callable[[], httpx.Response]]:
    return {
        "/components.json": lambda: httpx.Response(200, json=COMPONENTS_DOCUMENT),
        "/kamelets.yaml": lambda: httpx.Response(200, text=KAMELETS_YAML),
        "/spiBeans.json": lambda: httpx.Response(200, json=SPI_BEANS_DOCUMENT),
    }


def write_cache(metadata_dir: Path) -> None:
    """Populate a metadata directory with all three cache files."""
    from weikio_mcp.metadata.normalize import process_component_data

    metadata_dir.mkdir(parents=True, exist_ok=True)
    (metadata_dir / "components.json").write_text(json.dumps(process_component_data(COMPONENTS_DOCUMENT)))
    (metadata_dir / "kamelets.yaml").write_text(KAMELETS_YAML)
    (metadata_dir / "spiBeans.json").write_text(json.dumps(SPI_BEANS_DOCUMENT))


@pytest.fixture
def mock_mcp() -> Mock:
    """Create a mock FastMCP instance that captures registered tools."""
    tools: dict = {}

    def tool_decorator(**kwargs):
        def wrapper(fn):
            tools[fn.__name__] = fn
            return fn

        return wrapper

    mcp = Mock()
    mcp.tool = tool_decorator
    mcp._tools = tools
    return mcp
