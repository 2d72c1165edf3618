"""Markdown rendering of components and kamelets for tool responses."""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date
from typing import TYPE_CHECKING

from weikio_mcp.metadata.models import (
    KAMELET_GROUP_ANNOTATION,
    KAMELET_PROVIDER_ANNOTATION,
    KAMELET_SUPPORT_LEVEL_ANNOTATION,
    KAMELET_TYPE_LABEL,
)

if TYPE_CHECKING:
    from typing import Any

    from weikio_mcp.metadata.models import Component, Kamelet

NO_DESCRIPTION = "No description available."

# (section title, component key) in rendering order
COMPONENT_PROPERTY_SECTIONS: tuple[tuple[str, str], ...] = (
    ("Component Properties", "componentProperties"),
    ("Endpoint Properties", "properties"),
    ("Headers", "headers"),
    ("Additional Properties", "additionalProperties"),
)


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _scalar(value: Any) -> str:
    """Render a property value as display text: lists comma-joined, null as empty."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(_scalar(v) for v in value)
    if isinstance(value, Mapping):
        return _json_literal(value)
    return str(value)


def _json_default(value: Any) -> str:
    # Unquoted YAML timestamps load as date/datetime
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _json_literal(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_json_default)


def _possible_values(enum: Any) -> str | None:
    if isinstance(enum, list) and enum:
        return ", ".join(_scalar(v) for v in enum)
    return None


def first_sentence(text: str) -> str:
    """Return text up to its first period, terminated with a period."""
    return text.split(".")[0] + "."


def _format_component_property(key: str, prop: Mapping[str, Any]) -> str:
    heading = prop.get("displayName") or prop.get("name") or key
    result = f"### {heading} ({key})\n"
    if prop.get("description"):
        result += f"{prop['description']}\n\n"
    result += f"- **Name**: {key}\n"
    result += f"- **Type**: {prop.get('type') or 'unknown'}\n"
    result += f"- **Required**: {'Yes' if prop.get('required') else 'No'}\n"

    if prop.get("defaultValue"):
        result += f"- **Default**: {_scalar(prop['defaultValue'])}\n"

    possible = _possible_values(prop.get("enum"))
    if possible:
        result += f"- **Possible Values**: {possible}\n"

    return result + "\n"


def format_component_details(component: Component) -> str:
    """Render a component as Markdown.

    Header lines whose source field is missing are left out. Each property
    section is rendered only when its map is non-empty.
    """
    result = f"# {component.get('title') or component.get('name') or 'Unnamed component'}\n\n"

    if component.get("deprecated"):
        result += "> **DEPRECATED**\n\n"

    if component.get("description"):
        result += f"{component['description']}\n\n"

    if component.get("scheme"):
        result += f"- **Scheme**: {component['scheme']}\n"
    coordinates = [component.get(k) for k in ("groupId", "artifactId", "version")]
    if all(coordinates):
        result += f"- **Maven**: {':'.join(str(c) for c in coordinates)}\n"
    if component.get("supportLevel"):
        result += f"- **Support Level**: {component['supportLevel']}\n"
    if component.get("consumerOnly"):
        result += "- **Consumer Only**: Yes\n"
    if component.get("producerOnly"):
        result += "- **Producer Only**: Yes\n"

    for title, key in COMPONENT_PROPERTY_SECTIONS:
        properties = _mapping(component.get(key))
        if not properties:
            continue
        result += f"\n## {title}\n\n"
        for prop_key, prop in properties.items():
            result += _format_component_property(prop_key, _mapping(prop))

    return result


def format_kamelet_details(kamelet: Kamelet) -> str:
    """Render a kamelet as Markdown.

    Required flags come from membership in the definition's ``required`` list;
    defaults and examples are shown as JSON literals.
    """
    metadata = _mapping(kamelet.get("metadata"))
    spec = _mapping(kamelet.get("spec"))
    definition = _mapping(spec.get("definition"))
    annotations = _mapping(metadata.get("annotations"))
    labels = _mapping(metadata.get("labels"))

    result = f"# {definition.get('title') or metadata.get('name') or 'Unnamed kamelet'}\n\n"
    if definition.get("description"):
        result += f"{definition['description']}\n\n"

    header = (
        ("Type", labels.get(KAMELET_TYPE_LABEL)),
        ("Group", annotations.get(KAMELET_GROUP_ANNOTATION)),
        ("Support Level", annotations.get(KAMELET_SUPPORT_LEVEL_ANNOTATION)),
        ("Provider", annotations.get(KAMELET_PROVIDER_ANNOTATION)),
    )
    for label, value in header:
        if value:
            result += f"- **{label}**: {value}\n"

    required = definition.get("required")
    if not isinstance(required, list):
        required = []
    properties = _mapping(definition.get("properties"))
    if properties:
        result += "\n## Properties\n\n"
        for key, raw_prop in properties.items():
            prop = _mapping(raw_prop)
            result += f"### {prop.get('title') or key} ({key})\n"
            if prop.get("description"):
                result += f"{prop['description']}\n\n"
            result += f"- **Name**: {key}\n"
            if prop.get("type"):
                result += f"- **Type**: {prop['type']}\n"
            result += f"- **Required**: {'Yes' if key in required else 'No'}\n"

            if "default" in prop:
                result += f"- **Default**: {_json_literal(prop['default'])}\n"
            if "example" in prop:
                result += f"- **Example**: {_json_literal(prop['example'])}\n"

            possible = _possible_values(prop.get("enum"))
            if possible:
                result += f"- **Possible Values**: {possible}\n"

            result += "\n"

    dependencies = spec.get("dependencies")
    if isinstance(dependencies, list) and dependencies:
        result += "\n## Dependencies\n\n"
        for dependency in dependencies:
            result += f"- {dependency}\n"

    return result


def format_component_summary(component: Component) -> str:
    """One bullet line for a component search hit."""
    description = component.get("description")
    summary = first_sentence(description) if isinstance(description, str) and description else NO_DESCRIPTION
    return f"- **{component.get('name')}**: {summary}"


def format_kamelet_summary(kamelet: Kamelet) -> str:
    """One bullet line for a kamelet search hit."""
    name = _mapping(kamelet.get("metadata")).get("name")
    definition = _mapping(_mapping(kamelet.get("spec")).get("definition"))
    description = definition.get("description")
    if not name or not isinstance(description, str) or not description:
        return f"- **Unknown kamelet**: {NO_DESCRIPTION}"
    return f"- **{name}**: {first_sentence(description)}"
