"""Normalization of the components catalog.

The upstream components document has been published in several shapes. Each
shape is recognised by a predicate and unpacked by an extractor; the pairs are
tried in order and the first matching predicate wins.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from weikio_mcp.metadata.models import Component

logger = logging.getLogger(__name__)


def _is_wrapped_list(data: Any) -> bool:
    return (
        isinstance(data, list)
        and len(data) > 0
        and isinstance(data[0], Mapping)
        and isinstance(data[0].get("component"), Mapping)
    )


def _unwrap_components(data: list[Any]) -> list[Component]:
    components: list[Component] = []
    for item in data:
        if not isinstance(item, Mapping) or not isinstance(item.get("component"), Mapping):
            continue
        component = dict(item["component"])
        if item.get("headers") is not None:
            component["headers"] = item["headers"]
        # Renamed so it does not shadow the component's own endpoint "properties"
        if item.get("properties") is not None:
            component["additionalProperties"] = item["properties"]
        components.append(component)
    logger.debug(f"Extracted {len(components)} components with additional data")
    return components


def _is_plain_list(data: Any) -> bool:
    return isinstance(data, list)


def _as_list(data: list[Any]) -> list[Component]:
    return list(data)


def _has_list_key(key: str) -> Callable[[Any], bool]:
    def predicate(data: Any) -> bool:
        return isinstance(data, Mapping) and isinstance(data.get(key), list)

    return predicate


def _list_under(key: str) -> Callable[[Mapping[str, Any]], list[Component]]:
    def extractor(data: Mapping[str, Any]) -> list[Component]:
        logger.debug(f"Found {key} array property")
        return list(data[key])

    return extractor


def _named_values(data: Mapping[str, Any]) -> list[Component]:
    return [value for value in data.values() if isinstance(value, Mapping) and "name" in value]


def _has_named_values(data: Any) -> bool:
    return isinstance(data, Mapping) and len(_named_values(data)) > 0


COMPONENT_SHAPES: tuple[tuple[Callable[[Any], bool], Callable[[Any], list[Component]]], ...] = (
    (_is_wrapped_list, _unwrap_components),
    (_is_plain_list, _as_list),
    (_has_list_key("components"), _list_under("components")),
    (_has_list_key("componentScheme"), _list_under("componentScheme")),
    (_has_named_values, _named_values),
)


def process_component_data(data: Any) -> list[Component]:
    """Normalize a decoded components document into a list of components.

    Unrecognised documents produce an empty list rather than an error.
    """
    for predicate, extractor in COMPONENT_SHAPES:
        if predicate(data):
            return extractor(data)

    keys = list(data.keys()) if isinstance(data, Mapping) else type(data).__name__
    logger.warning(f"Could not find components in the metadata document (keys: {keys})")
    return []
