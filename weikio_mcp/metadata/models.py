"""Typed views of the Apache Camel metadata records.

Records are kept as the mappings decoded from the catalog files. Every key is
optional because the upstream feeds are not validated.
"""

from __future__ import annotations

from typing import Any, TypedDict

KameletProperty = TypedDict(
    "KameletProperty",
    {
        "title": str,
        "description": str,
        "type": str,
        "default": Any,
        "example": Any,
        "format": str,
        "enum": list[str],
        "x-descriptors": list[str],
    },
    total=False,
)

KameletAnnotations = TypedDict(
    "KameletAnnotations",
    {
        "camel.apache.org/kamelet.support.level": str,
        "camel.apache.org/catalog.version": str,
        "camel.apache.org/kamelet.icon": str,
        "camel.apache.org/provider": str,
        "camel.apache.org/kamelet.group": str,
        "camel.apache.org/kamelet.namespace": str,
    },
    total=False,
)

KameletLabels = TypedDict("KameletLabels", {"camel.apache.org/kamelet.type": str}, total=False)

KAMELET_TYPE_LABEL = "camel.apache.org/kamelet.type"
KAMELET_GROUP_ANNOTATION = "camel.apache.org/kamelet.group"
KAMELET_SUPPORT_LEVEL_ANNOTATION = "camel.apache.org/kamelet.support.level"
KAMELET_PROVIDER_ANNOTATION = "camel.apache.org/provider"


class ComponentProperty(TypedDict, total=False):
    name: str
    displayName: str
    kind: str
    group: str
    required: bool
    type: str
    javaType: str
    enum: list[str]
    deprecated: bool
    secret: bool
    defaultValue: Any
    description: str


class Component(TypedDict, total=False):
    name: str
    title: str
    description: str
    deprecated: bool
    firstVersion: str
    label: str
    javaType: str
    supportLevel: str
    groupId: str
    artifactId: str
    version: str
    scheme: str
    extendsScheme: str
    syntax: str
    api: bool
    consumerOnly: bool
    producerOnly: bool
    lenientProperties: bool
    remote: bool
    componentProperties: dict[str, ComponentProperty]
    properties: dict[str, ComponentProperty]
    headers: dict[str, ComponentProperty]
    additionalProperties: dict[str, ComponentProperty]


class KameletMetadata(TypedDict, total=False):
    name: str
    annotations: KameletAnnotations
    labels: KameletLabels


class KameletDefinition(TypedDict, total=False):
    title: str
    description: str
    required: list[str]
    properties: dict[str, KameletProperty]


class KameletSpec(TypedDict, total=False):
    definition: KameletDefinition
    dependencies: list[str]
    template: Any


class Kamelet(TypedDict, total=False):
    apiVersion: str
    kind: str
    metadata: KameletMetadata
    spec: KameletSpec


class SpiBeanProperty(ComponentProperty, total=False):
    pass


class SpiBean(TypedDict, total=False):
    name: str
    description: str
    type: str
    properties: dict[str, SpiBeanProperty]
