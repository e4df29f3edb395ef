"""Runtime resource model handed out by the API registry.

These objects compare by identity. ResourceApi.get_resource_groups() builds a
fresh object graph on every call, so two calls never share groups, resources
or methods.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from apidoc.registry.context import RegistrationContext
from apidoc.spec.resources import (
    EntitySpec,
    MethodSpec,
    ParameterSpec,
    ResourceApiSpec,
    ResourceGroupSpec,
    ResourceSpec,
    ResponseSpec,
)

logger = logging.getLogger(__name__)


def join_path(*segments: str) -> str:
    """Join path segments into a normalized absolute path."""
    parts = [part for segment in segments for part in segment.split("/") if part]
    return "/" + "/".join(parts)


@dataclass(eq=False)
class Method:
    """One HTTP operation on a resource."""

    http_method: str
    name: str | None = None
    label: str = ""
    description: str = ""
    deprecated: bool = False
    facets: frozenset[str] = field(default_factory=frozenset)
    security: list[str] | None = None
    parameters: list[ParameterSpec] = field(default_factory=list)
    request: EntitySpec | None = None
    responses: list[ResponseSpec] = field(default_factory=list)

    @classmethod
    def from_spec(cls, spec: MethodSpec, inherited_facets: frozenset[str]) -> Method:
        return cls(
            http_method=spec.method,
            name=spec.name,
            label=spec.label,
            description=spec.description,
            deprecated=spec.deprecated,
            facets=inherited_facets | frozenset(spec.facets),
            security=list(spec.security) if spec.security is not None else None,
            parameters=list(spec.parameters),
            request=spec.request,
            responses=list(spec.responses),
        )


@dataclass(eq=False)
class Resource:
    """One addressable path template and its methods."""

    path: str
    label: str = ""
    methods: list[Method] = field(default_factory=list)

    def get_methods(self) -> list[Method]:
        return self.methods


@dataclass(eq=False)
class ResourceGroup:
    """A named collection of resources."""

    label: str
    description: str = ""
    resources: list[Resource] = field(default_factory=list)

    def get_resources(self) -> list[Resource]:
        return self.resources


class ResourceApi:
    """One API surface, as seen through a registration context."""

    def __init__(self, spec: ResourceApiSpec, context: RegistrationContext) -> None:
        self.spec = spec
        self.context = context

    @property
    def label(self) -> str:
        return self.spec.label

    def __repr__(self) -> str:
        return f"ResourceApi({self.spec.label!r})"

    def get_resource_groups(self) -> list[ResourceGroup]:
        """Build the facet-filtered groups of this API.

        Every call returns new objects.
        """
        groups = []
        api_facets = frozenset(self.spec.facets)
        for group_spec in self.spec.groups:
            group = self._build_group(group_spec, api_facets)
            if group.resources:
                groups.append(group)
        return groups

    def _build_group(self, spec: ResourceGroupSpec, inherited: frozenset[str]) -> ResourceGroup:
        facets = inherited | frozenset(spec.facets)
        resources = []
        for resource_spec in spec.resources:
            resource = self._build_resource(resource_spec, facets)
            if resource.methods:
                resources.append(resource)
        return ResourceGroup(label=spec.label, description=spec.description, resources=resources)

    def _build_resource(self, spec: ResourceSpec, inherited: frozenset[str]) -> Resource:
        facets = inherited | frozenset(spec.facets)
        methods = []
        for method_spec in spec.methods:
            method = Method.from_spec(method_spec, facets)
            if self.context.facet_filter.accept(method.facets):
                methods.append(method)
            else:
                logger.debug("Facet filter hides %s %s", method.http_method, spec.path)
        return Resource(
            path=join_path(self.spec.context_path, spec.path),
            label=spec.label,
            methods=methods,
        )
