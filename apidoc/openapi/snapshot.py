"""A stable view over the resource model.

ResourceApi.get_resource_groups() returns new objects on every call, which makes
identity based lookups and caching built on top of it unreliable. The snapshot
calls it exactly once per API and is the only source of groups, resources and
methods for the rest of a generation run. Renderers must only use methods
obtained from the snapshot, otherwise find_owning_resource() cannot find them.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class MethodLike(Protocol):
    http_method: str
    name: str | None


class ResourceLike(Protocol):
    path: str

    def get_methods(self) -> Sequence[Any]: ...


class ResourceGroupLike(Protocol):
    def get_resources(self) -> Sequence[Any]: ...


class ResourceApiLike(Protocol):
    def get_resource_groups(self) -> Sequence[Any]: ...


class ResourceModelError(RuntimeError):
    """The caller and the snapshot disagree about the resource model."""


class UnknownApiHandleError(ResourceModelError):
    """An API that was not part of the snapshot was looked up."""


class OrphanMethodError(ResourceModelError):
    """A method not reachable from the snapshot was looked up."""


class ResourceModelSnapshot:
    """Caches the resource groups of each API, computed once per API identity."""

    def __init__(self, resource_apis: Sequence[ResourceApiLike]) -> None:
        self._apis: list[ResourceApiLike] = []
        self._groups: dict[int, tuple[ResourceGroupLike, ...]] = {}

        # A repeated handle keeps its place in the stream but shares the first call's groups
        for api in resource_apis:
            self._apis.append(api)
            if id(api) in self._groups:
                logger.debug("Resource API %r supplied more than once; reusing its groups", api)
                continue
            self._groups[id(api)] = tuple(api.get_resource_groups())

        # Identity index method -> first owning resource, in traversal order
        self._owners: dict[int, ResourceLike] = {}
        for resource in self.stream_resources():
            for method in resource.get_methods():
                self._owners.setdefault(id(method), resource)

    @property
    def resource_apis(self) -> list[ResourceApiLike]:
        return list(self._apis)

    def stream_resource_groups(self) -> Iterator[ResourceGroupLike]:
        """Yield the groups of every API, in API order.

        Each call starts a new iteration over the cached groups. A handle supplied
        twice yields its groups twice.
        """
        for api in self._apis:
            yield from self.resource_groups_of(api)

    def resource_groups_of(self, api: ResourceApiLike) -> tuple[ResourceGroupLike, ...]:
        """Return the cached groups of an API that was part of the snapshot."""
        groups = self._groups.get(id(api))
        if groups is None:
            msg = f"Did not find entry for {api!r}"
            raise UnknownApiHandleError(msg)
        return groups

    def stream_resources(self) -> Iterator[ResourceLike]:
        for group in self.stream_resource_groups():
            yield from group.get_resources()

    def stream_methods(self) -> Iterator[Any]:
        for resource in self.stream_resources():
            yield from resource.get_methods()

    def find_owning_resource(self, method: Any) -> ResourceLike:
        """Return the first resource whose methods contain this exact method object.

        Methods are matched by identity: two methods with the same verb and path
        are different methods when they are different objects.
        """
        resource = self._owners.get(id(method))
        if resource is None:
            msg = f"No resource in the snapshot owns method {method!r}"
            raise OrphanMethodError(msg)
        return resource
