# noqa: D104
"""Resource model registry: facet filtering and the runtime resource graph."""

from apidoc.registry.context import DocTagHandler, FacetFilter, RegistrationContext
from apidoc.registry.model import Method, Resource, ResourceApi, ResourceGroup, join_path
from apidoc.registry.registry import ApiRegistry

__all__ = [
    "ApiRegistry",
    "DocTagHandler",
    "FacetFilter",
    "RegistrationContext",
    "Method",
    "Resource",
    "ResourceApi",
    "ResourceGroup",
    "join_path",
]
