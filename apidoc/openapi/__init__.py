# noqa: D104
"""OpenAPI document generation."""

from apidoc.openapi.generator import OpenAPIGenerator
from apidoc.openapi.module import GeneratedArtifact, OpenApiModule, generate_openapi
from apidoc.openapi.operation_ids import OperationIdAllocator
from apidoc.openapi.snapshot import (
    OrphanMethodError,
    ResourceModelError,
    ResourceModelSnapshot,
    UnknownApiHandleError,
)

__all__ = [
    "generate_openapi",
    "GeneratedArtifact",
    "OpenAPIGenerator",
    "OpenApiModule",
    "OperationIdAllocator",
    "OrphanMethodError",
    "ResourceModelError",
    "ResourceModelSnapshot",
    "UnknownApiHandleError",
]
