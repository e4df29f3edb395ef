# noqa: D104
"""Pydantic models and loader for API definition files."""

from apidoc.spec.loader import ApiDefinitions, SpecValidationError, load_definitions
from apidoc.spec.models import DataTypeSpec, PropertySpec, SyntaxSpec
from apidoc.spec.resources import (
    EntitySpec,
    HeaderSpec,
    MethodSpec,
    ParameterSpec,
    ResourceApiSpec,
    ResourceGroupSpec,
    ResourceSpec,
    ResponseSpec,
)
from apidoc.spec.types import TypeSpec, parse_type_spec

__all__ = [
    "load_definitions",
    "ApiDefinitions",
    "SpecValidationError",
    "DataTypeSpec",
    "PropertySpec",
    "SyntaxSpec",
    "EntitySpec",
    "HeaderSpec",
    "MethodSpec",
    "ParameterSpec",
    "ResourceApiSpec",
    "ResourceGroupSpec",
    "ResourceSpec",
    "ResponseSpec",
    "TypeSpec",
    "parse_type_spec",
]
