"""API registry backed by loaded definition files."""

from __future__ import annotations

from apidoc.registry.context import RegistrationContext
from apidoc.registry.model import ResourceApi
from apidoc.spec.loader import ApiDefinitions
from apidoc.spec.models import SyntaxSpec


class ApiRegistry:
    """Hands out resource APIs and data type syntaxes for a registration context."""

    def __init__(self, definitions: ApiDefinitions) -> None:
        self.definitions = definitions

    def get_resource_apis(self, context: RegistrationContext) -> list[ResourceApi]:
        return [ResourceApi(spec, context) for spec in self.definitions.apis]

    def get_syntaxes(self, context: RegistrationContext) -> list[SyntaxSpec]:  # noqa: ARG002
        return list(self.definitions.syntaxes)
