"""The document's components section."""

from __future__ import annotations

import logging
from typing import Any

from apidoc.openapi.datatypes import ObjectTypeRenderer
from apidoc.openapi.security import SecurityRenderer
from apidoc.spec.models import SyntaxSpec

logger = logging.getLogger(__name__)


class ComponentsRenderer:
    """Schemas for every data type of every syntax, plus security schemes."""

    def __init__(
        self,
        objects: ObjectTypeRenderer,
        syntaxes: list[SyntaxSpec],
        security: SecurityRenderer,
    ) -> None:
        self.objects = objects
        self.syntaxes = syntaxes
        self.security = security

    def render(self) -> dict[str, Any]:
        components: dict[str, Any] = {}

        schemas = self._render_schemas()
        if schemas:
            components["schemas"] = schemas

        schemes = self.security.render_schemes()
        if schemes:
            components["securitySchemes"] = schemes

        return components

    def _render_schemas(self) -> dict[str, Any]:
        schemas: dict[str, Any] = {}
        for syntax in self.syntaxes:
            for type_name, data_type in syntax.types.items():
                name = self.objects.references.schema_name(syntax.syntax, type_name)
                if name in schemas:
                    # Only possible with remove_object_prefix and one name in two syntaxes
                    logger.warning(
                        "Schema '%s' of syntax '%s' clashes with an earlier one; skipping",
                        name,
                        syntax.syntax,
                    )
                    continue
                schemas[name] = self.objects.render(data_type, syntax)
        return schemas
