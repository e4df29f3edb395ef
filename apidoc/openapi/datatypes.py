"""Rendering of type expressions and data types to OpenAPI schemas."""

from __future__ import annotations

from typing import Any

from apidoc.spec.models import DataTypeSpec, PropertySpec, SyntaxSpec
from apidoc.spec.types import (
    DictType,
    EnumType,
    ListType,
    OptionalType,
    PrimitiveType,
    RefType,
    TypeSpec,
)

PRIMITIVE_SCHEMAS: dict[str, dict[str, Any]] = {
    "int": {"type": "integer", "format": "int32"},
    "long": {"type": "integer", "format": "int64"},
    "float": {"type": "number", "format": "float"},
    "double": {"type": "number", "format": "double"},
    "string": {"type": "string"},
    "bool": {"type": "boolean"},
    "datetime": {"type": "string", "format": "date-time"},
    "date": {"type": "string", "format": "date"},
    "uuid": {"type": "string", "format": "uuid"},
    "binary": {"type": "string", "format": "binary"},
}


def syntax_for_media_type(media_type: str) -> str:
    """Pick the data type syntax that describes a media type."""
    return "xml" if "xml" in media_type.lower() else "json"


class DataTypeReferenceRenderer:
    """Turns a type expression into an inline schema or a $ref.

    A reference points at the schema of the syntax that declares the type. The
    preferred syntax (from the media type) wins when it declares the name; otherwise
    the first syntax that does is used.
    """

    def __init__(
        self,
        remove_object_prefix: bool = False,
        syntaxes: list[SyntaxSpec] | None = None,
    ) -> None:
        self.remove_object_prefix = remove_object_prefix
        self.type_names: dict[str, set[str]] = {}
        for syntax in syntaxes or []:
            self.type_names.setdefault(syntax.syntax, set()).update(syntax.get_type_names())

    def schema_name(self, syntax: str, type_name: str) -> str:
        """Component name of a data type, prefixed with its syntax by default."""
        if self.remove_object_prefix:
            return type_name
        return f"{syntax}_{type_name}"

    def resolve_syntax(self, preferred: str, type_name: str) -> str:
        """Syntax whose schema a reference to type_name should point at."""
        if type_name in self.type_names.get(preferred, ()):
            return preferred
        for syntax, names in self.type_names.items():
            if type_name in names:
                return syntax
        return preferred

    def render(self, spec: TypeSpec, syntax: str = "json") -> dict[str, Any]:
        if isinstance(spec, PrimitiveType):
            return dict(PRIMITIVE_SCHEMAS[spec.type])

        if isinstance(spec, RefType):
            name = self.schema_name(self.resolve_syntax(syntax, spec.name), spec.name)
            return {"$ref": f"#/components/schemas/{name}"}

        if isinstance(spec, ListType):
            return {"type": "array", "items": self.render(spec.of, syntax)}

        if isinstance(spec, DictType):
            return {
                "type": "object",
                "additionalProperties": self.render(spec.value, syntax),
            }

        if isinstance(spec, OptionalType):
            inner = self.render(spec.of, syntax)
            if "$ref" in inner:
                # Siblings of $ref are ignored in OpenAPI 3.0
                return {"allOf": [inner], "nullable": True}
            return {**inner, "nullable": True}

        if isinstance(spec, EnumType):
            schema: dict[str, Any] = {"type": "string", "enum": list(spec.values)}
            if spec.default is not None:
                schema["default"] = spec.default
            return schema

        msg = f"Unknown type spec: {spec}"
        raise ValueError(msg)


class ObjectTypeRenderer:
    """Renders named data types as component schemas."""

    def __init__(
        self,
        references: DataTypeReferenceRenderer,
        pass_through_annotations: set[str] | None = None,
        namespace_prefixes: dict[str, str] | None = None,
        disable_examples: bool = False,
    ) -> None:
        self.references = references
        self.pass_through_annotations = pass_through_annotations or set()
        self.namespace_prefixes = namespace_prefixes or {}
        self.disable_examples = disable_examples

    def render(self, data_type: DataTypeSpec, syntax: SyntaxSpec) -> dict[str, Any]:
        if data_type.kind == "enum":
            schema: dict[str, Any] = {"type": "string", "enum": list(data_type.values)}
        else:
            schema = self._render_object(data_type, syntax.syntax)

        if data_type.description:
            schema["description"] = data_type.description
        if data_type.deprecated:
            schema["deprecated"] = True
        if data_type.example is not None and not self.disable_examples:
            schema["example"] = data_type.example

        xml = self._render_xml(data_type, syntax.syntax)
        if xml:
            schema["xml"] = xml

        if data_type.extends:
            parent = {
                "$ref": "#/components/schemas/"
                + self.references.schema_name(syntax.syntax, data_type.extends)
            }
            return {"allOf": [parent, schema]}
        return schema

    def _render_object(self, data_type: DataTypeSpec, syntax: str) -> dict[str, Any]:
        properties = {}
        required = []

        for prop_name, prop in data_type.properties.items():
            properties[prop_name] = self.render_property(prop, syntax)
            if prop.required:
                required.append(prop_name)

        schema: dict[str, Any] = {"type": "object", "title": data_type.name}
        if properties:
            schema["properties"] = properties
        if required:
            schema["required"] = required
        return schema

    def render_property(self, prop: PropertySpec, syntax: str) -> dict[str, Any]:
        schema = self.references.render(prop.type_spec, syntax)
        if "$ref" in schema and self._has_property_details(prop):
            schema = {"allOf": [schema]}

        if prop.description:
            schema["description"] = prop.description

        # Constraints
        if prop.ge is not None:
            schema["minimum"] = prop.ge
        if prop.gt is not None:
            schema["minimum"] = prop.gt
            schema["exclusiveMinimum"] = True
        if prop.le is not None:
            schema["maximum"] = prop.le
        if prop.lt is not None:
            schema["maximum"] = prop.lt
            schema["exclusiveMaximum"] = True
        if prop.min_length is not None:
            schema["minLength"] = prop.min_length
        if prop.max_length is not None:
            schema["maxLength"] = prop.max_length
        if prop.pattern is not None:
            schema["pattern"] = prop.pattern

        # Modifiers
        if prop.default is not None:
            schema["default"] = prop.default
        if prop.readonly:
            schema["readOnly"] = True
        if prop.optional and "$ref" not in schema:
            schema["nullable"] = True
        if prop.deprecated:
            schema["deprecated"] = True
        if prop.example is not None and not self.disable_examples:
            schema["example"] = prop.example

        for annotation, value in prop.annotations.items():
            if annotation in self.pass_through_annotations:
                simple_name = annotation.rsplit(".", 1)[-1]
                schema[f"x-{simple_name}"] = value if value is not None else True

        return schema

    def _has_property_details(self, prop: PropertySpec) -> bool:
        return bool(
            prop.description
            or prop.readonly
            or prop.optional
            or prop.deprecated
            or (prop.example is not None and not self.disable_examples)
            or prop.default is not None
            or any(name in self.pass_through_annotations for name in prop.annotations)
        )

    def _render_xml(self, data_type: DataTypeSpec, syntax: str) -> dict[str, Any] | None:
        if syntax != "xml":
            return None
        xml: dict[str, Any] = {"name": data_type.name}
        if data_type.namespace:
            xml["namespace"] = data_type.namespace
            prefix = self.namespace_prefixes.get(data_type.namespace)
            if prefix:
                xml["prefix"] = prefix
        return xml
