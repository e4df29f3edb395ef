"""Tests for apidoc.openapi.datatypes module."""

import pytest

from apidoc.openapi.datatypes import (
    PRIMITIVE_SCHEMAS,
    DataTypeReferenceRenderer,
    ObjectTypeRenderer,
    syntax_for_media_type,
)
from apidoc.spec.models import DataTypeSpec, PropertySpec, SyntaxSpec
from apidoc.spec.types import parse_type_spec

JSON = SyntaxSpec(syntax="json")
XML = SyntaxSpec(syntax="xml")


def render_type(expression, **kwargs) -> dict:
    return DataTypeReferenceRenderer(**kwargs).render(parse_type_spec(expression))


def render_property(data, **kwargs) -> dict:
    renderer = ObjectTypeRenderer(DataTypeReferenceRenderer(), **kwargs)
    return renderer.render_property(PropertySpec.from_yaml(data), "json")


class TestDataTypeReferenceRenderer:
    """Tests for inline schemas of type expressions."""

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("int", {"type": "integer", "format": "int32"}),
            ("long", {"type": "integer", "format": "int64"}),
            ("bool", {"type": "boolean"}),
            ("datetime", {"type": "string", "format": "date-time"}),
        ],
    )
    def test_primitives(self, expression: str, expected: dict) -> None:
        assert render_type(expression) == expected

    def test_primitive_schema_is_a_copy(self) -> None:
        render_type("string")["format"] = "email"

        assert PRIMITIVE_SCHEMAS["string"] == {"type": "string"}

    def test_reference_is_prefixed_with_syntax(self) -> None:
        renderer = DataTypeReferenceRenderer()

        assert render_type("User") == {"$ref": "#/components/schemas/json_User"}
        assert renderer.render(parse_type_spec("User"), "xml") == {
            "$ref": "#/components/schemas/xml_User"
        }

    def test_reference_without_prefix(self) -> None:
        assert render_type("User", remove_object_prefix=True) == {
            "$ref": "#/components/schemas/User"
        }

    def test_list_and_dict(self) -> None:
        assert render_type("list[User]") == {
            "type": "array",
            "items": {"$ref": "#/components/schemas/json_User"},
        }
        assert render_type("dict[string, int]") == {
            "type": "object",
            "additionalProperties": {"type": "integer", "format": "int32"},
        }

    def test_optional_primitive_is_nullable(self) -> None:
        assert render_type({"type": "optional", "of": "string"}) == {
            "type": "string",
            "nullable": True,
        }

    def test_optional_reference_wraps_in_all_of(self) -> None:
        assert render_type({"type": "optional", "of": "User"}) == {
            "allOf": [{"$ref": "#/components/schemas/json_User"}],
            "nullable": True,
        }

    def test_inline_enum(self) -> None:
        assert render_type({"type": "enum", "values": ["a", "b"], "default": "a"}) == {
            "type": "string",
            "enum": ["a", "b"],
            "default": "a",
        }

    @pytest.mark.parametrize(
        ("media_type", "syntax"),
        [
            ("application/json", "json"),
            ("application/xml", "xml"),
            ("application/atom+xml", "xml"),
            ("text/plain", "json"),
        ],
    )
    def test_syntax_for_media_type(self, media_type: str, syntax: str) -> None:
        assert syntax_for_media_type(media_type) == syntax


class TestRenderProperty:
    """Tests for property schemas."""

    def test_numeric_constraints(self) -> None:
        assert render_property({"type": "int", "gt": 0, "le": 100}) == {
            "type": "integer",
            "format": "int32",
            "minimum": 0,
            "exclusiveMinimum": True,
            "maximum": 100,
        }

    def test_string_constraints(self) -> None:
        schema = render_property(
            {"type": "string", "min_length": 1, "max_length": 64, "pattern": "^[a-z]+$"}
        )

        assert schema["minLength"] == 1
        assert schema["maxLength"] == 64
        assert schema["pattern"] == "^[a-z]+$"

    def test_modifiers(self) -> None:
        schema = render_property(
            {"type": "long", "readonly": True, "optional": True, "deprecated": True, "example": 7}
        )

        assert schema["readOnly"] is True
        assert schema["nullable"] is True
        assert schema["deprecated"] is True
        assert schema["example"] == 7

    def test_examples_can_be_disabled(self) -> None:
        schema = render_property({"type": "long", "example": 7}, disable_examples=True)

        assert "example" not in schema

    def test_bare_reference_stays_a_ref(self) -> None:
        assert render_property("Role") == {"$ref": "#/components/schemas/json_Role"}

    def test_reference_with_details_wraps_in_all_of(self) -> None:
        assert render_property({"type": "Role", "description": "The role."}) == {
            "allOf": [{"$ref": "#/components/schemas/json_Role"}],
            "description": "The role.",
        }

    def test_pass_through_annotations(self) -> None:
        schema = render_property(
            {
                "type": "string",
                "annotations": {"com.example.Sensitive": None, "com.example.Other": 1},
            },
            pass_through_annotations={"com.example.Sensitive"},
        )

        assert schema["x-Sensitive"] is True
        assert "x-Other" not in schema


class TestObjectTypeRenderer:
    """Tests for component schemas of named data types."""

    def test_object(self) -> None:
        data_type = DataTypeSpec.from_yaml(
            "User",
            {
                "description": "A user.",
                "properties": {"id": "long", "nickname": {"type": "string", "optional": True}},
            },
        )

        schema = ObjectTypeRenderer(DataTypeReferenceRenderer()).render(data_type, JSON)

        assert schema == {
            "type": "object",
            "title": "User",
            "properties": {
                "id": {"type": "integer", "format": "int64"},
                "nickname": {"type": "string", "nullable": True},
            },
            "required": ["id"],
            "description": "A user.",
        }

    def test_enum(self) -> None:
        data_type = DataTypeSpec.from_yaml("Role", {"values": ["ADMIN", "MEMBER"]})

        schema = ObjectTypeRenderer(DataTypeReferenceRenderer()).render(data_type, JSON)

        assert schema == {"type": "string", "enum": ["ADMIN", "MEMBER"]}

    def test_extends(self) -> None:
        data_type = DataTypeSpec.from_yaml("Admin", {"extends": "User"})

        schema = ObjectTypeRenderer(DataTypeReferenceRenderer()).render(data_type, JSON)

        assert schema == {
            "allOf": [
                {"$ref": "#/components/schemas/json_User"},
                {"type": "object", "title": "Admin"},
            ]
        }

    def test_xml_namespace_prefix(self) -> None:
        data_type = DataTypeSpec.from_yaml("User", {"namespace": "urn:example:users"})
        renderer = ObjectTypeRenderer(
            DataTypeReferenceRenderer(),
            namespace_prefixes={"urn:example:users": "u"},
        )

        assert renderer.render(data_type, XML)["xml"] == {
            "name": "User",
            "namespace": "urn:example:users",
            "prefix": "u",
        }
        assert "xml" not in renderer.render(data_type, JSON)


class TestReferenceSyntax:
    """References point at a syntax that declares the type."""

    SYNTAXES = [
        SyntaxSpec.from_yaml({"syntax": "json", "types": {"User": {}}}),
        SyntaxSpec.from_yaml(
            {"syntax": "xml", "types": {"User": {}, "Locale": {"values": ["en"]}}}
        ),
    ]

    @pytest.mark.parametrize(
        ("preferred", "type_name", "expected"),
        [
            ("json", "User", "json"),
            ("xml", "User", "xml"),
            ("json", "Locale", "xml"),
            ("json", "Unknown", "json"),
        ],
    )
    def test_resolve_syntax(self, preferred: str, type_name: str, expected: str) -> None:
        renderer = DataTypeReferenceRenderer(syntaxes=self.SYNTAXES)

        assert renderer.resolve_syntax(preferred, type_name) == expected

    def test_media_type_syntax_without_the_type(self) -> None:
        """An xml body of a json-only type refers to the json schema."""
        renderer = DataTypeReferenceRenderer(syntaxes=self.SYNTAXES[:1])

        assert renderer.render(parse_type_spec("list[User]"), "xml") == {
            "type": "array",
            "items": {"$ref": "#/components/schemas/json_User"},
        }
