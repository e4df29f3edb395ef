"""The document's paths section."""

from __future__ import annotations

from http import HTTPStatus
import logging
import re
from typing import Any

from apidoc.openapi.datatypes import DataTypeReferenceRenderer, syntax_for_media_type
from apidoc.openapi.operation_ids import OperationIdAllocator
from apidoc.openapi.security import requirement
from apidoc.openapi.snapshot import ResourceModelSnapshot
from apidoc.registry.context import DocTagHandler
from apidoc.spec.resources import EntitySpec, ParameterSpec, ResponseSpec

logger = logging.getLogger(__name__)

_SENTENCE_END = re.compile(r"(?<=[.!?])\s")


def default_status(http_method: str) -> int:
    """Status code of a method that declares no responses."""
    if http_method == "POST":
        return 201
    if http_method == "DELETE":
        return 204
    return 200


def first_sentence(text: str) -> str:
    return _SENTENCE_END.split(text.strip(), maxsplit=1)[0] if text else ""


def status_phrase(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return f"Status {code}"


class PathsRenderer:
    """Renders every method of the snapshot as a path operation."""

    def __init__(
        self,
        snapshot: ResourceModelSnapshot,
        operation_ids: OperationIdAllocator,
        references: DataTypeReferenceRenderer,
        tag_handler: DocTagHandler | None = None,
        disable_examples: bool = False,
    ) -> None:
        self.snapshot = snapshot
        self.operation_ids = operation_ids
        self.references = references
        self.tag_handler = tag_handler or DocTagHandler()
        self.disable_examples = disable_examples

    def render(self) -> dict[str, Any]:
        paths: dict[str, dict[str, Any]] = {}

        for group in self.snapshot.stream_resource_groups():
            for resource in group.get_resources():
                path_item = paths.setdefault(resource.path, {})
                for method in resource.get_methods():
                    verb = method.http_method.lower()
                    if verb in path_item:
                        logger.warning(
                            "Skipping duplicate operation %s %s (%s)",
                            method.http_method,
                            resource.path,
                            self.operation_ids.operation_id(method),
                        )
                        continue
                    path_item[verb] = self._render_operation(group, method)

        return {path: item for path, item in paths.items() if item}

    def _render_operation(self, group, method) -> dict[str, Any]:
        description = self.tag_handler.handle(method.description)
        operation: dict[str, Any] = {"tags": [group.label]}

        summary = method.label or first_sentence(description)
        if summary:
            operation["summary"] = summary
        if description:
            operation["description"] = description
        operation["operationId"] = self.operation_ids.operation_id(method)

        if method.parameters:
            operation["parameters"] = [self._render_parameter(p) for p in method.parameters]

        if method.request is not None:
            operation["requestBody"] = self._render_request(method.request)

        operation["responses"] = self._render_responses(method)

        if method.deprecated:
            operation["deprecated"] = True
        if method.security is not None:
            operation["security"] = requirement(method.security)

        return operation

    def _render_parameter(self, param: ParameterSpec) -> dict[str, Any]:
        schema = self.references.render(param.type_spec)
        if param.default is not None:
            if "$ref" in schema:
                schema = {"allOf": [schema]}
            schema["default"] = param.default

        rendered: dict[str, Any] = {"name": param.name, "in": param.location}
        description = self.tag_handler.handle(param.description)
        if description:
            rendered["description"] = description
        rendered["required"] = param.is_required
        if param.deprecated:
            rendered["deprecated"] = True
        rendered["schema"] = schema
        if param.example is not None and not self.disable_examples:
            rendered["example"] = param.example
        return rendered

    def _render_content(self, entity: EntitySpec) -> dict[str, Any]:
        content: dict[str, Any] = {}
        for media_type in entity.media_types:
            media: dict[str, Any] = {}
            if entity.type_spec is not None:
                media["schema"] = self.references.render(
                    entity.type_spec, syntax_for_media_type(media_type)
                )
            if entity.example is not None and not self.disable_examples:
                media["example"] = entity.example
            content[media_type] = media
        return content

    def _render_request(self, entity: EntitySpec) -> dict[str, Any]:
        body: dict[str, Any] = {}
        description = self.tag_handler.handle(entity.description)
        if description:
            body["description"] = description
        body["required"] = entity.required
        body["content"] = self._render_content(entity)
        return body

    def _render_responses(self, method) -> dict[str, Any]:
        if not method.responses:
            code = default_status(method.http_method)
            return {str(code): {"description": status_phrase(code)}}

        responses: dict[str, Any] = {}
        for response in method.responses:
            responses[str(response.code)] = self._render_response(response)
        return responses

    def _render_response(self, response: ResponseSpec) -> dict[str, Any]:
        rendered: dict[str, Any] = {
            "description": self.tag_handler.handle(response.condition)
            or status_phrase(response.code),
        }
        if response.headers:
            rendered["headers"] = {
                name: self._render_header(header.description, header.type_spec)
                for name, header in response.headers.items()
            }
        if response.entity is not None:
            rendered["content"] = self._render_content(response.entity)
        return rendered

    def _render_header(self, description: str, type_spec) -> dict[str, Any]:
        header: dict[str, Any] = {}
        if description:
            header["description"] = self.tag_handler.handle(description)
        header["schema"] = self.references.render(type_spec)
        return header
