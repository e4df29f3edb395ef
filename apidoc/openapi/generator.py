"""OpenAPI 3.0 document generator.

Assembles the document from the section renderers:
- info, servers, security → from the settings
- paths → from the resource model snapshot
- components → from the data type syntaxes and security schemes

The assembled sections are rendered to YAML through a Jinja2 template.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined
import yaml

from apidoc.openapi.components import ComponentsRenderer
from apidoc.openapi.datatypes import DataTypeReferenceRenderer, ObjectTypeRenderer
from apidoc.openapi.info import InfoRenderer
from apidoc.openapi.operation_ids import OperationIdAllocator
from apidoc.openapi.paths import PathsRenderer
from apidoc.openapi.security import SecurityRenderer
from apidoc.openapi.servers import ServersRenderer
from apidoc.openapi.snapshot import ResourceModelSnapshot
from apidoc.registry.context import DocTagHandler
from apidoc.settings import ApidocSettings
from apidoc.spec.models import SyntaxSpec

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.3"
TEMPLATES_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "openapi.yml.j2"


def to_yaml(value: Any) -> str:
    """Dump a value as block-style YAML, keeping key order."""
    return yaml.safe_dump(
        value,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=120,
    ).rstrip("\n")


def to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


class OpenAPIGenerator:
    """Generate an OpenAPI document from a resource model snapshot."""

    def __init__(
        self,
        snapshot: ResourceModelSnapshot,
        syntaxes: list[SyntaxSpec],
        settings: ApidocSettings,
        tag_handler: DocTagHandler | None = None,
        template_path: Path | None = None,
    ) -> None:
        """Initialize with one run's snapshot; the operation id table lives as long as this."""
        self.snapshot = snapshot
        self.syntaxes = syntaxes
        self.settings = settings
        self.tag_handler = tag_handler or DocTagHandler()
        self.template_path = template_path

        self.references = DataTypeReferenceRenderer(settings.remove_object_prefix, syntaxes)
        self.objects = ObjectTypeRenderer(
            self.references,
            pass_through_annotations=settings.pass_through_annotation_names,
            namespace_prefixes=settings.namespaces,
            disable_examples=settings.disable_examples,
        )
        self.operation_ids = OperationIdAllocator(snapshot)
        self.security = SecurityRenderer(settings.security)

    def build_model(self) -> dict[str, Any]:
        """Build the template model, one entry per document section."""
        paths = PathsRenderer(
            self.snapshot,
            self.operation_ids,
            self.references,
            tag_handler=self.tag_handler,
            disable_examples=self.settings.disable_examples,
        )
        return {
            "openapi_version": OPENAPI_VERSION,
            "info": InfoRenderer(self.settings).render(),
            "servers": ServersRenderer(self.settings).render(),
            "security": self.security.render(),
            "paths": paths.render(),
            "components": ComponentsRenderer(self.objects, self.syntaxes, self.security).render(),
        }

    def generate(self) -> dict[str, Any]:
        """Generate the complete OpenAPI document as a dict."""
        model = self.build_model()
        document: dict[str, Any] = {
            "openapi": model["openapi_version"],
            "info": model["info"],
        }
        for section in ("servers", "security"):
            if model[section]:
                document[section] = model[section]
        document["paths"] = model["paths"]
        if model["components"]:
            document["components"] = model["components"]
        return document

    def render(self) -> str:
        """Render the document text through the template."""
        template = self._load_template()
        text = template.render(**self.build_model())
        return text if text.endswith("\n") else text + "\n"

    def _load_template(self):
        if self.template_path is not None:
            logger.debug("Processing template %s", self.template_path)
            search_path = [str(self.template_path.parent), str(TEMPLATES_DIR)]
            name = self.template_path.name
        else:
            logger.debug("Processing default template %s", DEFAULT_TEMPLATE)
            search_path = [str(TEMPLATES_DIR)]
            name = DEFAULT_TEMPLATE

        env = Environment(
            loader=FileSystemLoader(search_path),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,  # noqa: S701
            undefined=StrictUndefined,
        )
        env.filters["to_yaml"] = to_yaml
        env.filters["to_json"] = to_json
        return env.get_template(name)
