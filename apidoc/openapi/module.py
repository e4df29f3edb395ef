"""OpenAPI generation module: settings and registry in, openapi.yml out."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from apidoc.openapi.generator import OpenAPIGenerator
from apidoc.openapi.snapshot import ResourceModelSnapshot
from apidoc.registry.context import FacetFilter, RegistrationContext
from apidoc.registry.registry import ApiRegistry
from apidoc.settings import ApidocSettings, load_settings
from apidoc.spec.loader import load_definitions

logger = logging.getLogger(__name__)

OPENAPI_MODULENAME = "openapi"
DOCUMENT_NAME = "openapi.yml"


@dataclass(frozen=True)
class GeneratedArtifact:
    """Where a generation run put its output."""

    name: str
    directory: Path
    document: Path


class OpenApiModule:
    """Generates the OpenAPI document for the APIs of a registry."""

    def __init__(
        self,
        settings: ApidocSettings,
        registry: ApiRegistry,
        base_dir: Path | None = None,
    ) -> None:
        self.settings = settings
        self.registry = registry
        self.base_dir = base_dir or Path.cwd()

    @property
    def name(self) -> str:
        return OPENAPI_MODULENAME

    def registration_context(self) -> RegistrationContext:
        facet_filter = FacetFilter.create(
            self.settings.facet_includes,
            self.settings.facet_excludes,
        )
        return RegistrationContext(facet_filter=facet_filter)

    def resolve_path(self, value: str) -> Path:
        path = Path(value)
        return path if path.is_absolute() else self.base_dir / path

    def docs_dir(self, output_root: Path) -> Path:
        if self.settings.docs_dir:
            return self.resolve_path(self.settings.docs_dir)
        return output_root

    def template_path(self) -> Path | None:
        if self.settings.template:
            return self.resolve_path(self.settings.template)
        return None

    def create_generator(self) -> OpenAPIGenerator:
        """Build a generator over a fresh snapshot of the registry's APIs."""
        context = self.registration_context()
        resource_apis = self.registry.get_resource_apis(context)
        if not resource_apis:
            logger.info("No resource APIs registered: the document will have no paths.")

        return OpenAPIGenerator(
            ResourceModelSnapshot(resource_apis),
            self.registry.get_syntaxes(context),
            self.settings,
            tag_handler=context.tag_handler,
            template_path=self.template_path(),
        )

    def generate(self, output_root: Path) -> GeneratedArtifact:
        """Write openapi.yml below output_root (or the configured docs dir)."""
        docs_dir = self.docs_dir(output_root)
        directory = docs_dir / self.settings.docs_subdir if self.settings.docs_subdir else docs_dir
        directory.mkdir(parents=True, exist_ok=True)

        document = directory / DOCUMENT_NAME
        document.write_text(self.create_generator().render(), encoding="utf-8")
        logger.info("Wrote %s", document)

        return GeneratedArtifact(name=self.name, directory=directory, document=document)


def generate_openapi(
    config_file: Path | None = None,
    output_root: Path | None = None,
) -> GeneratedArtifact:
    """Load settings and definitions, then generate the OpenAPI document."""
    settings = load_settings(config_file)
    base_dir = config_file.parent if config_file is not None else Path.cwd()
    definitions = load_definitions(settings, base_dir)
    module = OpenApiModule(settings, ApiRegistry(definitions), base_dir=base_dir)
    return module.generate(output_root if output_root is not None else base_dir / "build")
