"""Generator configuration loaded from a YAML file and environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from apidoc.spec.loader import SpecValidationError, format_pydantic_error, load_yaml_file


class ContactConfig(BaseModel):
    name: str | None = None
    url: str | None = None
    email: str | None = None

    model_config = {"extra": "forbid"}


class LicenseConfig(BaseModel):
    name: str
    url: str | None = None

    model_config = {"extra": "forbid"}


class ServerConfig(BaseModel):
    url: str
    description: str | None = None

    model_config = {"extra": "forbid"}


class SecurityConfig(BaseModel):
    """Security schemes, keyed by name, plus the schemes required by default."""

    schemes: dict[str, dict[str, Any]] = Field(default_factory=dict)
    default: list[str] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


class FacetsConfig(BaseModel):
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


class ApidocSettings(BaseSettings):
    """Settings for one document generation run."""

    # Document info
    title: str = "API"
    version: str = "1.0.0"
    description: str | None = None
    terms_of_service: str | None = None
    contact: ContactConfig | None = None
    license: LicenseConfig | None = None

    # Servers
    application_root: str | None = None
    host: str | None = None
    servers: list[ServerConfig] = Field(default_factory=list)

    security: SecurityConfig = Field(default_factory=SecurityConfig)

    # Facets of this generator, merged with the global ones
    facets: FacetsConfig = Field(default_factory=FacetsConfig)
    global_facets: FacetsConfig = Field(default_factory=FacetsConfig)

    # Schema rendering
    pass_through_annotations: str = ""  # comma separated
    remove_object_prefix: bool = False
    disable_examples: bool = False
    namespaces: dict[str, str] = Field(default_factory=dict)

    # Output
    template: str | None = None
    docs_dir: str | None = None
    docs_subdir: str = "ui"

    # Definition files, relative to the settings file
    apis: list[str] = Field(default_factory=lambda: ["apis/*.yaml"])
    syntaxes: list[str] = Field(default_factory=lambda: ["syntaxes/*.yaml"])

    model_config = SettingsConfigDict(
        env_prefix="APIDOC_",
        env_nested_delimiter="__",
        extra="forbid",
    )

    @property
    def pass_through_annotation_names(self) -> set[str]:
        """Annotation names rendered as vendor extensions."""

        raw = self.pass_through_annotations
        return {name.strip() for name in raw.split(",") if name.strip()}

    @property
    def facet_includes(self) -> set[str]:
        return set(self.global_facets.include) | set(self.facets.include)

    @property
    def facet_excludes(self) -> set[str]:
        return set(self.global_facets.exclude) | set(self.facets.exclude)

    def resolve_host(self) -> str | None:
        """Configured host, else host[:port] of the application root."""

        if self.host:
            return self.host
        if not self.application_root:
            return None
        try:
            parts = urlsplit(self.application_root)
            port = parts.port
        except ValueError:
            return None
        if not parts.hostname:
            return None
        return f"{parts.hostname}:{port}" if port else parts.hostname


def load_settings(config_file: Path | None = None) -> ApidocSettings:
    """Load settings from a YAML file; environment fills in what the file omits."""

    if config_file is None:
        return ApidocSettings()

    data = load_yaml_file(config_file)
    try:
        return ApidocSettings(**data)
    except ValidationError as e:
        raise SpecValidationError(format_pydantic_error(e, "settings"), str(config_file)) from e


@lru_cache
def get_settings() -> ApidocSettings:
    """Return a cached instance of the environment-only settings."""

    return ApidocSettings()
