"""The document's info section."""

from __future__ import annotations

from typing import Any

from apidoc.settings import ApidocSettings


class InfoRenderer:
    def __init__(self, settings: ApidocSettings) -> None:
        self.settings = settings

    def render(self) -> dict[str, Any]:
        info: dict[str, Any] = {
            "title": self.settings.title,
            "version": self.settings.version,
        }
        if self.settings.description:
            info["description"] = self.settings.description
        if self.settings.terms_of_service:
            info["termsOfService"] = self.settings.terms_of_service
        if self.settings.contact:
            contact = self.settings.contact.model_dump(exclude_none=True)
            if contact:
                info["contact"] = contact
        if self.settings.license:
            info["license"] = self.settings.license.model_dump(exclude_none=True)
        return info
