"""Security schemes and the document-wide security requirement."""

from __future__ import annotations

from typing import Any

from apidoc.settings import SecurityConfig


def requirement(scheme_names: list[str]) -> list[dict[str, list[str]]]:
    """Security requirement objects, one per scheme (any of them suffices)."""
    return [{name: []} for name in scheme_names]


class SecurityRenderer:
    def __init__(self, security: SecurityConfig) -> None:
        self.security = security

    def render(self) -> list[dict[str, list[str]]]:
        """The top-level security requirement."""
        return requirement(self.security.default)

    def render_schemes(self) -> dict[str, Any]:
        """Security schemes for the components section."""
        return {name: dict(scheme) for name, scheme in self.security.schemes.items()}
