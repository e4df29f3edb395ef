"""The document's servers section."""

from __future__ import annotations

import logging
from typing import Any

from apidoc.settings import ApidocSettings

logger = logging.getLogger(__name__)


class ServersRenderer:
    """Configured servers, falling back to the application root or the host."""

    def __init__(self, settings: ApidocSettings) -> None:
        self.settings = settings

    def render(self) -> list[dict[str, Any]]:
        if self.settings.servers:
            return [server.model_dump(exclude_none=True) for server in self.settings.servers]

        if self.settings.application_root:
            return [{"url": self.settings.application_root.rstrip("/") or "/"}]

        host = self.settings.resolve_host()
        if host:
            return [{"url": f"http://{host}"}]

        logger.debug("No servers, application root or host configured")
        return []
