"""Operation id allocation.

Every method in a document gets a unique, readable operationId. The table is
built in one pass over the snapshot the first time an id is asked for, so the
result does not depend on the order in which renderers ask.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Any

from apidoc.openapi.snapshot import MethodLike, ResourceModelSnapshot

logger = logging.getLogger(__name__)

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")
_WORD_SPLIT = re.compile(r"[^A-Za-z0-9]+")


def _camel_segment(segment: str) -> str:
    words = [word for word in _WORD_SPLIT.split(segment) if word]
    return "".join(word[0].upper() + word[1:] for word in words)


def derive_base_name(method: MethodLike, resource_path: str) -> str:
    """Derive an operation id candidate from the developer name or verb + path.

    GET /users/{id}/roles becomes "getUsersByIdRoles".
    """
    if method.name:
        base = _NON_IDENTIFIER.sub("", method.name)
        if base:
            return base

    parts = [method.http_method.lower()]
    for segment in resource_path.split("/"):
        if not segment:
            continue
        if segment.startswith("{") and segment.endswith("}"):
            # Path templates may carry a regex: {id: [0-9]+}
            param = segment[1:-1].split(":", 1)[0]
            parts.append("By" + _camel_segment(param))
        else:
            parts.append(_camel_segment(segment))
    return "".join(parts)


class OperationIdAllocator:
    """Allocates unique operation ids for the methods of one snapshot.

    One allocator belongs to one generation run.
    """

    def __init__(self, snapshot: ResourceModelSnapshot) -> None:
        self._snapshot = snapshot
        self._lock = threading.Lock()
        self._ids: dict[int, str] | None = None

    def operation_id(self, method: Any) -> str:
        """Return the operation id of a method obtained from the snapshot."""
        with self._lock:
            if self._ids is None:
                self._ids = self._assign()
            ids = self._ids

        operation_id = ids.get(id(method))
        if operation_id is None:
            # Raises OrphanMethodError for methods foreign to the snapshot
            self._snapshot.find_owning_resource(method)
            msg = f"No operation id was allocated for {method!r}"
            raise RuntimeError(msg)
        return operation_id

    def _assign(self) -> dict[int, str]:
        ids: dict[int, str] = {}
        used: set[str] = set()

        for method in self._snapshot.stream_methods():
            if id(method) in ids:
                continue
            resource = self._snapshot.find_owning_resource(method)
            base = derive_base_name(method, resource.path)

            candidate = base
            suffix = 1
            while candidate in used:
                candidate = f"{base}_{suffix}"
                suffix += 1
            if candidate != base:
                logger.debug(
                    "Operation id '%s' already taken; using '%s' for %s %s",
                    base,
                    candidate,
                    method.http_method,
                    resource.path,
                )

            used.add(candidate)
            ids[id(method)] = candidate

        return ids
