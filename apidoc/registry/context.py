"""Registration context handed to the API registry.

Carries the facet filter that decides which methods are visible and the
doc tag handler used to turn inline documentation tags into plain text.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import re

_INLINE_TAG = re.compile(r"\{@(\w+)\s*([^}]*)\}")


@dataclass(frozen=True)
class FacetFilter:
    """Include/exclude filter over facet names.

    An explicitly included facet wins over an excluded one. When includes are
    given, elements without any included facet are rejected.
    """

    includes: frozenset[str] = field(default_factory=frozenset)
    excludes: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def create(cls, includes: Iterable[str] = (), excludes: Iterable[str] = ()) -> FacetFilter:
        return cls(includes=frozenset(includes), excludes=frozenset(excludes))

    @property
    def has_filter(self) -> bool:
        return bool(self.includes or self.excludes)

    def accept(self, facets: Iterable[str]) -> bool:
        if not self.has_filter:
            return True
        names = set(facets)
        if names & self.includes:
            return True
        if names & self.excludes:
            return False
        return not self.includes


class DocTagHandler:
    """Replace inline doc tags such as {@link User} or {@code id} with plain text."""

    def handle(self, text: str | None) -> str:
        if not text:
            return ""
        return _INLINE_TAG.sub(self._replace, text).strip()

    @staticmethod
    def _replace(match: re.Match[str]) -> str:
        tag, content = match.group(1), match.group(2).strip()
        if tag in ("link", "linkplain"):
            target, _, label = content.partition(" ")
            if label.strip():
                return label.strip()
            # "User#getName" reads better as "User.getName"
            return target.lstrip("#").replace("#", ".")
        return content


@dataclass(frozen=True)
class RegistrationContext:
    """What the registry needs to know to hand out a filtered resource model."""

    facet_filter: FacetFilter = field(default_factory=FacetFilter)
    tag_handler: DocTagHandler = field(default_factory=DocTagHandler)
