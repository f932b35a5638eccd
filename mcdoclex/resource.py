"""Minecraft resource identifiers and registry references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidResourceIdError


@dataclass(frozen=True)
class ResourceId:
    """A namespaced identifier such as ``minecraft:diamond_sword``."""

    namespace: str
    path: str

    @classmethod
    def parse(cls, text: str, default_namespace: Optional[str] = None) -> "ResourceId":
        """Parse ``namespace:path`` or ``path``.

        A missing namespace becomes ``default_namespace``, or the empty
        string when none is given. More than one colon is an error.
        """
        parts = text.split(":")
        if len(parts) == 2:
            namespace, path = parts
            return cls(namespace, path)
        if len(parts) == 1:
            return cls(default_namespace or "", parts[0])
        raise InvalidResourceIdError(text)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.path}"


@dataclass(frozen=True)
class RegistryDependency:
    """A reference from data to an entry or tag of a registry."""

    registry: str
    identifier: str
    is_tag: bool = False