from __future__ import annotations

import logging
from typing import Dict, Generic, List, TypeVar

from ..errors import DuplicateRendererError, RendererNotFoundError


T = TypeVar("T")

logger = logging.getLogger(__name__)


class PluginRegistry(Generic[T]):
    def __init__(self, kind: str = "Plugin") -> None:
        self._kind = kind
        self._factories: Dict[str, T] = {}

    def register(self, name: str, factory: T) -> None:
        if name in self._factories:
            raise DuplicateRendererError(f"{self._kind} '{name}' is already registered.")
        self._factories[name] = factory
        logger.debug("Registered %s '%s'", self._kind.lower(), name)

    def get(self, name: str) -> T:
        try:
            return self._factories[name]
        except KeyError as exc:
            available = ", ".join(self.names()) or "none"
            raise RendererNotFoundError(
                f"{self._kind} '{name}' is not registered (available: {available})."
            ) from exc

    def names(self) -> List[str]:
        return sorted(self._factories.keys())
