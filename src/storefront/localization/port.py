"""Translation resource lookup port."""

from abc import ABC, abstractmethod


class ResourceLookup(ABC):
    @abstractmethod
    def resolve(self, key: str, language: str = "en") -> str:
        """Return the text for ``key``; unknown keys come back unchanged."""
        ...
