"""Storage for the configured pack sizes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

__all__ = ["PackRepository", "InMemoryPackRepository"]


class PackRepository(ABC):
    """Where the current pack sizes are kept."""

    @abstractmethod
    def get_pack_sizes(self) -> list[int]:
        """Return the current pack sizes."""

    @abstractmethod
    def update_pack_sizes(self, new_sizes: Iterable[int]) -> None:
        """Replace the current pack sizes."""


class InMemoryPackRepository(PackRepository):
    """Pack sizes held in process memory."""

    def __init__(self, default_sizes: Iterable[int]) -> None:
        self._pack_sizes = list(default_sizes)

    def get_pack_sizes(self) -> list[int]:
        return list(self._pack_sizes)

    def update_pack_sizes(self, new_sizes: Iterable[int]) -> None:
        self._pack_sizes = list(new_sizes)