"""Application service that ties the repository to the pack calculation."""

from __future__ import annotations

from collections.abc import Iterable

from packcalc.domain import calculate_packs
from packcalc.repository import PackRepository

__all__ = ["CalculatePacksService"]


class CalculatePacksService:
    """Calculates packs for orders using the sizes held by a repository."""

    def __init__(self, repo: PackRepository) -> None:
        self._repo = repo

    def execute(self, order_amount: int) -> tuple[dict[int, int], int]:
        """Return the packs and the total items for an order."""
        return calculate_packs(self._repo.get_pack_sizes(), order_amount)

    def update_pack_sizes(self, new_sizes: Iterable[int]) -> None:
        """Replace the pack sizes in the repository."""
        self._repo.update_pack_sizes(new_sizes)

    def get_pack_sizes(self) -> list[int]:
        """Return the current pack sizes."""
        return self._repo.get_pack_sizes()