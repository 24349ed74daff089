"""Pack-size arithmetic: choose the packs that fulfil an order."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "Pack",
    "PackError",
    "InvalidOrderAmountError",
    "NoPackSizesError",
    "InsufficientPackSizesError",
    "calculate_packs",
]


@dataclass(frozen=True)
class Pack:
    """A pack that holds a fixed number of items."""

    size: int


class PackError(ValueError):
    """Base class for errors raised while calculating packs."""


class InvalidOrderAmountError(PackError):
    """The order amount is negative."""

    def __init__(self, message: str = "order amount cannot be negative") -> None:
        super().__init__(message)


class NoPackSizesError(PackError):
    """No usable pack sizes were given."""

    def __init__(self, message: str = "no pack sizes provided") -> None:
        super().__init__(message)


class InsufficientPackSizesError(PackError):
    """The pack sizes cannot fulfil the order."""

    def __init__(self, message: str = "pack sizes insufficient to fulfill order") -> None:
        super().__init__(message)


_UNREACHABLE = -1


def calculate_packs(pack_sizes: Iterable[int], order_amount: int) -> tuple[dict[int, int], int]:
    """Return the packs (size -> count) and the total items shipped for an order.

    The smallest reachable total not below the order amount is chosen, and for
    that total the fewest packs. Ties between equally small pack counts go to
    the larger pack sizes.
    """
    if order_amount < 0:
        raise InvalidOrderAmountError()
    sizes = sorted(pack_sizes, reverse=True)
    if not sizes:
        raise NoPackSizesError()
    sizes = [size for size in sizes if size > 0]
    if not sizes:
        raise NoPackSizesError()

    max_amount = order_amount + sizes[0]
    min_packs = [_UNREACHABLE] * (max_amount + 1)
    last_size = [0] * (max_amount + 1)
    min_packs[0] = 0

    for amount in range(1, max_amount + 1):
        best = _UNREACHABLE
        best_size = 0
        for size in sizes:
            if size > amount:
                continue
            previous = min_packs[amount - size]
            if previous == _UNREACHABLE:
                continue
            if best == _UNREACHABLE or previous + 1 < best:
                best = previous + 1
                best_size = size
        min_packs[amount] = best
        last_size[amount] = best_size

    total = next(
        (amount for amount in range(order_amount, max_amount + 1) if min_packs[amount] != _UNREACHABLE),
        None,
    )
    if total is None:
        raise InsufficientPackSizesError()

    packs: Counter[int] = Counter()
    remaining = total
    while remaining > 0:
        size = last_size[remaining]
        packs[size] += 1
        remaining -= size
    return dict(packs), total