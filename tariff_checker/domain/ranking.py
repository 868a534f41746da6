"""Generic ranking and delta pass shared by every comparator."""
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Callable, Iterable, TypeVar

from .money import round2

R = TypeVar("R")


def rank_results(
    results: Iterable[R],
    key: Callable[[R], Decimal],
    cheapest_key: Callable[[R], Decimal] | None = None,
) -> tuple[R, ...]:
    """Sort ascending by ``key`` and mark exactly one entry as cheapest.

    ``cheapest_key`` picks the cheapest entry and anchors every
    ``difference_from_cheapest``; it defaults to ``key``. On ties the
    earliest entry in ranked order wins. An empty input gives an empty tuple.
    """
    ordered = sorted(results, key=key)
    if not ordered:
        return ()
    anchor = cheapest_key or key
    cheapest_index = min(range(len(ordered)), key=lambda idx: anchor(ordered[idx]))
    base = anchor(ordered[cheapest_index])
    return tuple(
        replace(
            item,
            is_cheapest=idx == cheapest_index,
            difference_from_cheapest=round2(anchor(item) - base),
        )
        for idx, item in enumerate(ordered)
    )
