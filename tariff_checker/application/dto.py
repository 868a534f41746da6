"""Application-level DTOs for tariff comparison."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Sequence


@dataclass(slots=True, frozen=True)
class ComparisonResponse:
    domain: str
    request: Any
    results: Sequence[Any]
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def cheapest(self) -> Any | None:
        return next((r for r in self.results if r.is_cheapest), None)

    def is_empty(self) -> bool:
        return not self.results
