from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.domain.enums import ItemKind, PriceSource


@dataclass(frozen=True)
class ReferenceEntry:
    """One record of the reference price table, priced under both sources."""

    id: str
    description: str
    unit: str
    price_a: float
    price_b: float
    kind: ItemKind
    category: str
    daily_productivity: Optional[float] = None

    def price_for(self, source: PriceSource) -> float:
        if source == PriceSource.REFERENCE_B:
            return self.price_b
        return self.price_a


__all__ = ["ReferenceEntry"]
