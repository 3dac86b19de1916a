from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.domain.categories import OTHER_CATEGORY
from core.domain.enums import ItemKind, PriceSource
from core.domain.identifiers import generate_id


@dataclass
class LineItem:
    id: str
    description: str
    unit: str
    quantity: float
    unit_price: float
    total: float
    source: PriceSource = PriceSource.ESTIMATED
    kind: ItemKind = ItemKind.LUMP_SUM
    category: str = OTHER_CATEGORY
    optimized: bool = False
    daily_productivity: Optional[float] = None

    @staticmethod
    def create(
        description: str,
        unit: str,
        quantity: float,
        unit_price: float,
        **extra,
    ) -> "LineItem":
        return LineItem(
            id=generate_id(),
            description=description,
            unit=unit,
            quantity=quantity,
            unit_price=unit_price,
            total=quantity * unit_price,
            **extra,
        )


__all__ = ["LineItem"]
