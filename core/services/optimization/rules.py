from __future__ import annotations

import re
from typing import List, Sequence

from core.domain.formatting import fmt_brl
from core.models import ItemKind, LineItem, OptimizationStrategy, StrategyKind, swap_strategy_id


PREMIUM_PATTERN = re.compile(r"premium|tipo a|porcelanato", re.IGNORECASE)
STANDARD_LABEL = "Standard"

MATERIAL_SWAP_FACTOR = 0.85
LABOR_DISCOUNT_FACTOR = 0.95
ROUNDING_STEP = 100
ROUNDING_MIN_TOTAL = 500


def is_premium_material(item: LineItem) -> bool:
    return (
        item.kind == ItemKind.MATERIAL
        and not item.optimized
        and PREMIUM_PATTERN.search(item.description or "") is not None
    )


def to_standard_line(description: str) -> str:
    return PREMIUM_PATTERN.sub(STANDARD_LABEL, description)


def material_swap_strategies(items: Sequence[LineItem]) -> List[OptimizationStrategy]:
    return [
        OptimizationStrategy(
            id=swap_strategy_id(item.id),
            kind=StrategyKind.MATERIAL_SWAP,
            title=f"Substituição: {item.description}",
            description="Trocar por linha Standard equivalente com melhor custo-benefício (-15%).",
            savings=item.total * (1 - MATERIAL_SWAP_FACTOR),
            target_ids=(item.id,),
        )
        for item in items
        if is_premium_material(item)
    ]


def labor_discount_strategies(items: Sequence[LineItem]) -> List[OptimizationStrategy]:
    labor = [item for item in items if item.kind == ItemKind.LABOR and not item.optimized]
    if not labor:
        return []
    labor_total = sum(item.total for item in labor)
    return [
        OptimizationStrategy(
            id="labor-bdi",
            kind=StrategyKind.LABOR_DISCOUNT,
            title="Ajuste de BDI (Mão de Obra)",
            description="Redução estratégica de 5% na margem de mão de obra para competitividade.",
            savings=labor_total * (1 - LABOR_DISCOUNT_FACTOR),
            target_ids=tuple(item.id for item in labor),
        )
    ]


def rounding_strategies(items: Sequence[LineItem]) -> List[OptimizationStrategy]:
    grand_total = sum(item.total for item in items)
    # whole cents, so 1537.40 leaves 37.40 and 1599.996 leaves nothing
    remainder = (round(grand_total * 100) % (ROUNDING_STEP * 100)) / 100
    if remainder <= 0 or grand_total <= ROUNDING_MIN_TOTAL:
        return []
    return [
        OptimizationStrategy(
            id="rounding",
            kind=StrategyKind.ROUNDING,
            title="Arredondamento Técnico",
            description=f"Desconto comercial para fechar o valor em {fmt_brl(grand_total - remainder)}.",
            savings=remainder,
        )
    ]


__all__ = [
    "PREMIUM_PATTERN",
    "STANDARD_LABEL",
    "MATERIAL_SWAP_FACTOR",
    "LABOR_DISCOUNT_FACTOR",
    "is_premium_material",
    "to_standard_line",
    "material_swap_strategies",
    "labor_discount_strategies",
    "rounding_strategies",
]
