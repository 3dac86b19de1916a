from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Sequence

from core.models import (
    ItemKind,
    LineItem,
    OptimizationStrategy,
    PriceSource,
    StrategyKind,
)
from core.services.optimization.models import OptimizationPlan
from core.services.optimization.rules import (
    LABOR_DISCOUNT_FACTOR,
    MATERIAL_SWAP_FACTOR,
    labor_discount_strategies,
    material_swap_strategies,
    rounding_strategies,
    to_standard_line,
)


logger = logging.getLogger(__name__)

DISCOUNT_DESCRIPTION = "Desconto Comercial (Arredondamento)"
DISCOUNT_CATEGORY = "SERVIÇOS COMPLEMENTARES"


class OptimizationEngine:
    """
    Savings proposals over the current line items.

    ``scan`` never mutates; it is recomputed from scratch on every call so
    there is nothing to invalidate. ``apply`` returns a new item list and
    marks every touched item optimized, which keeps both later scans and the
    price synchronizer away from it.
    """

    def scan(self, items: Sequence[LineItem]) -> OptimizationPlan:
        strategies: List[OptimizationStrategy] = []
        strategies.extend(material_swap_strategies(items))
        strategies.extend(labor_discount_strategies(items))
        strategies.extend(rounding_strategies(items))
        return OptimizationPlan(strategies=strategies, current_total=sum(i.total for i in items))

    def apply(
        self, items: Sequence[LineItem], strategies: Iterable[OptimizationStrategy]
    ) -> List[LineItem]:
        result = list(items)
        applied = 0
        for strategy in strategies:
            if not strategy.selected:
                continue
            applied += 1
            if strategy.kind == StrategyKind.MATERIAL_SWAP:
                result = self._rewrite(result, strategy, MATERIAL_SWAP_FACTOR, swap_description=True)
            elif strategy.kind == StrategyKind.LABOR_DISCOUNT:
                result = self._rewrite(result, strategy, LABOR_DISCOUNT_FACTOR)
            elif strategy.kind == StrategyKind.ROUNDING:
                result.append(self._discount_line(strategy.savings))
        logger.info("Applied %d optimization strategies", applied)
        return result

    @staticmethod
    def _rewrite(
        items: List[LineItem],
        strategy: OptimizationStrategy,
        factor: float,
        swap_description: bool = False,
    ) -> List[LineItem]:
        targets = set(strategy.target_ids)
        rewritten: List[LineItem] = []
        for item in items:
            if item.id not in targets or item.optimized:
                rewritten.append(item)
                continue
            rewritten.append(
                replace(
                    item,
                    description=to_standard_line(item.description) if swap_description else item.description,
                    unit_price=item.unit_price * factor,
                    total=item.total * factor,
                    optimized=True,
                )
            )
        return rewritten

    @staticmethod
    def _discount_line(savings: float) -> LineItem:
        return LineItem.create(
            description=DISCOUNT_DESCRIPTION,
            unit="vb",
            quantity=1,
            unit_price=-savings,
            source=PriceSource.ESTIMATED,
            kind=ItemKind.LUMP_SUM,
            category=DISCOUNT_CATEGORY,
            optimized=True,
        )


__all__ = ["OptimizationEngine", "DISCOUNT_DESCRIPTION"]
