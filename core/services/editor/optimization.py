from __future__ import annotations

import logging
from typing import Iterable, List

from core.exceptions import ValidationError
from core.models import LineItem, OptimizationStrategy
from core.services.budget.store import LineItemStore
from core.services.optimization.engine import OptimizationEngine
from core.services.optimization.models import OptimizationPlan


logger = logging.getLogger(__name__)


class OptimizationMixin:
    store: LineItemStore
    _optimizer: OptimizationEngine

    def scan_optimizations(self) -> OptimizationPlan:
        if not len(self.store):
            raise ValidationError("There are no items to optimize.", code="NO_ITEMS")
        return self._optimizer.scan(self.store.items())

    def apply_optimizations(self, strategies: Iterable[OptimizationStrategy]) -> List[LineItem]:
        if not len(self.store):
            raise ValidationError("There are no items to optimize.", code="NO_ITEMS")
        before = self.store.grand_total()
        items = self._optimizer.apply(self.store.items(), strategies)
        self.store.replace_all(items)
        logger.info("Optimization moved grand total from %.2f to %.2f", before, self.store.grand_total())
        return items


__all__ = ["OptimizationMixin"]
