from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from core.models import OptimizationStrategy


@dataclass
class OptimizationPlan:
    strategies: List[OptimizationStrategy] = field(default_factory=list)
    current_total: float = 0.0

    @property
    def total_savings(self) -> float:
        return sum(s.savings for s in self.strategies if s.selected)

    @property
    def projected_total(self) -> float:
        return self.current_total - self.total_savings

    def selected(self) -> List[OptimizationStrategy]:
        return [s for s in self.strategies if s.selected]

    def toggle(self, strategy_id: str) -> None:
        for strategy in self.strategies:
            if strategy.id == strategy_id:
                strategy.selected = not strategy.selected


__all__ = ["OptimizationPlan"]
