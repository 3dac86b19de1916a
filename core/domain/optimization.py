from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from core.domain.enums import StrategyKind


@dataclass
class OptimizationStrategy:
    id: str
    kind: StrategyKind
    title: str
    description: str
    savings: float
    selected: bool = True
    target_ids: Tuple[str, ...] = ()


__all__ = ["OptimizationStrategy"]
