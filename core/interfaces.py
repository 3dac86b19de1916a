# core/interfaces.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from core.models import LineItem, ReferenceEntry, SavedBudget


@dataclass(frozen=True)
class GenerationConfig:
    price_source_a: bool = True
    price_source_b: bool = True
    include_material: bool = True


class ReferenceCatalog(ABC):
    @abstractmethod
    def lookup_by_description(self, description: str) -> Optional[ReferenceEntry]: ...

    @abstractmethod
    def search_by_text(self, query: str) -> List[ReferenceEntry]: ...

    @abstractmethod
    def list_all(self) -> List[ReferenceEntry]: ...


class GenerationService(ABC):
    @abstractmethod
    def generate(self, description: str, config: GenerationConfig) -> List[LineItem]: ...


class BudgetRepository(ABC):
    @abstractmethod
    def load_budget_list(self) -> List[SavedBudget]: ...

    @abstractmethod
    def save_budget_list(self, budgets: Sequence[SavedBudget]) -> None: ...


__all__ = [
    "GenerationConfig",
    "ReferenceCatalog",
    "GenerationService",
    "BudgetRepository",
]
