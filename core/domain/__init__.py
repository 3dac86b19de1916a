from core.domain.budget import LineItem
from core.domain.catalog import ReferenceEntry
from core.domain.categories import (
    CATEGORY_RANK,
    CONSTRUCTION_CATEGORIES,
    OTHER_CATEGORY,
    category_rank,
    normalize_category,
)
from core.domain.enums import (
    REFERENCE_SOURCES,
    BudgetStatus,
    ItemKind,
    PriceSource,
    ScheduleStatus,
    StrategyKind,
)
from core.domain.identifiers import generate_id, swap_strategy_id, task_id_for
from core.domain.optimization import OptimizationStrategy
from core.domain.saved_budget import DEFAULT_PAYMENT_TERMS, SavedBudget
from core.domain.schedule import ALL_TASKS_TARGET, ScheduleTask

__all__ = [
    "generate_id",
    "task_id_for",
    "swap_strategy_id",
    "PriceSource",
    "ItemKind",
    "ScheduleStatus",
    "StrategyKind",
    "BudgetStatus",
    "REFERENCE_SOURCES",
    "CONSTRUCTION_CATEGORIES",
    "CATEGORY_RANK",
    "OTHER_CATEGORY",
    "category_rank",
    "normalize_category",
    "LineItem",
    "ReferenceEntry",
    "ScheduleTask",
    "ALL_TASKS_TARGET",
    "OptimizationStrategy",
    "SavedBudget",
    "DEFAULT_PAYMENT_TERMS",
]
