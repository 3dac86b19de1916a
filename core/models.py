# core/models.py
from __future__ import annotations

from core.domain import (
    ALL_TASKS_TARGET,
    CATEGORY_RANK,
    CONSTRUCTION_CATEGORIES,
    DEFAULT_PAYMENT_TERMS,
    OTHER_CATEGORY,
    REFERENCE_SOURCES,
    BudgetStatus,
    ItemKind,
    LineItem,
    OptimizationStrategy,
    PriceSource,
    ReferenceEntry,
    SavedBudget,
    ScheduleStatus,
    ScheduleTask,
    StrategyKind,
    category_rank,
    generate_id,
    normalize_category,
    swap_strategy_id,
    task_id_for,
)

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
