from __future__ import annotations

from enum import Enum


class PriceSource(str, Enum):
    REFERENCE_A = "REFERENCE_A"  # public reference table
    REFERENCE_B = "REFERENCE_B"  # local market survey
    ESTIMATED = "ESTIMATED"


class ItemKind(str, Enum):
    MATERIAL = "MATERIAL"
    LABOR = "LABOR"
    LUMP_SUM = "LUMP_SUM"


class ScheduleStatus(str, Enum):
    PLANNED = "PLANNED"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    DELAYED = "DELAYED"


class StrategyKind(str, Enum):
    MATERIAL_SWAP = "MATERIAL_SWAP"
    LABOR_DISCOUNT = "LABOR_DISCOUNT"
    ROUNDING = "ROUNDING"


class BudgetStatus(str, Enum):
    DRAFT = "DRAFT"
    SENT = "SENT"
    APPROVED = "APPROVED"


REFERENCE_SOURCES = (PriceSource.REFERENCE_A, PriceSource.REFERENCE_B)


__all__ = [
    "PriceSource",
    "ItemKind",
    "ScheduleStatus",
    "StrategyKind",
    "BudgetStatus",
    "REFERENCE_SOURCES",
]
