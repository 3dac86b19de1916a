from __future__ import annotations

from core.models import (
    BudgetStatus,
    ItemKind,
    LineItem,
    PriceSource,
    SavedBudget,
    ScheduleStatus,
    ScheduleTask,
)
from infra.db.models import SavedBudgetItemORM, SavedBudgetORM, SavedBudgetTaskORM


def _enum_value(value) -> str:
    return value.value if hasattr(value, "value") else str(value)


def item_to_orm(item: LineItem, position: int) -> SavedBudgetItemORM:
    return SavedBudgetItemORM(
        position=position,
        item_id=item.id,
        description=item.description,
        unit=item.unit,
        quantity=item.quantity,
        unit_price=item.unit_price,
        total=item.total,
        source=_enum_value(item.source),
        kind=_enum_value(item.kind),
        category=item.category,
        optimized=item.optimized,
        daily_productivity=item.daily_productivity,
    )


def item_from_orm(obj: SavedBudgetItemORM) -> LineItem:
    return LineItem(
        id=obj.item_id,
        description=obj.description,
        unit=obj.unit,
        quantity=obj.quantity,
        unit_price=obj.unit_price,
        total=obj.total,
        source=PriceSource(obj.source),
        kind=ItemKind(obj.kind),
        category=obj.category,
        optimized=bool(obj.optimized),
        daily_productivity=obj.daily_productivity,
    )


def task_to_orm(task: ScheduleTask, position: int) -> SavedBudgetTaskORM:
    return SavedBudgetTaskORM(
        position=position,
        task_id=task.id,
        budget_item_id=task.budget_item_id,
        description=task.description,
        category=task.category,
        start_date=task.start_date,
        end_date=task.end_date,
        duration_days=task.duration_days,
        status=_enum_value(task.status),
    )


def task_from_orm(obj: SavedBudgetTaskORM) -> ScheduleTask:
    return ScheduleTask(
        id=obj.task_id,
        budget_item_id=obj.budget_item_id,
        description=obj.description,
        category=obj.category,
        start_date=obj.start_date,
        end_date=obj.end_date,
        duration_days=obj.duration_days,
        status=ScheduleStatus(obj.status),
    )


def budget_to_orm(budget: SavedBudget, position: int) -> SavedBudgetORM:
    return SavedBudgetORM(
        id=budget.id,
        position=position,
        client_name=budget.client_name,
        total_value=budget.total_value,
        created_on=budget.created_on,
        status=_enum_value(budget.status),
        payment_terms=budget.payment_terms,
        items=[item_to_orm(item, i) for i, item in enumerate(budget.items)],
        tasks=[task_to_orm(task, i) for i, task in enumerate(budget.schedule)],
    )


def budget_from_orm(obj: SavedBudgetORM) -> SavedBudget:
    return SavedBudget(
        id=obj.id,
        client_name=obj.client_name,
        total_value=obj.total_value,
        created_on=obj.created_on,
        status=BudgetStatus(obj.status),
        payment_terms=obj.payment_terms or "",
        items=[item_from_orm(row) for row in obj.items],
        schedule=[task_from_orm(row) for row in obj.tasks],
    )


__all__ = [
    "item_to_orm",
    "item_from_orm",
    "task_to_orm",
    "task_from_orm",
    "budget_to_orm",
    "budget_from_orm",
]
