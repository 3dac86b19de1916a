from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import ScheduleStatus
from core.domain.identifiers import task_id_for


ALL_TASKS_TARGET = "ALL"


@dataclass
class ScheduleTask:
    id: str
    description: str
    category: str
    start_date: date
    end_date: date
    duration_days: int
    status: ScheduleStatus = ScheduleStatus.PLANNED
    budget_item_id: Optional[str] = None

    @staticmethod
    def for_item(item_id: str, **extra) -> "ScheduleTask":
        return ScheduleTask(id=task_id_for(item_id), budget_item_id=item_id, **extra)


__all__ = ["ScheduleTask", "ALL_TASKS_TARGET"]
