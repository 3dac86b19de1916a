from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, List, Sequence

from core.exceptions import ValidationError
from core.models import ScheduleStatus, ScheduleTask


_EDITABLE_FIELDS = {"description", "start_date", "end_date", "duration_days", "status"}


class ScheduleEditor:
    def update_task(
        self, tasks: Sequence[ScheduleTask], task_id: str, field: str, value: Any
    ) -> List[ScheduleTask]:
        if field not in _EDITABLE_FIELDS:
            raise ValidationError(f"Schedule field '{field}' cannot be edited.", code="TASK_FIELD_UNKNOWN")
        if field == "status":
            try:
                value = ScheduleStatus(value)
            except ValueError as exc:
                raise ValidationError(f"Unknown task status '{value}'.", code="TASK_STATUS_INVALID") from exc

        updated = list(tasks)
        for i, task in enumerate(updated):
            if task.id != task_id:
                continue
            candidate = replace(task, **{field: value})
            self._validate(candidate)
            updated[i] = candidate
            break
        return updated

    @staticmethod
    def _validate(task: ScheduleTask) -> None:
        if not isinstance(task.start_date, date) or not isinstance(task.end_date, date):
            raise ValidationError("Task dates must be valid dates.", code="TASK_INVALID_DATES")
        if task.end_date < task.start_date:
            raise ValidationError("Task end date cannot be before its start date.", code="TASK_INVALID_DATES")
        if not isinstance(task.duration_days, int) or isinstance(task.duration_days, bool) or task.duration_days < 1:
            raise ValidationError("Task duration must be at least one day.", code="TASK_DURATION_INVALID")


__all__ = ["ScheduleEditor"]
