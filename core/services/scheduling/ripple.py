from __future__ import annotations

import logging
from dataclasses import replace
from datetime import timedelta
from typing import List, Sequence

from core.exceptions import ValidationError
from core.models import ALL_TASKS_TARGET, ScheduleStatus, ScheduleTask
from core.services.scheduling.models import DelayImpact


logger = logging.getLogger(__name__)


class DelayRippleEngine:
    """
    Pushes a reported hold-up downstream.

    The impacted task grows by the delay and is flagged DELAYED; every later
    task keeps its length and moves by the same number of days. Tasks are
    walked in sequence order and never re-sorted. Target ``ALL`` moves the
    whole sequence without extending anything.
    """

    def report_delay(
        self,
        tasks: Sequence[ScheduleTask],
        task_id: str,
        delay_days: int,
        reason: str = "",
    ) -> DelayImpact:
        self._validate_delay(delay_days)
        updated: List[ScheduleTask] = list(tasks)

        if task_id == ALL_TASKS_TARGET:
            return self._shift_all(updated, delay_days, reason)

        index = next((i for i, task in enumerate(updated) if task.id == task_id), None)
        if index is None:
            logger.info("Delay ignored: task %s not in schedule", task_id)
            return DelayImpact(tasks=updated, task_id=task_id, delay_days=delay_days, reason=reason)

        shift = timedelta(days=delay_days)
        impacted = updated[index]
        updated[index] = replace(
            impacted,
            end_date=impacted.end_date + shift,
            duration_days=impacted.duration_days + delay_days,
            status=ScheduleStatus.DELAYED,
        )

        shifted: List[str] = []
        for i in range(index + 1, len(updated)):
            task = updated[i]
            updated[i] = replace(task, start_date=task.start_date + shift, end_date=task.end_date + shift)
            shifted.append(task.id)

        logger.info(
            "Delay of %d days on %s (%s) shifted %d downstream tasks",
            delay_days,
            task_id,
            reason or "no reason given",
            len(shifted),
        )
        return DelayImpact(
            tasks=updated,
            task_id=task_id,
            delay_days=delay_days,
            reason=reason,
            impacted_index=index,
            shifted_task_ids=shifted,
            project_finish=max((t.end_date for t in updated), default=None),
        )

    def _shift_all(self, tasks: List[ScheduleTask], delay_days: int, reason: str) -> DelayImpact:
        if not tasks:
            return DelayImpact(tasks=tasks, task_id=ALL_TASKS_TARGET, delay_days=delay_days, reason=reason)
        shift = timedelta(days=delay_days)
        moved = [replace(t, start_date=t.start_date + shift, end_date=t.end_date + shift) for t in tasks]
        logger.info("Bulk delay of %d days applied to %d tasks", delay_days, len(moved))
        return DelayImpact(
            tasks=moved,
            task_id=ALL_TASKS_TARGET,
            delay_days=delay_days,
            reason=reason,
            impacted_index=0,
            shifted_task_ids=[t.id for t in moved],
            project_finish=max(t.end_date for t in moved),
        )

    @staticmethod
    def _validate_delay(delay_days: int) -> None:
        if isinstance(delay_days, bool) or not isinstance(delay_days, int) or delay_days < 1:
            raise ValidationError(
                "Delay must be a positive whole number of days.", code="DELAY_INVALID"
            )


__all__ = ["DelayRippleEngine"]
