from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Optional

from core.events.domain_events import domain_events
from core.models import ScheduleTask
from core.services.budget.store import LineItemStore
from core.services.scheduling.editing import ScheduleEditor
from core.services.scheduling.generator import ScheduleGenerator
from core.services.scheduling.models import DelayImpact
from core.services.scheduling.ripple import DelayRippleEngine


logger = logging.getLogger(__name__)


class ScheduleMixin:
    store: LineItemStore
    schedule: List[ScheduleTask]
    _schedule_generator: ScheduleGenerator
    _ripple: DelayRippleEngine
    _schedule_editor: ScheduleEditor

    def ensure_schedule(self, today: Optional[date] = None) -> List[ScheduleTask]:
        """Build the schedule from the current items unless one already exists."""
        if not self.schedule:
            self._set_schedule(self._schedule_generator.generate(self.store.items(), today=today))
        return list(self.schedule)

    def regenerate_schedule(self, today: Optional[date] = None) -> List[ScheduleTask]:
        self._set_schedule(self._schedule_generator.generate(self.store.items(), today=today))
        return list(self.schedule)

    def report_delay(self, task_id: str, delay_days: int, reason: str = "") -> DelayImpact:
        impact = self._ripple.report_delay(self.schedule, task_id, delay_days, reason)
        if impact.applied:
            self._set_schedule(impact.tasks)
        return impact

    def update_schedule_task(self, task_id: str, field: str, value: Any) -> List[ScheduleTask]:
        self._set_schedule(self._schedule_editor.update_task(self.schedule, task_id, field, value))
        return list(self.schedule)

    def _set_schedule(self, tasks: List[ScheduleTask]) -> None:
        self.schedule = list(tasks)
        domain_events.schedule_changed.emit(len(self.schedule))


__all__ = ["ScheduleMixin"]
