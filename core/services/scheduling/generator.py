from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import Iterable, List, Optional

from core.interfaces import ReferenceCatalog
from core.models import LineItem, ScheduleStatus, ScheduleTask, category_rank
from core.services.scheduling.benchmarks import HOURS_PER_WORKDAY, benchmark_for, is_hour_unit


logger = logging.getLogger(__name__)

REST_DAYS_BETWEEN_TASKS = 1


class ScheduleGenerator:
    """
    Waterfall schedule builder:
    - items ordered by construction phase (unknown phases last, insertion order kept)
    - one task per item, strictly sequential
    - one rest day between a task's end and the next task's start
    - plain calendar days, weekends included
    """

    def __init__(self, catalog: ReferenceCatalog | None = None):
        self._catalog: ReferenceCatalog | None = catalog

    def generate(self, items: Iterable[LineItem], today: Optional[date] = None) -> List[ScheduleTask]:
        ordered = sorted(items, key=lambda item: category_rank(item.category))
        cursor = today or date.today()

        tasks: List[ScheduleTask] = []
        for item in ordered:
            duration = self.estimate_duration(item)
            end = cursor + timedelta(days=duration)
            tasks.append(
                ScheduleTask.for_item(
                    item.id,
                    description=item.description,
                    category=item.category,
                    start_date=cursor,
                    end_date=end,
                    duration_days=duration,
                    status=ScheduleStatus.PLANNED,
                )
            )
            cursor = end + timedelta(days=REST_DAYS_BETWEEN_TASKS)

        logger.info("Generated schedule with %d tasks", len(tasks))
        return tasks

    def resolve_productivity(self, item: LineItem) -> float:
        productivity = item.daily_productivity
        if not productivity and self._catalog is not None:
            entry = self._catalog.lookup_by_description(item.description)
            if entry is not None:
                productivity = entry.daily_productivity
        if not productivity:
            productivity = benchmark_for(item.category)
        return productivity

    def estimate_duration(self, item: LineItem) -> int:
        quantity = max(0.0, float(item.quantity or 0))
        if is_hour_unit(item.unit):
            days = math.ceil(quantity / HOURS_PER_WORKDAY)
        else:
            days = math.ceil(quantity / self.resolve_productivity(item))
        return max(1, days)


__all__ = ["ScheduleGenerator", "REST_DAYS_BETWEEN_TASKS"]
