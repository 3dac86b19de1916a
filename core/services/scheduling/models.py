from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from core.models import ScheduleTask


@dataclass
class DelayImpact:
    tasks: List[ScheduleTask]
    task_id: str
    delay_days: int
    reason: str = ""
    impacted_index: Optional[int] = None
    shifted_task_ids: List[str] = field(default_factory=list)
    project_finish: Optional[date] = None

    @property
    def applied(self) -> bool:
        return self.impacted_index is not None

    def summary(self) -> str:
        if not self.applied:
            return "Nenhuma tarefa encontrada para a ocorrência."
        return (
            f'Cronograma atualizado! Ocorrência "{self.reason}" adicionou '
            f"{self.delay_days} dias ao prazo final."
        )


__all__ = ["DelayImpact"]
