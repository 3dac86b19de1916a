from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List

from core.domain.budget import LineItem
from core.domain.enums import BudgetStatus
from core.domain.identifiers import generate_id
from core.domain.schedule import ScheduleTask


DEFAULT_PAYMENT_TERMS = """F O R M A   D E   P A G A M E N T O:
Pagamento via PIX, 70% no início e 30% no final, ou valor integral com 4% de desconto, \
ou em até 12x no cartão de crédito (com acréscimo da máquina), ou medições semanais \
de acordo com o avanço da obra, conforme o cronograma de acompanhamento."""


@dataclass
class SavedBudget:
    id: str
    client_name: str
    total_value: float
    created_on: date
    status: BudgetStatus = BudgetStatus.DRAFT
    payment_terms: str = ""
    items: List[LineItem] = field(default_factory=list)
    schedule: List[ScheduleTask] = field(default_factory=list)

    @staticmethod
    def create(
        client_name: str,
        items: List[LineItem],
        schedule: List[ScheduleTask],
        payment_terms: str = "",
    ) -> "SavedBudget":
        return SavedBudget(
            id=generate_id(),
            client_name=client_name.strip(),
            total_value=sum(item.total for item in items),
            created_on=date.today(),
            payment_terms=payment_terms,
            items=list(items),
            schedule=list(schedule),
        )


__all__ = ["SavedBudget", "DEFAULT_PAYMENT_TERMS"]
