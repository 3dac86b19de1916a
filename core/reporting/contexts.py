from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from core.models import LineItem, ScheduleTask


@dataclass(frozen=True)
class CompanyProfile:
    name: str = "Construtora"
    subtitle: str = "Projetos e Construções"
    footer: str = ""


@dataclass
class BudgetReportContext:
    items: List[LineItem]
    schedule: List[ScheduleTask]
    payment_terms: str
    client_name: Optional[str]
    company: CompanyProfile
    as_of: date
    logo_path: Optional[str] = None
    qr_code_path: Optional[str] = None
    gantt_png_path: Optional[str] = None

    @property
    def total_amount(self) -> float:
        return sum(item.total for item in self.items)


@dataclass
class CategoryGroup:
    category: str
    items: List[LineItem] = field(default_factory=list)

    @property
    def subtotal(self) -> float:
        return sum(item.total for item in self.items)
