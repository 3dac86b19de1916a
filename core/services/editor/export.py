from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List, Optional

from core.exceptions import ValidationError
from core.models import ScheduleTask
from core.reporting.api import export_budget_pdf
from core.reporting.contexts import BudgetReportContext, CompanyProfile
from core.services.budget.store import LineItemStore


class ExportMixin:
    store: LineItemStore
    schedule: List[ScheduleTask]
    payment_terms: str
    client_name: Optional[str]
    company: CompanyProfile

    def build_report_context(
        self,
        *,
        client_name: Optional[str] = None,
        logo_path: str | Path | None = None,
        qr_code_path: str | Path | None = None,
        as_of: Optional[date] = None,
    ) -> BudgetReportContext:
        if not len(self.store):
            raise ValidationError("There are no items to export.", code="NO_ITEMS")
        return BudgetReportContext(
            items=self.store.items(),
            schedule=list(self.schedule),
            payment_terms=self.payment_terms,
            client_name=client_name or self.client_name,
            company=self.company,
            as_of=as_of or date.today(),
            logo_path=str(logo_path) if logo_path else None,
            qr_code_path=str(qr_code_path) if qr_code_path else None,
        )

    def export_pdf(
        self,
        output_dir: str | Path,
        *,
        client_name: Optional[str] = None,
        logo_path: str | Path | None = None,
        qr_code_path: str | Path | None = None,
        include_gantt: bool = True,
    ) -> Path:
        ctx = self.build_report_context(
            client_name=client_name, logo_path=logo_path, qr_code_path=qr_code_path
        )
        return export_budget_pdf(ctx, output_dir, include_gantt=include_gantt)


__all__ = ["ExportMixin"]
