from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from core.models import SavedBudget, ScheduleTask
from core.services.budget.store import LineItemStore
from core.services.history.service import BudgetHistoryService


logger = logging.getLogger(__name__)


class PersistenceMixin:
    store: LineItemStore
    schedule: List[ScheduleTask]
    payment_terms: str
    client_name: Optional[str]
    default_payment_terms: str
    _history: BudgetHistoryService | None

    def _require_history(self) -> BudgetHistoryService:
        if self._history is None:
            raise BusinessRuleError("No budget history is configured.", code="HISTORY_MISSING")
        return self._history

    def list_saved_budgets(self) -> List[SavedBudget]:
        return self._require_history().list_budgets()

    def save_budget(self, client_name: str, today: Optional[date] = None) -> SavedBudget:
        history = self._require_history()
        if not len(self.store):
            raise ValidationError("Add items to the budget before saving.", code="NO_ITEMS")
        if not (client_name or "").strip():
            raise ValidationError("Client name is required.", code="CLIENT_NAME_REQUIRED")

        schedule = self.ensure_schedule(today=today)
        budget = SavedBudget.create(
            client_name=client_name,
            items=self.store.items(),
            schedule=schedule,
            payment_terms=self.payment_terms,
        )
        history.save_budget(budget)
        self.client_name = budget.client_name
        return budget

    def load_budget(self, budget_id: str, today: Optional[date] = None) -> SavedBudget:
        budget = self._require_history().get_budget(budget_id)
        if budget is None:
            raise NotFoundError("Saved budget not found.", code="BUDGET_NOT_FOUND")

        self.store.replace_all(budget.items)
        self.payment_terms = budget.payment_terms or self.default_payment_terms
        self.client_name = budget.client_name
        if budget.schedule:
            self._set_schedule(budget.schedule)
        else:
            self.regenerate_schedule(today=today)
        logger.info("Loaded budget %s (%d items)", budget.id, len(budget.items))
        return budget

    def delete_saved_budget(self, budget_id: str) -> None:
        self._require_history().delete_budget(budget_id)


__all__ = ["PersistenceMixin"]
