from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, PersistenceError, ValidationError
from core.interfaces import BudgetRepository
from core.models import SavedBudget


logger = logging.getLogger(__name__)

_CORRUPTION_ERRORS = (SQLAlchemyError, ValueError, KeyError, TypeError)


class BudgetHistoryService:
    """
    Saved budget list with whole-list overwrite semantics.

    Every save or delete rewrites the full list, so the last write wins.
    A stored list that cannot be read back is treated as empty.
    """

    def __init__(self, session: Session, budget_repo: BudgetRepository):
        self._session: Session = session
        self._budget_repo: BudgetRepository = budget_repo

    def list_budgets(self) -> List[SavedBudget]:
        try:
            return self._budget_repo.load_budget_list()
        except _CORRUPTION_ERRORS:
            self._session.rollback()
            logger.exception("Saved budget list could not be loaded; starting empty")
            return []

    def get_budget(self, budget_id: str) -> Optional[SavedBudget]:
        return next((b for b in self.list_budgets() if b.id == budget_id), None)

    def save_budget(self, budget: SavedBudget) -> SavedBudget:
        if not budget.items:
            raise ValidationError("Add items to the budget before saving.", code="NO_ITEMS")
        if not budget.client_name.strip():
            raise ValidationError("Client name is required.", code="CLIENT_NAME_REQUIRED")

        budgets = [budget] + [b for b in self.list_budgets() if b.id != budget.id]
        self._write(budgets)
        logger.info("Saved budget %s for %s (%.2f)", budget.id, budget.client_name, budget.total_value)
        return budget

    def delete_budget(self, budget_id: str) -> None:
        budgets = self.list_budgets()
        remaining = [b for b in budgets if b.id != budget_id]
        if len(remaining) == len(budgets):
            raise NotFoundError("Saved budget not found.", code="BUDGET_NOT_FOUND")
        self._write(remaining)
        logger.info("Deleted saved budget %s", budget_id)

    def _write(self, budgets: List[SavedBudget]) -> None:
        try:
            self._budget_repo.save_budget_list(budgets)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.error(f"Error saving budget list: {exc}")
            raise PersistenceError("Saved budget list could not be written.", code="SAVE_FAILED") from exc
        domain_events.budgets_changed.emit(len(budgets))


__all__ = ["BudgetHistoryService"]
