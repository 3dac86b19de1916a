from __future__ import annotations

from typing import List, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from core.interfaces import BudgetRepository
from core.models import SavedBudget
from infra.db.budget.mapper import budget_from_orm, budget_to_orm
from infra.db.models import SavedBudgetItemORM, SavedBudgetORM, SavedBudgetTaskORM


class SqlAlchemyBudgetRepository(BudgetRepository):
    """The saved budget list, rewritten in full on every save."""

    def __init__(self, session: Session):
        self.session = session

    def load_budget_list(self) -> List[SavedBudget]:
        stmt = select(SavedBudgetORM).order_by(SavedBudgetORM.position)
        rows = self.session.execute(stmt).scalars().all()
        return [budget_from_orm(row) for row in rows]

    def save_budget_list(self, budgets: Sequence[SavedBudget]) -> None:
        self.session.execute(delete(SavedBudgetTaskORM))
        self.session.execute(delete(SavedBudgetItemORM))
        self.session.execute(delete(SavedBudgetORM))
        self.session.expunge_all()
        self.session.add_all([budget_to_orm(budget, i) for i, budget in enumerate(budgets)])
        self.session.flush()


__all__ = ["SqlAlchemyBudgetRepository"]
