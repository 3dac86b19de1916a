from infra.db.budget.repository import SqlAlchemyBudgetRepository

__all__ = ["SqlAlchemyBudgetRepository"]
