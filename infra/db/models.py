# infra/db/models.py
from __future__ import annotations
from datetime import date
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    Date,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from infra.db.base import Base
from core.models import BudgetStatus, ItemKind, PriceSource, ScheduleStatus


class SavedBudgetORM(Base):
    __tablename__ = "saved_budgets"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    client_name: Mapped[str] = mapped_column(String, nullable=False)
    total_value: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    created_on: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default=BudgetStatus.DRAFT.value)
    payment_terms: Mapped[str] = mapped_column(Text, default="")

    items: Mapped[List["SavedBudgetItemORM"]] = relationship(
        back_populates="budget",
        cascade="all, delete-orphan",
        order_by="SavedBudgetItemORM.position",
    )
    tasks: Mapped[List["SavedBudgetTaskORM"]] = relationship(
        back_populates="budget",
        cascade="all, delete-orphan",
        order_by="SavedBudgetTaskORM.position",
    )


class SavedBudgetItemORM(Base):
    __tablename__ = "saved_budget_items"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    budget_id: Mapped[str] = mapped_column(
        String, ForeignKey("saved_budgets.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    item_id: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, nullable=False)
    unit: Mapped[str] = mapped_column(String(16), default="")
    quantity: Mapped[float] = mapped_column(Float, default=0.0)
    unit_price: Mapped[float] = mapped_column(Float, default=0.0)
    total: Mapped[float] = mapped_column(Float, default=0.0)
    source: Mapped[str] = mapped_column(String(16), default=PriceSource.ESTIMATED.value)
    kind: Mapped[str] = mapped_column(String(16), default=ItemKind.LUMP_SUM.value)
    category: Mapped[str] = mapped_column(String, default="")
    optimized: Mapped[bool] = mapped_column(Boolean, default=False)
    daily_productivity: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    budget: Mapped[SavedBudgetORM] = relationship(back_populates="items")

Index("idx_saved_budget_items_budget", SavedBudgetItemORM.budget_id)


class SavedBudgetTaskORM(Base):
    __tablename__ = "saved_budget_tasks"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    budget_id: Mapped[str] = mapped_column(
        String, ForeignKey("saved_budgets.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    task_id: Mapped[str] = mapped_column(String, nullable=False)
    budget_item_id: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    description: Mapped[str] = mapped_column(String, nullable=False)
    category: Mapped[str] = mapped_column(String, default="")
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    duration_days: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    status: Mapped[str] = mapped_column(String(16), default=ScheduleStatus.PLANNED.value)

    budget: Mapped[SavedBudgetORM] = relationship(back_populates="tasks")

Index("idx_saved_budget_tasks_budget", SavedBudgetTaskORM.budget_id)
