"""Stored debt payoff plan (one per user)."""

from __future__ import annotations

from datetime import date
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class DebtPayoffPlan(SQLModel, table=True):
    """Target date, optional extra payment and the starting-debt snapshot."""

    __tablename__: ClassVar[str] = "debt_payoff_plan"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=128, unique=True, index=True)
    target_date: date = Field(nullable=False)
    monthly_extra_cents: Optional[int] = Field(default=None)
    started_total_debt_cents: int = Field(default=0, nullable=False)
