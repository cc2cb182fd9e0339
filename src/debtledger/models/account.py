"""Account entities consumed by the payoff engine."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

LIABILITY_TYPES = ("credit", "loan")


class Account(SQLModel, table=True):
    """Financial account owned by a user.

    ``account_type`` is one of checking, savings, credit, loan or investment;
    only credit and loan accounts carry debt.
    """

    __tablename__: ClassVar[str] = "account"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=128, index=True)
    name: str = Field(nullable=False, max_length=128)
    account_type: str = Field(nullable=False, max_length=16, index=True)
    current_balance_cents: int = Field(default=0, nullable=False)
    # APR as a fraction (0.18 == 18%); None when the issuer never reported it
    interest_rate: Optional[float] = Field(default=None)
    minimum_payment_cents: Optional[int] = Field(default=None)
    next_payment_due_date: Optional[str] = Field(default=None, max_length=10)
