"""Debt payoff plan repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.plan import DebtPayoffPlan


class PayoffPlanRepository(Protocol):
    """Repository for the single payoff plan each user may hold."""

    def get_for_user(self, *, user_id: str) -> Optional[DebtPayoffPlan]:
        """Return the user's plan, if one was ever set."""
        ...

    def save(self, plan: DebtPayoffPlan, *, user_id: str) -> DebtPayoffPlan:
        """Insert or update the user's plan."""
        ...
