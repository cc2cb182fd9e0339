"""SQLModel implementation of the payoff plan repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.plan import DebtPayoffPlan


class SQLModelPayoffPlanRepository:
    """Stores at most one ``DebtPayoffPlan`` row per user."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_for_user(self, *, user_id: str) -> Optional[DebtPayoffPlan]:
        with self.session_factory() as session:
            return session.exec(
                select(DebtPayoffPlan).where(DebtPayoffPlan.user_id == user_id)
            ).first()

    def save(self, plan: DebtPayoffPlan, *, user_id: str) -> DebtPayoffPlan:
        with self.session_factory() as session:
            existing = session.exec(
                select(DebtPayoffPlan).where(DebtPayoffPlan.user_id == user_id)
            ).first()
            if existing:
                existing.target_date = plan.target_date
                existing.monthly_extra_cents = plan.monthly_extra_cents
                existing.started_total_debt_cents = plan.started_total_debt_cents
                plan = existing
            else:
                plan.user_id = user_id
                session.add(plan)
            session.commit()
            session.refresh(plan)
            return plan


__all__ = ["SQLModelPayoffPlanRepository"]
