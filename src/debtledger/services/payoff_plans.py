"""Payoff plan operations backed by the account and plan repositories."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..domain.repositories import AccountRepository, PayoffPlanRepository
from ..logging_config import get_logger
from ..models.account import Account
from ..models.plan import DebtPayoffPlan
from .debts import DebtEntry, sort_by_avalanche
from .projection import PayoffPlan, ProjectionReport, build_report

logger = get_logger("services.payoff_plans")


def to_debt_entry(account: Account) -> DebtEntry:
    """Map a stored liability account onto the engine's input type."""

    return DebtEntry(
        id=account.id,
        name=account.name,
        account_type=account.account_type,
        balance_cents=account.current_balance_cents,
        interest_rate=account.interest_rate,
        minimum_payment_cents=account.minimum_payment_cents,
        next_payment_due_date=account.next_payment_due_date,
    )


def to_payoff_plan(plan: DebtPayoffPlan | None) -> Optional[PayoffPlan]:
    if plan is None:
        return None
    return PayoffPlan(
        target_date=plan.target_date,
        monthly_extra_cents=plan.monthly_extra_cents,
        started_total_debt_cents=plan.started_total_debt_cents,
    )


def _debt_entries(accounts: AccountRepository, user_id: str) -> list[DebtEntry]:
    return [to_debt_entry(a) for a in accounts.list_liabilities(user_id=user_id)]


def get_debt_payoff_order(accounts: AccountRepository, user_id: str) -> list[DebtEntry]:
    """Liabilities with a balance, highest APR first."""

    return sort_by_avalanche(_debt_entries(accounts, user_id))


def get_plan(plans: PayoffPlanRepository, user_id: str) -> Optional[PayoffPlan]:
    """Return the user's stored plan, or None."""

    return to_payoff_plan(plans.get_for_user(user_id=user_id))


def set_plan(
    accounts: AccountRepository,
    plans: PayoffPlanRepository,
    user_id: str,
    *,
    target_date: date,
    monthly_extra_cents: int | None = None,
    started_total_debt_cents: int | None = None,
) -> PayoffPlan:
    """Create or update the user's plan.

    The starting-debt snapshot is taken from the explicit argument, then the
    existing plan, then the current total of all liability balances. An
    omitted extra payment keeps whatever the existing plan had.
    """

    existing = plans.get_for_user(user_id=user_id)

    if started_total_debt_cents is not None:
        started = started_total_debt_cents
    elif existing is not None:
        started = existing.started_total_debt_cents
    else:
        started = accounts.get_total_debt(user_id=user_id)

    if monthly_extra_cents is None and existing is not None:
        monthly_extra_cents = existing.monthly_extra_cents

    stored = plans.save(
        DebtPayoffPlan(
            user_id=user_id,
            target_date=target_date,
            monthly_extra_cents=monthly_extra_cents,
            started_total_debt_cents=started,
        ),
        user_id=user_id,
    )
    logger.info(
        "Payoff plan %s",
        "updated" if existing is not None else "created",
        extra={
            "user_id": user_id,
            "target_date": target_date.isoformat(),
            "started_total_debt_cents": started,
        },
    )
    return to_payoff_plan(stored)  # type: ignore[return-value]


def get_debt_payoff_projection(
    accounts: AccountRepository,
    plans: PayoffPlanRepository,
    user_id: str,
    *,
    today: date | None = None,
) -> ProjectionReport:
    """Build the projection report from the user's current accounts and plan."""

    report = build_report(
        _debt_entries(accounts, user_id),
        get_plan(plans, user_id),
        today=today,
    )
    if report.target_date is not None and report.total_debt_now_cents > 0:
        if report.minimum_extra_to_hit_target_cents is None:
            logger.info(
                "Target date unreachable",
                extra={"user_id": user_id, "target_date": report.target_date.isoformat()},
            )
    return report


def summarize_orders(debts: Iterable[DebtEntry]) -> list[dict]:
    return [debt.to_dict() for debt in debts]


__all__ = [
    "get_debt_payoff_order",
    "get_debt_payoff_projection",
    "get_plan",
    "set_plan",
    "summarize_orders",
    "to_debt_entry",
    "to_payoff_plan",
]
