"""Avalanche payoff simulation and target-date solver.

Everything here is a pure function of its arguments: balances are copied into
a private working set, nothing is persisted, and ``today`` can be injected so
projections are reproducible. Money is integer cents; APRs are fractions.
"""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Optional

MAX_PROJECTION_MONTHS = 600
SOLVER_ITERATIONS = 30
SOLVER_MIN_CEILING_CENTS = 5_000_000  # $50,000


@dataclass(slots=True)
class DebtEntry:
    """Represents a liability input for payoff projections."""

    id: Any
    name: str
    account_type: str
    balance_cents: int
    interest_rate: Optional[float] = None
    minimum_payment_cents: Optional[int] = None
    next_payment_due_date: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.account_type,
            "currentBalance": self.balance_cents,
            "interestRate": self.interest_rate,
            "minimumPayment": self.minimum_payment_cents,
            "nextPaymentDueDate": self.next_payment_due_date,
        }


@dataclass(slots=True)
class SimulationResult:
    """Outcome of one avalanche simulation run."""

    projected_payoff_date: date
    on_track: bool
    total_interest_cents: int
    months_to_payoff: int

    def to_dict(self) -> dict:
        return {
            "projectedPayoffDate": self.projected_payoff_date.isoformat(),
            "onTrack": self.on_track,
            "totalInterestCents": self.total_interest_cents,
            "monthsToPayoff": self.months_to_payoff,
        }


@dataclass(slots=True)
class _SimDebt:
    balance: int
    apr: Decimal
    minimum: int


def add_months(value: date, months: int) -> date:
    """Shift ``value`` by whole calendar months, clamping to the month's last day."""

    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def monthly_interest(balance_cents: int, apr: Decimal) -> int:
    """One month of simple interest, rounded half-up to the cent."""

    interest = Decimal(balance_cents) * apr / Decimal(12)
    # to_integral_value, unlike quantize, never signals on runaway balances
    return int(interest.to_integral_value(rounding=ROUND_HALF_UP))


def sort_by_avalanche(debts: Iterable[DebtEntry]) -> list[DebtEntry]:
    """Return debts with a balance, highest APR first and unknown APRs last.

    ``sorted`` is stable, so ties and the unknown-rate tail keep input order.
    """

    active = [d for d in debts if d.balance_cents > 0]
    return sorted(
        active,
        key=lambda d: (d.interest_rate is None, -(d.interest_rate or 0.0)),
    )


def total_balance(debts: Iterable[DebtEntry]) -> int:
    """Sum of positive balances in cents."""

    return sum(d.balance_cents for d in debts if d.balance_cents > 0)


def total_minimums(debts: Iterable[DebtEntry]) -> int:
    """Sum of minimum payments for debts that still carry a balance."""

    return sum(d.minimum_payment_cents or 0 for d in debts if d.balance_cents > 0)


def simulate_avalanche(
    debts: Iterable[DebtEntry],
    extra_monthly_cents: int,
    target_date: date,
    *,
    today: date | None = None,
    max_months: int = MAX_PROJECTION_MONTHS,
) -> SimulationResult:
    """Project the debt-free date when ``extra_monthly_cents`` is paid on top of minimums.

    Each month interest accrues on every open balance, then every minimum is
    paid, then the extra pool is poured into debts in avalanche order. A debt
    whose interest outruns its minimum keeps growing until the extra reaches
    it; when nothing converges the run stops at ``max_months`` and reports
    the portfolio as off track.
    """

    start = today or date.today()
    # Mutable working copies in avalanche order; the order is fixed for the run.
    sim = [
        _SimDebt(
            balance=d.balance_cents,
            apr=Decimal(str(d.interest_rate or 0)),
            minimum=d.minimum_payment_cents or 0,
        )
        for d in sort_by_avalanche(debts)
    ]

    if not sim:
        return SimulationResult(
            projected_payoff_date=start,
            on_track=True,
            total_interest_cents=0,
            months_to_payoff=0,
        )

    total_interest = 0
    for month in range(max_months):
        for debt in sim:
            if debt.balance <= 0:
                continue
            interest = monthly_interest(debt.balance, debt.apr)
            debt.balance += interest
            total_interest += interest

        for debt in sim:
            if debt.balance <= 0:
                continue
            debt.balance -= min(debt.balance, debt.minimum)

        extra_pool = extra_monthly_cents
        for debt in sim:
            if debt.balance <= 0 or extra_pool <= 0:
                continue
            payment = min(debt.balance, extra_pool)
            debt.balance -= payment
            extra_pool -= payment

        if sum(max(0, debt.balance) for debt in sim) <= 0:
            payoff_date = add_months(start, month + 1)
            return SimulationResult(
                projected_payoff_date=payoff_date,
                on_track=payoff_date <= target_date,
                total_interest_cents=total_interest,
                months_to_payoff=month + 1,
            )

    return SimulationResult(
        projected_payoff_date=add_months(start, max_months),
        on_track=False,
        total_interest_cents=total_interest,
        months_to_payoff=max_months,
    )


def solve_minimum_extra(
    debts: Iterable[DebtEntry],
    target_date: date | None,
    *,
    today: date | None = None,
) -> Optional[int]:
    """Smallest extra monthly payment (cents) that pays everything off by ``target_date``.

    Returns ``None`` when there is no target, no debt, or the target cannot
    be reached even at the top of the search range. Relies on the payoff date
    never moving later as the extra payment grows.
    """

    if target_date is None:
        return None
    debt_list = [d for d in debts if d.balance_cents > 0]
    if not debt_list:
        return None

    start = today or date.today()
    low = 0
    high = max(total_balance(debt_list), SOLVER_MIN_CEILING_CENTS)
    best: Optional[int] = None
    for _ in range(SOLVER_ITERATIONS):
        if low > high:
            break
        mid = (low + high) // 2
        if simulate_avalanche(debt_list, mid, target_date, today=start).on_track:
            best = mid
            high = mid
            if low == high:
                break
        else:
            low = mid + 1
    return best


__all__ = [
    "MAX_PROJECTION_MONTHS",
    "SOLVER_ITERATIONS",
    "SOLVER_MIN_CEILING_CENTS",
    "DebtEntry",
    "SimulationResult",
    "add_months",
    "monthly_interest",
    "simulate_avalanche",
    "solve_minimum_extra",
    "sort_by_avalanche",
    "total_balance",
    "total_minimums",
]
