"""Assemble the payoff projection report shown to users."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, Optional

from .debts import (
    DebtEntry,
    SimulationResult,
    simulate_avalanche,
    solve_minimum_extra,
    sort_by_avalanche,
    total_balance,
    total_minimums,
)

# (id, label, percent) - the 100% rung tracks a zero balance, not progress
MILESTONE_LADDER = (
    ("25", "25% paid off", 25),
    ("50", "50% paid off", 50),
    ("75", "75% paid off", 75),
    ("100", "Debt-free", 100),
)
DEFAULT_HORIZON_DAYS = 365


@dataclass(slots=True)
class PayoffPlan:
    """Plan values as read from the plan store."""

    target_date: Optional[date] = None
    monthly_extra_cents: Optional[int] = None
    started_total_debt_cents: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "targetDate": self.target_date.isoformat() if self.target_date else None,
            "monthlyExtraCents": self.monthly_extra_cents,
            "startedTotalDebtCents": self.started_total_debt_cents,
        }


@dataclass(slots=True)
class Milestone:
    id: str
    label: str
    percent: int
    achieved: bool

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "percent": self.percent,
            "achieved": self.achieved,
        }


@dataclass(slots=True)
class ProjectionReport:
    """Progress, projection and required payments for one user's debts."""

    total_debt_now_cents: int
    started_total_debt_cents: int
    paid_off_cents: int
    paid_off_percent: float
    target_date: Optional[date]
    monthly_extra_cents: int
    total_minimums_cents: int
    required_monthly_total_cents: int
    minimum_extra_to_hit_target_cents: Optional[int]
    add_more_to_hit_target_cents: Optional[int]
    projection: SimulationResult
    avalanche_order: list[DebtEntry] = field(default_factory=list)
    milestones: list[Milestone] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Render the report with camelCase keys, cents and ISO dates."""
        return {
            "totalDebtNow": self.total_debt_now_cents,
            "startedTotalDebtCents": self.started_total_debt_cents,
            "paidOffPercent": self.paid_off_percent,
            "paidOffCents": self.paid_off_cents,
            "targetDate": self.target_date.isoformat() if self.target_date else None,
            "monthlyExtraCents": self.monthly_extra_cents,
            "totalMinimumsCents": self.total_minimums_cents,
            "requiredMonthlyTotalCents": self.required_monthly_total_cents,
            "minimumExtraToHitTargetCents": self.minimum_extra_to_hit_target_cents,
            "addMoreToHitTargetCents": self.add_more_to_hit_target_cents,
            "projection": self.projection.to_dict(),
            "avalancheOrder": [debt.to_dict() for debt in self.avalanche_order],
            "milestones": [milestone.to_dict() for milestone in self.milestones],
        }


def evaluate_milestones(paid_off_percent: float, total_debt_now_cents: int) -> list[Milestone]:
    """Flag each rung of the milestone ladder as achieved or not."""

    milestones: list[Milestone] = []
    for milestone_id, label, percent in MILESTONE_LADDER:
        if percent == 100:
            achieved = total_debt_now_cents <= 0
        else:
            achieved = paid_off_percent >= percent
        milestones.append(Milestone(id=milestone_id, label=label, percent=percent, achieved=achieved))
    return milestones


def build_report(
    debts: Iterable[DebtEntry],
    plan: PayoffPlan | None = None,
    *,
    today: date | None = None,
) -> ProjectionReport:
    """Combine ordering, the baseline simulation and the solver into one report.

    Progress is measured against the plan's starting-debt snapshot, or the
    current total when no snapshot exists yet (so a first call shows 0%).
    Without a stored target date the baseline is judged against a date one
    year out and no minimum extra payment is solved for.
    """

    start = today or date.today()
    plan = plan or PayoffPlan()
    ordered = sort_by_avalanche(debts)

    total_now = total_balance(ordered)
    started_total = (
        plan.started_total_debt_cents
        if plan.started_total_debt_cents is not None
        else total_now
    )
    paid_off = max(0, started_total - total_now)
    paid_off_percent = (paid_off / started_total) * 100 if started_total > 0 else 0.0

    monthly_extra = plan.monthly_extra_cents or 0
    baseline_target = plan.target_date or start + timedelta(days=DEFAULT_HORIZON_DAYS)
    projection = simulate_avalanche(ordered, monthly_extra, baseline_target, today=start)

    minimum_extra: Optional[int] = None
    if plan.target_date is not None and ordered:
        minimum_extra = solve_minimum_extra(ordered, plan.target_date, today=start)

    minimums = total_minimums(ordered)
    required_extra = minimum_extra if minimum_extra is not None else monthly_extra

    return ProjectionReport(
        total_debt_now_cents=total_now,
        started_total_debt_cents=started_total,
        paid_off_cents=paid_off,
        paid_off_percent=paid_off_percent,
        target_date=plan.target_date,
        monthly_extra_cents=monthly_extra,
        total_minimums_cents=minimums,
        required_monthly_total_cents=minimums + required_extra,
        minimum_extra_to_hit_target_cents=minimum_extra,
        add_more_to_hit_target_cents=(
            max(0, minimum_extra - monthly_extra) if minimum_extra is not None else None
        ),
        projection=projection,
        avalanche_order=ordered,
        milestones=evaluate_milestones(paid_off_percent, total_now),
    )


__all__ = [
    "DEFAULT_HORIZON_DAYS",
    "MILESTONE_LADDER",
    "Milestone",
    "PayoffPlan",
    "ProjectionReport",
    "build_report",
    "evaluate_milestones",
]
