"""Debt payoff routes."""

from __future__ import annotations

from functools import wraps

from flask import g, jsonify, request

from debtledger.extensions import get_repositories
from debtledger.services import payoff_plans

from . import bp
from .forms import PayoffPlanForm

USER_HEADER = "X-User-Id"


def require_user(view):
    """Resolve the caller identity set by the upstream auth layer."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        user_id = (request.headers.get(USER_HEADER) or "").strip()
        if not user_id:
            return jsonify({"error": "not_authenticated"}), 401
        g.user_id = user_id
        return view(*args, **kwargs)

    return wrapper


@bp.get("/order")
@require_user
def payoff_order():
    """Liabilities in avalanche payoff order."""

    repos = get_repositories()
    ordered = payoff_plans.get_debt_payoff_order(repos.accounts, g.user_id)
    return jsonify(payoff_plans.summarize_orders(ordered))


@bp.get("/plan")
@require_user
def get_plan():
    repos = get_repositories()
    plan = payoff_plans.get_plan(repos.plans, g.user_id)
    return jsonify(plan.to_dict() if plan else None)


@bp.put("/plan")
@require_user
def set_plan():
    """Validate the plan payload and store it."""

    form = PayoffPlanForm.from_payload(request.get_json(silent=True) or {})
    if not form.validate():
        return jsonify({"error": "invalid_plan", "fields": form.errors}), 400

    repos = get_repositories()
    plan = payoff_plans.set_plan(
        repos.accounts,
        repos.plans,
        g.user_id,
        target_date=form.target_date,  # type: ignore[arg-type]
        monthly_extra_cents=form.monthly_extra_cents,  # type: ignore[arg-type]
        started_total_debt_cents=form.started_total_debt_cents,  # type: ignore[arg-type]
    )
    return jsonify(plan.to_dict())


@bp.get("/projection")
@require_user
def projection():
    """Progress, baseline projection and required payments for the caller."""

    repos = get_repositories()
    report = payoff_plans.get_debt_payoff_projection(repos.accounts, repos.plans, g.user_id)
    return jsonify(report.to_dict())
