"""Service module exports."""

from . import debts, payoff_plans, projection

__all__ = [
    "debts",
    "payoff_plans",
    "projection",
]
