"""SQLModel table exports."""

from .account import LIABILITY_TYPES, Account
from .plan import DebtPayoffPlan

__all__ = [
    "LIABILITY_TYPES",
    "Account",
    "DebtPayoffPlan",
]
