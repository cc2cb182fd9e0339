"""Repository protocol definitions for domain layer."""

from .account import AccountRepository
from .plan import PayoffPlanRepository

__all__ = [
    "AccountRepository",
    "PayoffPlanRepository",
]
