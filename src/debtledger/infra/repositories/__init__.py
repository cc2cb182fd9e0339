"""Concrete repository implementations using SQLModel."""

from .account import SQLModelAccountRepository
from .plan import SQLModelPayoffPlanRepository

__all__ = [
    "SQLModelAccountRepository",
    "SQLModelPayoffPlanRepository",
]
