"""SQLModel implementation of Account repository."""

from __future__ import annotations

from typing import Callable

from sqlmodel import Session, col, select

from ...models.account import LIABILITY_TYPES, Account


class SQLModelAccountRepository:
    """SQLModel-based account repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def list_liabilities(self, *, user_id: str) -> list[Account]:
        """List credit and loan accounts in insertion order."""
        with self.session_factory() as session:
            statement = (
                select(Account)
                .where(Account.user_id == user_id)
                .where(col(Account.account_type).in_(LIABILITY_TYPES))
                .order_by(Account.id)  # type: ignore
            )
            return list(session.exec(statement).all())

    def create(self, account: Account, *, user_id: str) -> Account:
        """Create a new account."""
        with self.session_factory() as session:
            account.user_id = user_id
            session.add(account)
            session.commit()
            session.refresh(account)
            return account

    def update(self, account: Account, *, user_id: str) -> Account:
        """Update an existing account."""
        with self.session_factory() as session:
            account.user_id = user_id
            account = session.merge(account)
            session.commit()
            session.refresh(account)
            return account

    def get_total_debt(self, *, user_id: str) -> int:
        """Sum of liability balances in cents."""
        return sum(a.current_balance_cents for a in self.list_liabilities(user_id=user_id))
