"""Account repository protocol."""

from __future__ import annotations

from typing import Protocol

from ...models.account import Account


class AccountRepository(Protocol):
    """Repository for managing account entities."""

    def list_liabilities(self, *, user_id: str) -> list[Account]:
        """List credit and loan accounts, including those already paid down to zero."""
        ...

    def create(self, account: Account, *, user_id: str) -> Account:
        """Create a new account."""
        ...

    def update(self, account: Account, *, user_id: str) -> Account:
        """Update an existing account."""
        ...

    def get_total_debt(self, *, user_id: str) -> int:
        """Sum of liability balances in cents."""
        ...
