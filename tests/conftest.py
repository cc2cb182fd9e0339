"""Pytest configuration and shared fixtures for DebtLedger tests.

This module provides database fixtures, test data factories, and helper utilities
for testing the payoff engine, repositories, and routes without touching the
real app database.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from debtledger.models import Account, DebtPayoffPlan  # noqa: F401
from debtledger.infra.repositories import (
    SQLModelAccountRepository,
    SQLModelPayoffPlanRepository,
)
from debtledger.services.debts import DebtEntry

TODAY = date(2025, 1, 15)
USER_ID = "user_tester"

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Create a session factory for repositories that expect Callable[[], Session]."""

    def factory():
        return Session(db_engine, expire_on_commit=False)

    return factory


@pytest.fixture
def account_repo(session_factory) -> SQLModelAccountRepository:
    return SQLModelAccountRepository(session_factory)


@pytest.fixture
def plan_repo(session_factory) -> SQLModelPayoffPlanRepository:
    return SQLModelPayoffPlanRepository(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def account_factory(account_repo):
    """Factory for creating persisted accounts.

    Returns:
        Callable: Function that creates and persists Account instances
    """

    def _create_account(
        name: str = "Test Card",
        account_type: str = "credit",
        balance_cents: int = 100_000,
        interest_rate: float | None = 0.18,
        minimum_payment_cents: int | None = 2_500,
        user_id: str = USER_ID,
    ) -> Account:
        """Create a test account with sensible defaults.

        Args:
            name: Display name
            account_type: One of checking/savings/credit/loan/investment
            balance_cents: Current balance in cents
            interest_rate: APR as a fraction (0.18 for 18%), or None
            minimum_payment_cents: Minimum monthly payment in cents, or None
        """
        account = Account(
            name=name,
            account_type=account_type,
            current_balance_cents=balance_cents,
            interest_rate=interest_rate,
            minimum_payment_cents=minimum_payment_cents,
        )
        return account_repo.create(account, user_id=user_id)

    return _create_account


def make_debt(
    balance_cents: int,
    interest_rate: float | None = None,
    minimum_payment_cents: int | None = None,
    *,
    id: int | str = 1,
    name: str | None = None,
    account_type: str = "credit",
) -> DebtEntry:
    """Build an in-memory DebtEntry for engine tests."""

    return DebtEntry(
        id=id,
        name=name or f"Debt {id}",
        account_type=account_type,
        balance_cents=balance_cents,
        interest_rate=interest_rate,
        minimum_payment_cents=minimum_payment_cents,
    )


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Flask app bound to a throwaway data directory and database."""

    monkeypatch.setenv("DEBTLEDGER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DEBTLEDGER_DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("DEBTLEDGER_DEV_MODE", "true")

    from debtledger import create_app

    application = create_app("testing")
    yield application
    application.extensions["debtledger.engine"].dispose()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def app_repos(app):
    """Repositories attached to the test app."""
    return app.extensions["debtledger"]
