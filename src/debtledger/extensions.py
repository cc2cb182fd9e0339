"""Database and repository wiring for the Flask app."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from flask import Flask, current_app

from .config import BaseConfig
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelAccountRepository, SQLModelPayoffPlanRepository

EXTENSION_KEY = "debtledger"


@dataclass
class Repositories:
    """Repositories shared by request handlers and CLI commands."""

    session_factory: Callable
    accounts: SQLModelAccountRepository
    plans: SQLModelPayoffPlanRepository


def init_db(app: Flask) -> Repositories:
    """Create the engine from the app's config and attach repositories to the app."""

    config: BaseConfig = app.config["DEBTLEDGER_CONFIG"]
    engine, session_factory = bootstrap_database(config)

    repos = Repositories(
        session_factory=session_factory,
        accounts=SQLModelAccountRepository(session_factory),
        plans=SQLModelPayoffPlanRepository(session_factory),
    )
    app.extensions[EXTENSION_KEY] = repos
    app.extensions[f"{EXTENSION_KEY}.engine"] = engine
    return repos


def get_repositories() -> Repositories:
    """Return repositories for the active app."""

    repos = current_app.extensions.get(EXTENSION_KEY)
    if repos is None:  # pragma: no cover - only when init_db was skipped
        raise RuntimeError("Database engine not initialized")
    return repos
