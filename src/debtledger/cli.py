"""Flask CLI commands for DebtLedger."""

from __future__ import annotations

import json

import click

from .blueprints.debt.forms import PayoffPlanForm


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("debtledger-projection")
    @click.option("--user-id", required=True, help="Owner of the accounts and plan")
    def debtledger_projection(user_id: str) -> None:
        """Print the payoff projection report as JSON."""

        from .extensions import get_repositories
        from .services.payoff_plans import get_debt_payoff_projection

        repos = get_repositories()
        report = get_debt_payoff_projection(repos.accounts, repos.plans, user_id)
        click.echo(json.dumps(report.to_dict(), indent=2))

    @app.cli.command("debtledger-set-plan")
    @click.option("--user-id", required=True, help="Owner of the plan")
    @click.option("--target-date", required=True, help="Payoff target as YYYY-MM-DD")
    @click.option("--extra-cents", default=None, help="Extra monthly payment in cents")
    @click.option("--snapshot-cents", default=None, help="Override the starting-debt snapshot")
    def debtledger_set_plan(
        user_id: str, target_date: str, extra_cents: str | None, snapshot_cents: str | None
    ) -> None:
        """Create or update a payoff plan."""

        from .extensions import get_repositories
        from .services.payoff_plans import set_plan

        form = PayoffPlanForm(
            target_date=target_date,
            monthly_extra_cents=extra_cents,
            started_total_debt_cents=snapshot_cents,
        )
        if not form.validate():
            raise click.UsageError("; ".join(form.error_messages))

        repos = get_repositories()
        plan = set_plan(
            repos.accounts,
            repos.plans,
            user_id,
            target_date=form.target_date,  # type: ignore[arg-type]
            monthly_extra_cents=form.monthly_extra_cents,  # type: ignore[arg-type]
            started_total_debt_cents=form.started_total_debt_cents,  # type: ignore[arg-type]
        )
        click.echo(json.dumps(plan.to_dict()))
