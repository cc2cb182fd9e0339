"""Projection report assembly tests."""

from __future__ import annotations

from datetime import date

from debtledger.services.debts import add_months
from debtledger.services.projection import PayoffPlan, build_report, evaluate_milestones
from tests.conftest import TODAY, make_debt


def _achieved(report):
    return {m.id: m.achieved for m in report.milestones}


class TestProgress:
    def test_half_paid_off_milestones(self):
        debts = [make_debt(300_000, 0.2, 6_000, id=1), make_debt(200_000, 0.1, 4_000, id=2)]
        plan = PayoffPlan(started_total_debt_cents=1_000_000)

        report = build_report(debts, plan, today=TODAY)

        assert report.total_debt_now_cents == 500_000
        assert report.paid_off_cents == 500_000
        assert report.paid_off_percent == 50.0
        assert _achieved(report) == {"25": True, "50": True, "75": False, "100": False}

    def test_first_call_without_snapshot_shows_no_progress(self):
        report = build_report([make_debt(80_000, 0.15, 2_000)], None, today=TODAY)

        assert report.started_total_debt_cents == 80_000
        assert report.paid_off_cents == 0
        assert report.paid_off_percent == 0.0
        assert not any(m.achieved for m in report.milestones)

    def test_debt_growth_past_snapshot_clamps_to_zero(self):
        report = build_report(
            [make_debt(120_000, 0.15, 2_000)],
            PayoffPlan(started_total_debt_cents=100_000),
            today=TODAY,
        )

        assert report.paid_off_cents == 0
        assert report.paid_off_percent == 0.0

    def test_debt_free_milestone_tracks_zero_balance(self):
        milestones = evaluate_milestones(99.9, 1)
        assert [m.achieved for m in milestones] == [True, True, True, False]

        milestones = evaluate_milestones(0.0, 0)
        assert [m.achieved for m in milestones] == [False, False, False, True]
        assert milestones[-1].label == "Debt-free"


class TestZeroDebt:
    def test_everything_zeroed(self):
        report = build_report([], None, today=TODAY)

        assert report.total_debt_now_cents == 0
        assert report.started_total_debt_cents == 0
        assert report.paid_off_cents == 0
        assert report.total_minimums_cents == 0
        assert report.required_monthly_total_cents == 0
        assert report.minimum_extra_to_hit_target_cents is None
        assert report.add_more_to_hit_target_cents is None
        assert report.projection.projected_payoff_date == TODAY
        assert report.projection.months_to_payoff == 0
        assert report.avalanche_order == []
        assert _achieved(report)["100"] is True

    def test_plan_with_target_but_no_debt(self):
        plan = PayoffPlan(target_date=date(2026, 1, 1), started_total_debt_cents=400_000)

        report = build_report([make_debt(0, 0.2, 1_000)], plan, today=TODAY)

        assert report.minimum_extra_to_hit_target_cents is None
        assert report.paid_off_percent == 100.0
        assert all(m.achieved for m in report.milestones)


class TestRequiredPayments:
    def test_snapshot_example_without_target(self):
        plan = PayoffPlan(monthly_extra_cents=20_000, started_total_debt_cents=500_000)

        report = build_report([make_debt(500_000, 0.20, 10_000)], plan, today=TODAY)

        assert report.total_minimums_cents == 10_000
        assert report.required_monthly_total_cents == 30_000
        assert report.minimum_extra_to_hit_target_cents is None
        assert report.add_more_to_hit_target_cents is None
        assert report.target_date is None
        assert report.projection.months_to_payoff == 20
        # No stored target: the baseline is judged against a one-year horizon
        assert report.projection.on_track is False

    def test_target_drives_required_extra_and_shortfall(self):
        target = add_months(TODAY, 12)
        plan = PayoffPlan(target_date=target, monthly_extra_cents=4_000)

        report = build_report([make_debt(120_000, None, 0)], plan, today=TODAY)

        assert report.minimum_extra_to_hit_target_cents == 10_000
        assert report.add_more_to_hit_target_cents == 6_000
        assert report.required_monthly_total_cents == 10_000
        assert report.projection.months_to_payoff == 30
        assert report.projection.projected_payoff_date == date(2027, 7, 15)
        assert report.projection.on_track is False

    def test_shortfall_is_zero_when_already_paying_enough(self):
        target = add_months(TODAY, 12)
        plan = PayoffPlan(target_date=target, monthly_extra_cents=15_000)

        report = build_report([make_debt(120_000, None, 0)], plan, today=TODAY)

        assert report.add_more_to_hit_target_cents == 0
        assert report.projection.on_track is True

    def test_unreachable_target_falls_back_to_current_extra(self):
        plan = PayoffPlan(target_date=TODAY, monthly_extra_cents=2_500)

        report = build_report([make_debt(60_000, 0.1, 1_500)], plan, today=TODAY)

        assert report.minimum_extra_to_hit_target_cents is None
        assert report.add_more_to_hit_target_cents is None
        assert report.required_monthly_total_cents == 1_500 + 2_500


class TestSerialization:
    def test_to_dict_uses_cents_and_iso_dates(self):
        plan = PayoffPlan(target_date=date(2027, 1, 15), monthly_extra_cents=5_000)
        debts = [make_debt(50_000, None, 1_000, id=7, name="Store card"), make_debt(90_000, 0.22, 2_000, id=3)]

        payload = build_report(debts, plan, today=TODAY).to_dict()

        assert payload["targetDate"] == "2027-01-15"
        assert payload["totalDebtNow"] == 140_000
        assert isinstance(payload["projection"]["projectedPayoffDate"], str)
        assert [d["id"] for d in payload["avalancheOrder"]] == [3, 7]
        assert payload["avalancheOrder"][1]["name"] == "Store card"
        assert payload["avalancheOrder"][1]["interestRate"] is None
        assert [m["percent"] for m in payload["milestones"]] == [25, 50, 75, 100]
        assert set(payload) >= {
            "startedTotalDebtCents",
            "paidOffPercent",
            "paidOffCents",
            "monthlyExtraCents",
            "totalMinimumsCents",
            "requiredMonthlyTotalCents",
            "minimumExtraToHitTargetCents",
            "addMoreToHitTargetCents",
        }
