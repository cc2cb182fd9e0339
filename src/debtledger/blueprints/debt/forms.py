"""Payoff plan form definitions and validation helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List

ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(slots=True)
class PayoffPlanForm:
    """Represents payoff plan inputs and associated validation errors."""

    target_date: date | str | None = None
    monthly_extra_cents: int | str | None = None
    started_total_debt_cents: int | str | None = None
    errors: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def from_payload(cls, payload: Any) -> "PayoffPlanForm":
        """Build a form from a camelCase JSON body; anything but an object counts as empty."""
        if not isinstance(payload, dict):
            payload = {}
        return cls(
            target_date=payload.get("targetDate"),
            monthly_extra_cents=payload.get("monthlyExtraCents"),
            started_total_debt_cents=payload.get("startedTotalDebtCents"),
        )

    def validate(self) -> bool:
        """Validate plan inputs returning True when all values are acceptable."""

        self.errors.clear()
        self.target_date = self._parse_date("targetDate", self.target_date)
        self.monthly_extra_cents = self._parse_cents("monthlyExtraCents", self.monthly_extra_cents)
        self.started_total_debt_cents = self._parse_cents(
            "startedTotalDebtCents", self.started_total_debt_cents
        )
        return not self.errors

    def _parse_date(self, field: str, value: date | str | None) -> date | None:
        if value is None or value == "":
            self.errors.setdefault(field, []).append("This field is required.")
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        text = str(value).strip()
        try:
            if not ISO_DATE.fullmatch(text):
                raise ValueError(text)
            return datetime.strptime(text, "%Y-%m-%d").date()
        except ValueError:
            self.errors.setdefault(field, []).append("Enter a date as YYYY-MM-DD.")
            return None

    def _parse_cents(self, field: str, value: int | str | None) -> int | None:
        """Optional non-negative whole number of cents."""

        if value is None or value == "":
            return None
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or isinstance(value, float) and not value.is_integer():
            self.errors.setdefault(field, []).append("Enter a whole number of cents.")
            return None
        try:
            cents = int(value)
        except (TypeError, ValueError):
            self.errors.setdefault(field, []).append("Enter a whole number of cents.")
            return None
        if cents < 0:
            self.errors.setdefault(field, []).append("Amount must be at least zero.")
            return None
        return cents

    @property
    def error_messages(self) -> Iterable[str]:
        """Flattened iterable of error strings for summaries."""

        for messages in self.errors.values():
            yield from messages
