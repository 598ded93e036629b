"""Test doubles and shared constants."""

from __future__ import annotations

from datetime import date

from core.domain.models import Employee

TODAY = date(2024, 6, 15)


class FixedClock:
    """Clock double that always returns the same date."""

    def __init__(self, today: date) -> None:
        self._today = today

    def today(self) -> date:
        return self._today


class RecordingEmployeeRepository:
    """Repository double: records every call instead of touching storage."""

    def __init__(self, assigned_id: int | None = None) -> None:
        self.calls: list[Employee] = []
        self._assigned_id = assigned_id

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def add(self, employee: Employee) -> int | None:
        self.calls.append(employee)
        if self._assigned_id is None:
            return None
        return self._assigned_id + len(self.calls) - 1
