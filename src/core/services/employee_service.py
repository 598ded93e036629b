"""Employee onboarding orchestration.

The service is the single entry-point for creating employees. It builds the
domain entity (the only validation point), hands it to the repository and
returns a read-only view. It keeps no state between calls and performs no
error handling: validation and storage failures reach the caller untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from adapters.system_clock import SystemClock
from core.domain.models import AddEmployeeResult, Employee
from core.interfaces.clock import Clock
from core.interfaces.repository import EmployeeRepository


@dataclass
class AddEmployeeInput:
    """Raw, caller-supplied data for a new employee."""

    full_name: str
    document: str
    role: str
    role_level: int
    birth_date: date


class EmployeeService:
    """Onboards employees through an `EmployeeRepository`."""

    def __init__(self, repository: EmployeeRepository, *, clock: Clock | None = None) -> None:
        self._repository = repository
        self._clock = clock or SystemClock()

    def add(self, data: AddEmployeeInput) -> AddEmployeeResult:
        # Construction must succeed before anything reaches the repository.
        employee = Employee.create(
            full_name=data.full_name,
            document=data.document,
            role=data.role,
            role_level=data.role_level,
            birth_date=data.birth_date,
            today=self._clock.today(),
        )
        employee_id = self._repository.add(employee)
        return AddEmployeeResult.from_employee(employee, employee_id=employee_id)
