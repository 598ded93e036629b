"""Global pytest configuration and fixtures."""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path

import pytest

from core.domain.models import Employee
from core.services.employee_service import AddEmployeeInput
from tests.helpers import TODAY, FixedClock, RecordingEmployeeRepository


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep settings away from the developer's real config and `.env` files."""

    for key in list(os.environ):
        if key.upper().startswith("HR_MANAGER_"):
            monkeypatch.delenv(key, raising=False)
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.chdir(tmp_path)
    return config_home


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def recording_repository() -> RecordingEmployeeRepository:
    return RecordingEmployeeRepository(assigned_id=1)


@pytest.fixture
def valid_input() -> AddEmployeeInput:
    return AddEmployeeInput(
        full_name="Ana Silva",
        document="123",
        role="Engineer",
        role_level=2,
        birth_date=TODAY.replace(year=TODAY.year - 23),
    )


@pytest.fixture
def employee() -> Employee:
    return Employee.create(
        full_name="Ana Silva",
        document="123",
        role="Engineer",
        role_level=2,
        birth_date=date(2001, 6, 15),
        today=TODAY,
    )
