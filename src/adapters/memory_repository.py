"""Almacenamiento en memoria.

Útil para ejecuciones efímeras y como colaborador en tests de integración.
Asigna ids secuenciales empezando en 1 y no deduplica.
"""

from __future__ import annotations

from core.domain.models import Employee
from core.logger import get_logger

_log = get_logger(__name__)


class InMemoryEmployeeRepository:
    def __init__(self) -> None:
        self._records: list[Employee] = []

    @property
    def records(self) -> tuple[Employee, ...]:
        return tuple(self._records)

    def add(self, employee: Employee) -> int:
        employee_id = len(self._records) + 1
        self._records.append(employee.model_copy(update={"id": employee_id}))
        _log.debug("employee_stored", backend="memory", employee_id=employee_id)
        return employee_id
