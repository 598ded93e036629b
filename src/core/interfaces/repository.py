"""Contrato del almacenamiento de empleados.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que adaptadores (memoria, fichero JSON, base de datos) sean
  intercambiables y testeables sin acoplar el Core a un almacenamiento concreto.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Employee


@runtime_checkable
class EmployeeRepository(Protocol):
    """Contrato mínimo para persistir un empleado.

    Reglas de diseño:
    - `add` es síncrono: no devuelve hasta que el almacenamiento confirma.
    - No valida: recibe empleados que ya cumplen la invariante del dominio.
    - Los fallos del almacenamiento se propagan sin tocar; no hay reintentos.
    - Sin idempotencia: dos llamadas equivalentes crean dos registros.
    """

    def add(self, employee: Employee) -> int | None:
        """Persiste `employee` y devuelve el id asignado (si el almacenamiento lo asigna)."""

        ...
