"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- La única invariante (fecha de nacimiento no futura) vive en un validador del
  propio modelo, así que toda construcción validada pasa por ella.
- Facilita la serialización del registro hacia cualquier almacenamiento.

Nota:
- Estos modelos describen *qué* es un empleado, no *dónde* se guarda.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic.config import ConfigDict

from core.domain.errors import BirthDateInFutureError


class Employee(BaseModel):
    """Registro autoritativo de un empleado.

    Reglas:
    - Inmutable una vez construido (`frozen`).
    - `birth_date` no puede ser posterior a la fecha de referencia. La fecha de
      referencia llega por el contexto de validación (`{"today": date}`); si no
      se provee, se usa la fecha del sistema.
    - No hay más validaciones de campos (longitud, formato, rango de nivel).
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(
        default=None,
        description="Identificador asignado por el almacenamiento al persistir.",
    )
    full_name: str = Field(
        ...,
        description="Nombre completo.",
    )
    document: str = Field(
        ...,
        description="Número de documento/identificación.",
    )
    role: str = Field(
        ...,
        description="Cargo.",
    )
    role_level: int = Field(
        ...,
        description="Nivel ordinal dentro del cargo.",
    )
    birth_date: date = Field(
        ...,
        description="Fecha de nacimiento.",
    )

    @field_validator("birth_date")
    @classmethod
    def _birth_date_not_in_future(cls, value: date, info: ValidationInfo) -> date:
        context = info.context if isinstance(info.context, dict) else {}
        today = context.get("today") or date.today()
        if value > today:
            raise BirthDateInFutureError()
        return value

    @classmethod
    def create(
        cls,
        *,
        full_name: str,
        document: str,
        role: str,
        role_level: int,
        birth_date: date,
        today: date | None = None,
    ) -> "Employee":
        """Construye un `Employee` validado contra `today` (o la fecha del sistema)."""

        data: dict[str, Any] = {
            "full_name": full_name,
            "document": document,
            "role": role,
            "role_level": role_level,
            "birth_date": birth_date,
        }
        return cls.model_validate(data, context={"today": today} if today else None)

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> "Employee":
        """Copia validada: cualquier `update` vuelve a pasar por la invariante."""

        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**self.model_dump(), **update})

    @classmethod
    def model_construct(cls, _fields_set: set[str] | None = None, **values: Any) -> "Employee":
        # Sin atajo sin validar: pasa por el validador como cualquier otra ruta.
        return cls.model_validate(values)


class AddEmployeeResult(BaseModel):
    """Vista de solo lectura de un empleado recién creado."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    full_name: str
    document: str
    role: str
    role_level: int
    birth_date: date

    @classmethod
    def from_employee(cls, employee: Employee, *, employee_id: int | None = None) -> "AddEmployeeResult":
        return cls(
            id=employee_id if employee_id is not None else employee.id,
            full_name=employee.full_name,
            document=employee.document,
            role=employee.role,
            role_level=employee.role_level,
            birth_date=employee.birth_date,
        )
