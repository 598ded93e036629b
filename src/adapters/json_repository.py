"""Almacenamiento de empleados en un fichero JSON.

Por qué JSON:
- Persistencia duradera sin servidor de base de datos.
- Formato estable y legible, fácil de inspeccionar o importar en otras herramientas.

Formato:
    {"employees": [{"id": 1, "full_name": ..., "birth_date": "YYYY-MM-DD", ...}]}

Nota:
- Cada `add` lee, modifica y reescribe el fichero. No hay bloqueo entre
  procesos: dos escritores concurrentes sobre el mismo fichero no están soportados.
- La reescritura va a un temporal en el mismo directorio y se publica con
  `os.replace`: si falla, el fichero anterior queda intacto.
- Los errores de E/S (`OSError`), un fichero corrupto (`json.JSONDecodeError`)
  o con forma inesperada (`CorruptStoreError`) se propagan tal cual.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from core.domain.models import Employee
from core.logger import get_logger

_log = get_logger(__name__)


class CorruptStoreError(ValueError):
    """El fichero es JSON válido pero no tiene la forma de un almacén de empleados."""


class JsonFileEmployeeRepository:
    def __init__(self, path: Path) -> None:
        self.path = path

    def _load(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict) or not isinstance(data.get("employees", []), list):
            raise CorruptStoreError(f"{self.path}: expected an object with an 'employees' list")

        records = list(data.get("employees", []))
        for record in records:
            if not isinstance(record, dict):
                raise CorruptStoreError(f"{self.path}: employee records must be objects")
            employee_id = record.get("id")
            if not isinstance(employee_id, int) or isinstance(employee_id, bool):
                raise CorruptStoreError(f"{self.path}: invalid employee id {employee_id!r}")
        return records

    def _dump(self, records: list[dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps({"employees": records}, ensure_ascii=False, indent=2, sort_keys=True) + "\n"

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def add(self, employee: Employee) -> int:
        """Añade `employee` al fichero y devuelve el id asignado (`max(id) + 1`)."""

        records = self._load()
        employee_id = max((r["id"] for r in records), default=0) + 1
        records.append({**employee.model_dump(mode="json"), "id": employee_id})
        self._dump(records)
        _log.debug("employee_stored", backend="json", path=str(self.path), employee_id=employee_id)
        return employee_id
