"""Contrato del reloj usado por la invariante de fecha de nacimiento."""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def today(self) -> date:
        """Fecha actual (sin hora)."""

        ...
