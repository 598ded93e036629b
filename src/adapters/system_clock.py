"""Reloj del sistema."""

from __future__ import annotations

from datetime import date


class SystemClock:
    """Implementa `Clock` leyendo la fecha local del sistema en cada llamada."""

    def today(self) -> date:
        return date.today()
