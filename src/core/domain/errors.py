"""Errores del dominio.

Por qué excepciones propias:
- La CLI (u otro borde) decide cómo presentarlas; el Core solo las lanza.
- No heredan de `ValueError` para que Pydantic no las envuelva en un
  `ValidationError` y lleguen intactas al llamador.
"""

from __future__ import annotations


class HRManagerError(Exception):
    """Base de los errores propios de hr-manager."""


class BirthDateInFutureError(HRManagerError):
    """La fecha de nacimiento es posterior a la fecha de referencia."""

    MESSAGE = "Birth date cannot be in the future."

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)
