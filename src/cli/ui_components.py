"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import AddEmployeeResult


def build_employee_panel(result: AddEmployeeResult) -> Panel:
    """Panel para presentar un empleado recién creado."""

    body = Text()
    body.append(f"{result.full_name}\n", style="bold")
    body.append(f"Document: {result.document}\n")
    body.append(f"Role: {result.role} (level {result.role_level})\n")
    body.append(f"Birth date: {result.birth_date.isoformat()}")
    if result.id is not None:
        body.append(f"\nID: {result.id}", style="dim")

    title = Text("Employee created", style="bold green")
    return Panel(body, title=title, border_style="green")


def build_doctor_table() -> Table:
    table = Table(title="hr-manager Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
