"""CLI principal (Typer).

Por qué la CLI es un borde fino:
- Solo traduce flags a `AddEmployeeInput`, cablea el almacenamiento y decide
  cómo presentar resultados y errores (exit codes).
- Toda la lógica de negocio vive en `core.services.employee_service`.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from adapters.json_repository import CorruptStoreError, JsonFileEmployeeRepository
from cli import doctor
from cli.ui_components import build_employee_panel
from core.config import AppSettings
from core.domain.errors import BirthDateInFutureError
from core.logger import configure_logging, get_logger
from core.services.employee_service import AddEmployeeInput, EmployeeService

app = typer.Typer(no_args_is_help=True, help="hr-manager: employee onboarding.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)
_log = get_logger(__name__)

EXIT_INVALID_INPUT = 1
EXIT_STORAGE_FAILURE = 3


@app.callback()
def _setup() -> None:
    settings = AppSettings()
    configure_logging(
        level=settings.log_level,
        json_logs=settings.log_json,
        log_file=settings.log_file,
    )


@app.command()
def add(
    full_name: str = typer.Option(..., "--full-name", help="Employee full name."),
    document: str = typer.Option(..., "--document", help="Document/ID number."),
    role: str = typer.Option(..., "--role", help="Role title."),
    role_level: int = typer.Option(..., "--role-level", help="Role level (ordinal)."),
    birth_date: datetime = typer.Option(
        ..., "--birth-date", formats=["%Y-%m-%d"], help="Birth date (YYYY-MM-DD)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    storage_path: Path | None = typer.Option(
        None, "--storage-path", help="Override the JSON storage file."
    ),
) -> None:
    """Onboard a new employee and persist it."""

    settings = AppSettings()
    repository = JsonFileEmployeeRepository(storage_path or settings.storage_path)
    service = EmployeeService(repository)

    data = AddEmployeeInput(
        full_name=full_name,
        document=document,
        role=role,
        role_level=role_level,
        birth_date=birth_date.date(),
    )

    try:
        result = service.add(data)
    except BirthDateInFutureError as exc:
        _err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=EXIT_INVALID_INPUT) from exc
    except (OSError, json.JSONDecodeError, CorruptStoreError) as exc:
        _log.error("employee_store_failed", path=str(repository.path), error=str(exc))
        _err_console.print(f"[red]Storage failure:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_STORAGE_FAILURE) from exc

    _log.info("employee_added", employee_id=result.id)

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, sort_keys=True))
        return
    _console.print(build_employee_panel(result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
