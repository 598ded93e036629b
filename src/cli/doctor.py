"""Doctor command for environment diagnostics."""

from __future__ import annotations

import os
from pathlib import Path

import typer
from rich.console import Console

from cli.ui_components import build_doctor_table
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_storage(path: Path) -> tuple[bool, str]:
    """Check that the storage file (or its nearest existing parent) is writable."""

    if path.exists():
        if path.is_dir():
            return False, "Path is a directory"
        ok = os.access(path, os.W_OK)
        return ok, "Existing file" if ok else "File not writable"

    parent = path.parent
    while not parent.exists() and parent != parent.parent:
        parent = parent.parent
    if not parent.is_dir():
        return False, f"No usable parent directory ({parent})"
    if os.access(parent, os.W_OK):
        return True, f"Will be created under {parent}"
    return False, f"Directory not writable: {parent}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = build_doctor_table()
    table.add_row("Storage path", "OK", str(settings.storage_path))
    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("Log format", "OK", "json" if settings.log_json else "console")
    if settings.log_file:
        table.add_row("Log file", "OK", str(settings.log_file))

    ok_storage, detail_storage = _check_storage(settings.storage_path)
    table.add_row("Storage writable", "OK" if ok_storage else "FAIL", detail_storage)

    _console.print(table)

    if not ok_storage:
        _console.print(
            "\n[yellow]Note:[/yellow] Run `hr-manager doctor setup-storage` or set "
            "HR_MANAGER_STORAGE_PATH to a writable location."
        )


@app.command(name="setup-storage")
def setup_storage() -> None:
    """Interactive storage setup (stores config in the user config .env)."""

    current = AppSettings().storage_path
    raw = typer.prompt("Storage file", default=str(current), show_default=True).strip()
    if not raw:
        raise typer.BadParameter("storage path is required")

    env_path = write_user_env_vars({"HR_MANAGER_STORAGE_PATH": str(Path(raw).expanduser())})
    _console.print(f"[green]Saved storage config to:[/green] {env_path}")
