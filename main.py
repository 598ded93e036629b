"""Arranque de la CLI desde un checkout sin instalar.

Uso: `python -m main add --full-name ... --birth-date 1990-05-01`

`src/` se añade a `sys.path` porque los paquetes (`core`, `adapters`, `cli`)
solo son importables directamente tras `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
