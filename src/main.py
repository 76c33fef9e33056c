"""Script de ejecución desde `src/`.

Equivale al script `ddg-answers` instalado: `python -m main` con `src/`
como directorio de trabajo.
"""

from __future__ import annotations

import sys

# Las respuestas de la API traen Unicode; las consolas cp1252 de Windows
# fallarían con UnicodeEncodeError al imprimirlas.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
