"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La paleta es un valor inmutable que la CLI construye una vez y pasa aquí.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.text import Text

from core.domain.models import AnswerResponse


@dataclass(frozen=True)
class TerminalPalette:
    """Colores por rol (nombres de la paleta ANSI estándar de 8 colores)."""

    header: str = "yellow"
    link: str = "blue"
    body: str = "white"


def build_console(*, stderr: bool = False) -> Console:
    """Console que emite códigos ANSI siempre, haya o no TTY detrás."""

    return Console(
        stderr=stderr,
        force_terminal=True,
        color_system="standard",
        highlight=False,
        soft_wrap=True,
    )


def render_answer(console: Console, answer: AnswerResponse, palette: TerminalPalette) -> None:
    """Imprime la respuesta: resumen, "More info" opcional y temas relacionados.

    El texto de la API se imprime literal (`Text`), nunca como markup de Rich.
    Cada segmento con estilo termina en reset, incluida la última línea.
    """

    console.print()
    console.print(Text(f" {answer.abstract_text}"))
    console.print()

    if answer.abstract_url:
        console.print(Text("More info:", style=palette.header))
        console.print(Text(f"\t{answer.abstract_url}", style=palette.link))
        console.print()

    console.print(Text("Related topics:", style=palette.header))
    for topic in answer.related_topics:
        console.print(Text(f"\t{topic.first_url}", style=palette.link))
        console.print(Text(f"\t{topic.text}", style=palette.body))
        console.print()
