"""CLI principal (Typer).

Superficie deliberadamente mínima, solo flags cortos:
- sin flags: modo interactivo (prompt `Search:` hasta fin de stdin);
- `-s <texto>`: una consulta y salida con `EXIT_DONE`;
- `-h`: uso y salida con `EXIT_HELP`.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import httpx
import typer
from rich.console import Console
from rich.text import Text

from adapters.http_client import build_client
from cli.ui_components import TerminalPalette, build_console, render_answer
from core.config import AppSettings
from core.domain.errors import DecodeError, EmptyInput, EndOfInput, TransportError
from core.domain.models import QueryOptions
from core.log import configure_logging
from core.services.answer_pipeline import process_query

EXIT_OK = 0
EXIT_DONE = 1
EXIT_TRANSPORT = 3
EXIT_DECODE = 4
EXIT_HELP = 255

app = typer.Typer(
    add_completion=False,
    rich_markup_mode=None,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": []},
    help="Query the DuckDuckGo Instant Answer API from the terminal.",
)

logger = logging.getLogger(__name__)

_console = build_console()
_err_console = build_console(stderr=True)


def search_prompt(console: Console, stream: TextIO) -> str:
    """Pide una consulta y devuelve la línea sin el salto final.

    Raises:
        EndOfInput: stdin cerrado.
        EmptyInput: línea vacía o solo espacios.
    """

    console.print("\nSearch: ", end="")
    line = stream.readline()
    if not line:
        raise EndOfInput("end of input")

    query = line.rstrip("\r\n")
    if not query.strip():
        raise EmptyInput()
    return query


def run_interactive(
    *,
    console: Console,
    stream: TextIO,
    client: httpx.Client,
    options: QueryOptions,
    settings: AppSettings,
    palette: TerminalPalette,
) -> int:
    """Bucle prompt -> consulta -> render hasta que se acabe la entrada."""

    while True:
        try:
            query = search_prompt(console, stream)
        except EndOfInput:
            console.print()
            return EXIT_OK
        except EmptyInput as exc:
            console.print(Text(str(exc)))
            continue

        answer = process_query(query, client=client, options=options, settings=settings)
        render_answer(console, answer, palette)


@app.command()
def main(
    ctx: typer.Context,
    search: str = typer.Option(
        "",
        "-s",
        help="Specifies a search parameter for the DuckDuckGo Instant Answers API.",
        show_default=False,
    ),
    show_help: bool = typer.Option(
        False,
        "-h",
        help="Prints command usage information.",
    ),
    verbose: bool = typer.Option(
        False,
        "-v",
        "--verbose",
        help="Debug logging on stderr.",
    ),
) -> None:
    """When no flags are specified, the program runs in interactive mode."""

    if show_help:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=EXIT_HELP)

    configure_logging(verbose)

    settings = AppSettings()
    options = QueryOptions()
    palette = TerminalPalette()

    try:
        with build_client(settings) as client:
            if search:
                answer = process_query(search, client=client, options=options, settings=settings)
                render_answer(_console, answer, palette)
                raise typer.Exit(code=EXIT_DONE)

            code = run_interactive(
                console=_console,
                stream=sys.stdin,
                client=client,
                options=options,
                settings=settings,
                palette=palette,
            )
    except TransportError as exc:
        logger.debug("transport failure", exc_info=exc)
        _err_console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
        raise typer.Exit(code=EXIT_TRANSPORT) from exc
    except DecodeError as exc:
        logger.debug("decode failure", exc_info=exc)
        _err_console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
        raise typer.Exit(code=EXIT_DECODE) from exc

    raise typer.Exit(code=code)


def run() -> None:
    """Entry point del script `ddg-answers`."""

    app()
