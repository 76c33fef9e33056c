"""Adaptador de la DuckDuckGo Instant Answer API.

Objetivo:
- Construir la URL de consulta (pura, determinista).
- Leer el cuerpo de la respuesta y decodificarlo a `AnswerResponse`.

Está en adapters porque conoce el formato de la API externa.
"""

from __future__ import annotations

import logging
from urllib.parse import quote_plus

import httpx
from pydantic import ValidationError

from core.domain.errors import DecodeError, TransportError
from core.domain.models import AnswerResponse, QueryOptions

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.duckduckgo.com/"
DEFAULT_CLIENT_ID = "duckduckgo-answers"


def build_api_url(
    query: str,
    options: QueryOptions,
    *,
    base_url: str = DEFAULT_BASE_URL,
    client_id: str = DEFAULT_CLIENT_ID,
) -> str:
    """Devuelve la URL completa para `query`.

    El texto se codifica como un formulario HTML (espacio -> `+`, UTF-8 en
    `%XX`), así `unquote_plus` recupera la consulta original. Los bytes de
    stdin que no eran UTF-8 (surrogates) se envían tal cual, como `%XX`.
    """

    encoded = quote_plus(query, encoding="utf-8", errors="surrogateescape")
    return (
        f"{base_url}?q={encoded}"
        f"&format={quote_plus(options.format)}"
        f"&pretty={int(options.pretty)}"
        f"&no_redirect={int(options.no_redirect)}"
        f"&no_html={int(options.no_html)}"
        f"&skip_disambig={int(options.skip_disambig)}"
        f"&t={quote_plus(client_id)}"
    )


def read_body(response: httpx.Response) -> str:
    """Lee el cuerpo completo y cierra la respuesta pase lo que pase."""

    try:
        response.read()
    except httpx.HTTPError as exc:
        raise TransportError(f"failed reading response body: {exc}") from exc
    finally:
        response.close()

    if response.status_code >= 400:
        raise TransportError(f"API answered HTTP {response.status_code}")
    return response.text


def decode_answer(body: str | bytes) -> AnswerResponse:
    try:
        answer = AnswerResponse.model_validate_json(body)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "body"
        raise DecodeError(f"unexpected API response ({location}): {first.get('msg')}") from exc

    logger.debug("decoded answer with %d related topics", len(answer.related_topics))
    return answer
