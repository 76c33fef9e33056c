"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para todas las peticiones a la API.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
- Traduce los fallos de red a `TransportError` en el borde.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.errors import TransportError

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono.

    Sin `http_timeout_seconds` no hay timeout: una conexión colgada bloquea
    el proceso, igual que cualquier cliente HTTP por defecto.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def fetch(client: httpx.Client, url: str) -> httpx.Response:
    """Lanza un GET y devuelve la respuesta con el cuerpo aún sin leer.

    Quien llama debe leer y cerrar la respuesta (ver `read_body`).
    """

    request = client.build_request("GET", url)
    logger.debug("GET %s", url)
    try:
        response = client.send(request, stream=True)
    except httpx.HTTPError as exc:
        raise TransportError(f"request to {request.url.host} failed: {exc}") from exc

    logger.debug("HTTP %s from %s", response.status_code, request.url.host)
    return response
