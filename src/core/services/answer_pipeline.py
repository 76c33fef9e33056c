"""Instant-answer query orchestration.

The pipeline is linear: build the URL, fetch it, drain the body and decode
it. It returns the decoded answer or raises an `AnswersError` subclass; the
CLI decides whether that ends the process. Printing stays out of here so the
same flow serves the one-shot and interactive modes (and the tests).
"""

from __future__ import annotations

import httpx

from adapters.http_client import fetch
from adapters.instant_answer import build_api_url, decode_answer, read_body
from core.config import AppSettings
from core.domain.models import AnswerResponse, QueryOptions


def process_query(
    query: str,
    *,
    client: httpx.Client,
    options: QueryOptions,
    settings: AppSettings,
) -> AnswerResponse:
    url = build_api_url(
        query,
        options,
        base_url=settings.api_base_url,
        client_id=settings.client_id,
    )
    response = fetch(client, url)
    body = read_body(response)
    return decode_answer(body)
