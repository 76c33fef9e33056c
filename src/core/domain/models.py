"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los alias mapean 1:1 las claves de la Instant Answer API.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class QueryOptions(BaseModel):
    """Parámetros fijos de la consulta.

    Se construye una vez al arrancar y no cambia durante el proceso.
    """

    model_config = ConfigDict(frozen=True)

    format: str = Field(
        default="json",
        min_length=1,
        description="Formato de respuesta solicitado a la API.",
    )
    pretty: bool = Field(default=True, description="Respuesta indentada.")
    no_redirect: bool = Field(default=True, description="Suprime redirecciones `!bang`.")
    no_html: bool = Field(default=True, description="Elimina HTML del texto.")
    skip_disambig: bool = Field(default=True, description="Omite páginas de desambiguación.")


class RelatedTopic(BaseModel):
    """Entrada "see also" de la respuesta (URL + descripción)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    first_url: str = Field(
        default="",
        alias="FirstURL",
        description="URL del tema relacionado.",
    )
    text: str = Field(
        default="",
        alias="Text",
        description="Descripción del tema relacionado.",
    )

    @field_validator("first_url", "text", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class AnswerResponse(BaseModel):
    """Respuesta decodificada: solo los campos que se muestran en terminal."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    abstract_text: str = Field(
        default="",
        alias="AbstractText",
        description="Resumen de la instant answer (puede venir vacío).",
    )
    abstract_url: str = Field(
        default="",
        alias="AbstractURL",
        description="Fuente del resumen.",
    )
    related_topics: list[RelatedTopic] = Field(
        default_factory=list,
        alias="RelatedTopics",
        description="Temas relacionados en el orden del payload.",
    )

    @field_validator("abstract_text", "abstract_url", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("related_topics", mode="before")
    @classmethod
    def _null_to_list(cls, value: Any) -> Any:
        return [] if value is None else value
