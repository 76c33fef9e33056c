"""Errores del dominio.

La CLI decide qué hacer con cada uno (reintentar el prompt, salir con un
código concreto); los adaptadores solo traducen las excepciones de librería.
"""

from __future__ import annotations


class AnswersError(Exception):
    """Base de todos los errores de la aplicación."""


class InputError(AnswersError):
    """El prompt interactivo no produjo una consulta."""


class EmptyInput(InputError):
    """Línea vacía o solo espacios: se vuelve a preguntar."""

    def __init__(self, message: str = "Invalid input") -> None:
        super().__init__(message)


class EndOfInput(InputError):
    """Fin de stdin: termina el modo interactivo."""


class TransportError(AnswersError):
    """La petición HTTP no pudo completarse."""


class DecodeError(AnswersError):
    """El cuerpo no es JSON válido o no respeta el esquema esperado."""
