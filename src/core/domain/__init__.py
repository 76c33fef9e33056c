"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos de la Instant Answer API (Pydantic v2)
  y la jerarquía de errores que la CLI traduce a códigos de salida.
- El dominio no conoce HTTP ni la terminal.
"""
