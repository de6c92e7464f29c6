"""Errores del dominio.

Por qué una jerarquía propia:
- La capa de UI solo necesita distinguir "entrada inválida" de "fallo remoto".
- Los adaptadores traducen excepciones de httpx/bs4 a estos tipos, así el Core
  no depende de librerías de I/O.
"""

from __future__ import annotations


class PuzzelzoekerError(Exception):
    """Base de todos los errores de la aplicación."""


class QueryValidationError(PuzzelzoekerError):
    """La consulta no cumple las reglas de cliente (vacía, larga, caracteres)."""

    def __init__(self, message: str, *, query: str) -> None:
        super().__init__(message)
        self.query = query


class NetworkError(PuzzelzoekerError):
    """Endpoint inalcanzable, timeout o status HTTP no exitoso."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class ParseError(PuzzelzoekerError):
    """El cuerpo de respuesta no tiene la forma esperada."""

    def __init__(self, message: str, *, endpoint: str | None = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint
