"""Exceções da ingestão de calendário escolar.

Todas as falhas chegam à camada HTTP sem retry interno.
"""

from __future__ import annotations


class SchoolCalendarError(RuntimeError):
    """Base para falhas na obtenção do calendário escolar."""


class ConfigurationError(SchoolCalendarError):
    """Endpoint upstream ausente ou ainda com placeholder."""


class FetchError(SchoolCalendarError):
    """Falha de rede, timeout ou status não-2xx do upstream."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
