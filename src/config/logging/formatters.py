"""Formatter JSON dos logs do serviço."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2025-03-02 10:30:00,120",
            "level": "INFO",
            "logger": "app.infra.school.year_schedule_parser",
            "message": "school_schedule_parsed",
            "correlation_id": "abc-123",
            "service": "school-calendar",
            "year": 2025,
            "event_count": 57
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
