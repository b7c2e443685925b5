"""Agregador de settings do serviço de calendário escolar.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# School calendar settings
from config.settings.school_calendar import (
    DEFAULT_SCHOOL_SCHEDULE_URL,
    SCHOOL_URL_PLACEHOLDER,
    RequestMethod,
    SchoolCalendarSettings,
    get_school_calendar_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SCHOOL_SCHEDULE_URL",
    "SCHOOL_URL_PLACEHOLDER",
    # Base
    "BaseSettings",
    "Environment",
    # School calendar
    "RequestMethod",
    "SchoolCalendarSettings",
    "get_base_settings",
    "get_school_calendar_settings",
]
