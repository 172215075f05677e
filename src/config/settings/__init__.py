"""Agregador de settings do adaptador de validação.

Re-exporta settings e funções de carregamento.
"""

from __future__ import annotations

from config.settings.core import (
    VALID_LOG_LEVELS,
    Environment,
    ValidationSettings,
    get_validation_settings,
)

__all__ = [
    "VALID_LOG_LEVELS",
    "Environment",
    "ValidationSettings",
    "get_validation_settings",
]
