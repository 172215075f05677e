"""Settings de montagem de regras de validação JSON:API.

Configurações comuns ao serviço e aos builders de regras de query.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class ValidationSettings:
    """Configurações do adaptador de validação.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        log_level: Nível de log do bootstrap
        page_parameter: Parâmetro de query que agrupa a paginação
        filter_parameter: Parâmetro de query que agrupa os filtros
    """

    environment: Environment = "development"
    service_name: str = "jsonapi-validation"
    log_level: str = "INFO"

    # Nomes dos parâmetros de query (prefixo dos caminhos de regra)
    page_parameter: str = "page"
    filter_parameter: str = "filter"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Valida configurações.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")

        for name, value in (
            ("JSONAPI_PAGE_PARAMETER", self.page_parameter),
            ("JSONAPI_FILTER_PARAMETER", self.filter_parameter),
        ):
            if not value or "." in value:
                errors.append(f"{name} deve ser não vazio e sem '.': {value!r}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _load_from_env() -> ValidationSettings:
    """Carrega ValidationSettings de variáveis de ambiente."""
    return ValidationSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "jsonapi-validation"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        page_parameter=os.getenv("JSONAPI_PAGE_PARAMETER", "page"),
        filter_parameter=os.getenv("JSONAPI_FILTER_PARAMETER", "filter"),
    )


@lru_cache(maxsize=1)
def get_validation_settings() -> ValidationSettings:
    """Retorna instância cacheada de ValidationSettings."""
    return _load_from_env()
