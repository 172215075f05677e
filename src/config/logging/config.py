"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Níveis configuráveis por ambiente

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="jsonapi-validation")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.debug("query_rules_built", extra={"rule_count": 4})

Nunca logar valores de regras ou parâmetros de query: apenas chaves e contagens.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter
from config.settings import VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Callable

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "jsonapi-validation"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    formatter = create_json_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)


def log_contract_violation(
    logger: logging.Logger,
    component: str,
    collaborator: str,
    returned_type: str,
) -> None:
    """Log observável de colaborador fora do contrato (sem valores).

    Chamado imediatamente antes de levantar ContractViolationError.

    Args:
        logger: Logger instance.
        component: Componente que detectou a violação (ex: "validated_paginator").
        collaborator: Nome do tipo ou chave do colaborador ofensor.
        returned_type: Nome do tipo retornado pelo colaborador.

    Exemplo:
        log_contract_violation(
            logger,
            "validated_paginator",
            collaborator="PagePagination",
            returned_type="int",
        )
    """
    logger.error(
        "Rule contract violated in %s",
        component,
        extra={
            "contract_violation": True,
            "component": component,
            "collaborator": collaborator,
            "returned_type": returned_type,
        },
    )
