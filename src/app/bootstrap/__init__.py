"""Bootstrap: inicialização do adaptador de validação.

Uso:
    from app.bootstrap import initialize_app

    # Na inicialização do serviço, antes de montar as rotas
    initialize_app()
"""

from __future__ import annotations

import logging

from config.logging import configure_logging
from config.settings import get_validation_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Valida settings e configura logging estruturado JSON.

    Em `staging`/`production` settings inválidas impedem o boot.
    Em `development` apenas gera alerta.

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito.
    """
    settings = get_validation_settings()
    errors = settings.validate()

    level = settings.log_level if not any("LOG_LEVEL" in e for e in errors) else "INFO"
    configure_logging(level=level, service_name=settings.service_name)

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": settings.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if settings.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {settings.environment}:\n{details}")


def initialize_test_app() -> None:
    """Inicializa para testes: DEBUG e serviço com sufixo _test."""
    settings = get_validation_settings()
    configure_logging(level="DEBUG", service_name=f"{settings.service_name}_test")
