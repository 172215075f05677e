"""Configuração do pytest para o adaptador de validação JSON:API."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Settings são cacheadas; cada teste lê o ambiente do zero."""
    from config.settings import get_validation_settings

    get_validation_settings.cache_clear()
    yield
    get_validation_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """configure_logging altera o nível do root logger."""
    import logging

    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
