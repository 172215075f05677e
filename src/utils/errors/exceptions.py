"""Exceções de montagem de regras de validação.

Falhas aqui são erros de programação em colaboradores (paginators,
filtros, closures de regras) e nunca são transitórias: não há retry.
"""

from __future__ import annotations


class ValidationSetupError(RuntimeError):
    """Base para falhas na montagem de um conjunto de regras."""


class ContractViolationError(ValidationSetupError, AssertionError):
    """Colaborador retornou valor fora do contrato declarado.

    Ex: closure de regras que deveria retornar mapping ou None
    retornou um escalar.
    """


class RulePathError(ValidationSetupError, ValueError):
    """Caminho de regra inválido (ex: chave "." sem posição, parâmetro vazio)."""
