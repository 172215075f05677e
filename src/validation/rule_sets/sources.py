"""Fontes de regras: estáticas ou diferidas.

Uma fonte de regras é um tagged union explícito:

- StaticRules: mapping (campo -> lista de regras) ou lista de regras fixa.
- DeferredRules: função `(request, query) -> regras | None` avaliada no
  momento da validação.

Valores crus (dict, list, função, None) são normalizados por `rule_source()`
no registro, e `resolve_rules()` é o único ponto que avalia e checa o
contrato do resultado.
"""

from __future__ import annotations

import functools
import types
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from config.logging import get_logger, log_contract_violation
from utils.errors import ContractViolationError

logger = get_logger(__name__)

# Tipos de função tratados como fábrica de regras quando passados
# como argumento único de um composer de listas.
_FACTORY_TYPES = (
    types.FunctionType,
    types.MethodType,
    functools.partial,
)

_SHAPE_NAMES = {
    Mapping: "a mapping",
    list: "a list",
    tuple: "a list",
}


@dataclass(frozen=True, slots=True)
class StaticRules:
    """Regras fixas no registro (None equivale a vazio)."""

    rules: Any = None


@dataclass(frozen=True, slots=True)
class DeferredRules:
    """Regras calculadas sob demanda a partir de (request, query)."""

    factory: Callable[..., Any]

    @property
    def name(self) -> str:
        return getattr(self.factory, "__qualname__", type(self.factory).__name__)


RuleSource = StaticRules | DeferredRules

EMPTY_RULES = StaticRules()


def is_rule_factory(value: object) -> bool:
    """True se o valor é uma fábrica explícita de regras.

    Objetos-regra com `__call__` não contam: para diferir um deles,
    envolva em DeferredRules.
    """
    return isinstance(value, (DeferredRules, *_FACTORY_TYPES))


def rule_source(value: object) -> RuleSource:
    """Normaliza um conjunto de regras cru para RuleSource.

    Um conjunto de regras nunca é ele próprio chamável, então qualquer
    chamável que não seja mapping é tratado como diferido.
    """
    if isinstance(value, StaticRules | DeferredRules):
        return value
    if value is None:
        return EMPTY_RULES
    if callable(value) and not isinstance(value, Mapping):
        return DeferredRules(value)
    return StaticRules(value)


def describe_source(source: RuleSource) -> str:
    """Nome legível da fonte para mensagens de contrato."""
    if isinstance(source, DeferredRules):
        return f"closure {source.name}"
    return "static rules"


def resolve_rules(
    source: RuleSource,
    request: Any,
    query: Any,
    *,
    accept: tuple[type, ...],
    owner: str,
    component: str,
) -> Any:
    """Avalia a fonte e valida o formato do resultado.

    Args:
        source: Fonte a avaliar (diferida é chamada uma única vez).
        request: Request HTTP atual ou None.
        query: Query em validação.
        accept: Tipos aceitos para o resultado não vazio.
        owner: Colaborador responsável (aparece na mensagem de erro).
        component: Componente que resolve (campo `component` do log).

    Returns:
        O valor resolvido, ou None se vazio.

    Raises:
        ContractViolationError: Se o resultado não é None, vazio ou de
            um dos tipos aceitos.
    """
    if isinstance(source, DeferredRules):
        value = source.factory(request, query)
    else:
        value = source.rules

    if value is None:
        return None

    if isinstance(value, Mapping | list | tuple) and len(value) == 0:
        return None

    if not isinstance(value, accept):
        returned = type(value).__name__
        log_contract_violation(logger, component, owner, returned)
        raise ContractViolationError(
            f"Validation rules for {owner} must resolve to "
            f"{_expected(accept)} or None, got {returned}."
        )

    return value


def _expected(accept: tuple[type, ...]) -> str:
    names = dict.fromkeys(_SHAPE_NAMES.get(kind, kind.__name__) for kind in accept)
    return " or ".join(names)
