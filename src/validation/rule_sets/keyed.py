"""Composer de conjuntos de regras indexados por caminho de campo."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from validation.rule_sets.sources import (
    EMPTY_RULES,
    RuleSource,
    describe_source,
    resolve_rules,
    rule_source,
)


class KeyedSetOfRules:
    """Mescla até três fontes de regras em um mapping plano.

    Ordem de precedência (a última vence em chaves repetidas):
    prepend -> rules -> append.

    Uso:
        rules = (
            KeyedSetOfRules.make()
            .prepend({"number": ["integer"]})
            .rules(lambda request, query: {"size": ["integer", "max:100"]})
            .all(request, query)
        )
    """

    def __init__(self) -> None:
        self._prepend: RuleSource = EMPTY_RULES
        self._rules: RuleSource = EMPTY_RULES
        self._append: RuleSource = EMPTY_RULES

    @classmethod
    def make(cls) -> Self:
        return cls()

    def prepend(self, rules: object) -> Self:
        """Regras padrão, de menor precedência."""
        self._prepend = rule_source(rules)
        return self

    def rules(self, rules: object) -> Self:
        """Regras do chamador; sobrescrevem as de `prepend`."""
        self._rules = rule_source(rules)
        return self

    def append(self, rules: object) -> Self:
        """Regras finais; sobrescrevem todas as anteriores."""
        self._append = rule_source(rules)
        return self

    def all(self, request: Any = None, query: Any = None) -> dict[str, Any]:
        """Resolve as fontes registradas e retorna o mapping mesclado.

        Raises:
            ContractViolationError: Se alguma fonte resolver para algo
                que não é mapping nem vazio.
        """
        merged: dict[str, Any] = {}

        for source in (self._prepend, self._rules, self._append):
            resolved = resolve_rules(
                source,
                request,
                query,
                accept=(Mapping,),
                owner=describe_source(source),
                component="keyed_set_of_rules",
            )
            if resolved:
                merged.update(resolved)

        return merged

    def __call__(self, request: Any = None, query: Any = None) -> dict[str, Any]:
        return self.all(request, query)
