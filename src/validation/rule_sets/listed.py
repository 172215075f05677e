"""Composer da lista de regras de um único campo."""

from __future__ import annotations

from typing import Any, Self

from validation.rule_sets.sources import (
    EMPTY_RULES,
    RuleSource,
    StaticRules,
    describe_source,
    is_rule_factory,
    resolve_rules,
    rule_source,
)

# Regras após as quais os defaults são inseridos, em ordem de preferência
_ANCHOR_RULES = ("required", "nullable")


def parse_list_args(args: tuple[Any, ...]) -> RuleSource:
    """Interpreta argumentos posicionais como fonte de lista.

    Uma única lista/tupla ou fábrica é usada como está; qualquer outra
    combinação vira a própria lista de regras.
    """
    if len(args) == 1:
        value = args[0]
        if isinstance(value, list | tuple | StaticRules) or is_rule_factory(value):
            return rule_source(value)
    return StaticRules(list(args))


class ListOfRules:
    """Monta a lista de regras de um campo a partir de defaults, rules e append.

    Os defaults entram logo após "required" (ou "nullable", na falta dele),
    para que regras de presença continuem na frente:

        ListOfRules.make().defaults("string").rules("required", "max:10").all()
        # ["required", "string", "max:10"]
    """

    def __init__(self) -> None:
        self._defaults: RuleSource = EMPTY_RULES
        self._rules: RuleSource = EMPTY_RULES
        self._append: RuleSource = EMPTY_RULES

    @classmethod
    def make(cls) -> Self:
        return cls()

    def defaults(self, *args: Any) -> Self:
        self._defaults = parse_list_args(args)
        return self

    def rules(self, *args: Any) -> Self:
        self._rules = parse_list_args(args)
        return self

    def append(self, *args: Any) -> Self:
        self._append = parse_list_args(args)
        return self

    def all(self, request: Any = None, query: Any = None) -> list[Any]:
        rules = [
            *self._resolve(self._rules, request, query),
            *self._resolve(self._append, request, query),
        ]

        defaults = self._resolve(self._defaults, request, query)

        if not defaults:
            return rules

        for anchor in _ANCHOR_RULES:
            position = _index_of(rules, anchor)
            if position is not None:
                return [*rules[: position + 1], *defaults, *rules[position + 1 :]]

        return [*defaults, *rules]

    def __call__(self, request: Any = None, query: Any = None) -> list[Any]:
        return self.all(request, query)

    @staticmethod
    def _resolve(source: RuleSource, request: Any, query: Any) -> list[Any]:
        resolved = resolve_rules(
            source,
            request,
            query,
            accept=(list, tuple),
            owner=describe_source(source),
            component="list_of_rules",
        )
        return [item for item in resolved or () if item is not None]


def _index_of(rules: list[Any], name: str) -> int | None:
    # Comparação só entre strings: objetos-regra podem sobrescrever __eq__
    for index, rule in enumerate(rules):
        if isinstance(rule, str) and rule == name:
            return index
    return None
