"""Composer que infere o formato (lista ou mapping) das regras."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from validation.rule_sets.keyed import KeyedSetOfRules
from validation.rule_sets.listed import ListOfRules
from validation.rule_sets.sources import (
    EMPTY_RULES,
    RuleSource,
    StaticRules,
    describe_source,
    is_rule_factory,
    resolve_rules,
    rule_source,
)


def _parse(args: tuple[Any, ...]) -> RuleSource:
    if len(args) == 1:
        value = args[0]
        if isinstance(value, Mapping | StaticRules) or is_rule_factory(value):
            return rule_source(value)
        if value is None:
            return EMPTY_RULES
        if isinstance(value, list | tuple):
            return StaticRules(list(value))
        return StaticRules([value])
    return StaticRules(list(args))


class UnknownSetOfRules:
    """Composer para colaboradores que podem responder lista ou mapping.

    O formato é decidido pela primeira fonte não vazia, na ordem
    defaults -> rules -> append: lista delega para ListOfRules, mapping
    para KeyedSetOfRules. Sem regras, retorna lista vazia.
    """

    def __init__(self) -> None:
        self._defaults: RuleSource = EMPTY_RULES
        self._rules: RuleSource = EMPTY_RULES
        self._append: RuleSource = EMPTY_RULES

    @classmethod
    def make(cls) -> Self:
        return cls()

    def defaults(self, *args: Any) -> Self:
        self._defaults = _parse(args)
        return self

    def prepend(self, *args: Any) -> Self:
        return self.defaults(*args)

    def rules(self, *args: Any) -> Self:
        self._rules = _parse(args)
        return self

    def append(self, *args: Any) -> Self:
        self._append = _parse(args)
        return self

    def all(self, request: Any = None, query: Any = None) -> list[Any] | dict[str, Any]:
        defaults = self._evaluate(self._defaults, request, query)
        if defaults is not None:
            return self._compose(
                defaults,
                request,
                query,
                defaults=StaticRules(defaults),
                rules=self._rules,
                append=self._append,
            )

        rules = self._evaluate(self._rules, request, query)
        if rules is not None:
            return self._compose(
                rules,
                request,
                query,
                defaults=EMPTY_RULES,
                rules=StaticRules(rules),
                append=self._append,
            )

        append = self._evaluate(self._append, request, query)
        if append is None:
            return []

        return self._compose(
            append,
            request,
            query,
            defaults=EMPTY_RULES,
            rules=EMPTY_RULES,
            append=StaticRules(append),
        )

    def __call__(self, request: Any = None, query: Any = None) -> list[Any] | dict[str, Any]:
        return self.all(request, query)

    @staticmethod
    def _evaluate(source: RuleSource, request: Any, query: Any) -> Any:
        return resolve_rules(
            source,
            request,
            query,
            accept=(Mapping, list, tuple),
            owner=describe_source(source),
            component="unknown_set_of_rules",
        )

    @staticmethod
    def _compose(
        shape: Any,
        request: Any,
        query: Any,
        *,
        defaults: RuleSource,
        rules: RuleSource,
        append: RuleSource,
    ) -> list[Any] | dict[str, Any]:
        if isinstance(shape, Mapping):
            return (
                KeyedSetOfRules.make()
                .prepend(defaults)
                .rules(rules)
                .append(append)
                .all(request, query)
            )

        return (
            ListOfRules.make()
            .defaults(defaults)
            .rules(rules)
            .append(append)
            .all(request, query)
        )
