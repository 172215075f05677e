"""Mixin para paginators que validam os próprios parâmetros."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from validation.rule_sets.keyed import KeyedSetOfRules
from validation.rule_sets.sources import EMPTY_RULES, RuleSource, rule_source

if TYPE_CHECKING:
    from starlette.requests import Request

    from validation.query.models import Query


class ValidatedPagination:
    """Implementa ValidatedPaginatorProtocol para uma classe de paginator.

    Subclasses sobrescrevem `default_rules()`; o chamador complementa
    via `rules()`, que tem precedência sobre os defaults:

        class PagePagination(ValidatedPagination):
            def default_rules(self):
                return {"number": ["integer", "min:1"]}

        paginator = PagePagination().rules({"size": ["integer", "max:100"]})
    """

    _caller_rules: RuleSource = EMPTY_RULES

    def rules(self, rules: object) -> Self:
        self._caller_rules = rule_source(rules)
        return self

    def default_rules(self) -> Any:
        return {}

    def validation_rules(self, request: Request | None, query: Query) -> dict[str, Any]:
        return (
            KeyedSetOfRules.make()
            .prepend(self.default_rules())
            .rules(self._caller_rules)
            .all(request, query)
        )
