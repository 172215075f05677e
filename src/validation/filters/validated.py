"""Mixins para filtros com regras de validação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from validation.rule_sets.keyed import KeyedSetOfRules
from validation.rule_sets.sources import EMPTY_RULES, RuleSource, rule_source
from validation.rule_sets.unknown import UnknownSetOfRules

if TYPE_CHECKING:
    from starlette.requests import Request

    from validation.query.models import Query


class FilterCardinality:
    """Em quais queries (zero-a-um, zero-a-muitos) o filtro é validado."""

    _validate_to_one: bool = True
    _validate_to_many: bool = True

    def only_to_one(self) -> Self:
        """Valida apenas em queries de zero-a-um recurso."""
        self._validate_to_one = True
        self._validate_to_many = False
        return self

    def only_to_many(self) -> Self:
        """Valida apenas em queries de zero-a-muitos recursos."""
        self._validate_to_one = False
        self._validate_to_many = True
        return self

    def is_validated_for_one(self) -> bool:
        return self._validate_to_one

    def is_validated_for_many(self) -> bool:
        return self._validate_to_many


class ValidatedFilter(FilterCardinality):
    """Implementa ValidatedFilterProtocol (a classe concreta define `key`).

    As regras podem ser uma lista (aplicada a `filter.<key>`) ou um
    mapping de caminhos relativos, onde "." é o próprio filtro:

        WhereIn("ids").rules({".": ["array"], "*": ["string"]})
    """

    _filter_rules: tuple[Any, ...] = ()

    def rules(self, *args: Any) -> Self:
        self._filter_rules = args
        return self

    def default_rules(self) -> Any:
        return []

    def validation_rules(self, request: Request | None, query: Query) -> list[Any] | dict[str, Any]:
        return (
            UnknownSetOfRules.make()
            .defaults(self.default_rules())
            .rules(*self._filter_rules)
            .all(request, query)
        )


class ValidatedFilterWithKeys(FilterCardinality):
    """Filtro cujas regras são sempre um mapping de caminhos relativos.

    As regras do chamador sobrescrevem `default_rules()` chave a chave.
    """

    _filter_rules: RuleSource = EMPTY_RULES

    def rules(self, rules: object) -> Self:
        self._filter_rules = rule_source(rules)
        return self

    def default_rules(self) -> Any:
        return {}

    def validation_rules(self, request: Request | None, query: Query) -> dict[str, Any]:
        return (
            KeyedSetOfRules.make()
            .prepend(self.default_rules())
            .rules(self._filter_rules)
            .all(request, query)
        )
