"""Mixins para campos com regras de validação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from validation.rule_sets.keyed import KeyedSetOfRules
from validation.rule_sets.listed import ListOfRules
from validation.rule_sets.sources import EMPTY_RULES, RuleSource, rule_source

if TYPE_CHECKING:
    from starlette.requests import Request


class ValidatedField:
    """Campo com lista de regras; a classe concreta define `name`.

    `rules()` vale para criação e atualização; `creation_rules()` e
    `update_rules()` são acrescentadas no fim. Os defaults entram após
    "required" (ou "nullable"):

        class Str(ValidatedField):
            def default_rules(self):
                return ["string"]

        Str("title").rules("required").update_rules("filled")
        # criação: ["required", "string"]
        # atualização: ["required", "string", "filled"]
    """

    _field_rules: tuple[Any, ...] = ()
    _creation_rules: tuple[Any, ...] = ()
    _update_rules: tuple[Any, ...] = ()

    def rules(self, *args: Any) -> Self:
        self._field_rules = args
        return self

    def creation_rules(self, *args: Any) -> Self:
        self._creation_rules = args
        return self

    def update_rules(self, *args: Any) -> Self:
        self._update_rules = args
        return self

    def default_rules(self) -> Any:
        return []

    def rules_for_creation(self, request: Request | None) -> list[Any]:
        return self._compose(self._creation_rules).all(request, None)

    def rules_for_update(self, request: Request | None, model: object) -> list[Any]:
        return self._compose(self._update_rules).all(request, model)

    def _compose(self, extra: tuple[Any, ...]) -> ListOfRules:
        return (
            ListOfRules.make()
            .defaults(self.default_rules())
            .rules(*self._field_rules)
            .append(*extra)
        )


class ValidatedFieldWithKeys:
    """Campo com regras indexadas por caminho relativo (objetos e arrays).

    Precedência: default_rules() < rules() < creation/update_rules().
    """

    _field_rules: RuleSource = EMPTY_RULES
    _creation_rules: RuleSource = EMPTY_RULES
    _update_rules: RuleSource = EMPTY_RULES

    def rules(self, rules: object) -> Self:
        self._field_rules = rule_source(rules)
        return self

    def creation_rules(self, rules: object) -> Self:
        self._creation_rules = rule_source(rules)
        return self

    def update_rules(self, rules: object) -> Self:
        self._update_rules = rule_source(rules)
        return self

    def default_rules(self) -> Any:
        return {}

    def rules_for_creation(self, request: Request | None) -> dict[str, Any]:
        return self._compose(self._creation_rules).all(request, None)

    def rules_for_update(self, request: Request | None, model: object) -> dict[str, Any]:
        return self._compose(self._update_rules).all(request, model)

    def _compose(self, extra: RuleSource) -> KeyedSetOfRules:
        return (
            KeyedSetOfRules.make()
            .prepend(self.default_rules())
            .rules(self._field_rules)
            .append(extra)
        )
