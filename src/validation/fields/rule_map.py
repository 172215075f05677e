"""Mapa de regras dos campos, indexado pelo nome do campo."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Self

from validation.fields.protocols import ValidatedFieldProtocol
from validation.rule_sets.maps import member_rules, with_array_keys

if TYPE_CHECKING:
    from starlette.requests import Request


class FieldRuleMap:
    """Regras de um objeto de campos (ex: `attributes`), relativas a ele.

    A regra em "." restringe o objeto aos campos validados, em ordem
    alfabética.
    """

    def __init__(self, *fields: object) -> None:
        self._fields = fields

    @classmethod
    def make(cls, fields: Iterable[object]) -> Self:
        return cls(*fields)

    def creation(self, request: Request | None) -> dict[str, Any]:
        return self._all(lambda field: field.rules_for_creation(request), request, None)

    def update(self, request: Request | None, model: object) -> dict[str, Any]:
        return self._all(lambda field: field.rules_for_update(request, model), request, model)

    def _all(
        self,
        extract: Callable[[ValidatedFieldProtocol], Any],
        request: Request | None,
        model: object | None,
    ) -> dict[str, Any]:
        validated = (
            (field.name, field)
            for field in self._fields
            if isinstance(field, ValidatedFieldProtocol)
        )

        return with_array_keys(
            dict(
                member_rules(
                    validated,
                    extract,
                    request,
                    model,
                    kind="field",
                    component="field_rule_map",
                )
            )
        )
