"""Lista dos campos validados de um recurso."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from validation.fields.protocols import ValidatedFieldProtocol
from validation.rule_sets.maps import member_rules

if TYPE_CHECKING:
    from starlette.requests import Request


class ListOfFields:
    """Campos validados, com regras já no caminho final.

    Regras em lista ficam sob o nome do campo; regras em mapping já
    trazem os próprios caminhos e são repassadas como estão.
    """

    def __init__(self, *fields: object) -> None:
        self._fields = fields

    def __iter__(self) -> Iterator[ValidatedFieldProtocol]:
        for field in self._fields:
            if isinstance(field, ValidatedFieldProtocol):
                yield field

    def for_creation(self, request: Request | None) -> dict[str, Any]:
        return self._collect(lambda field: field.rules_for_creation(request), request, None)

    def for_update(self, request: Request | None, model: object) -> dict[str, Any]:
        return self._collect(lambda field: field.rules_for_update(request, model), request, model)

    def for_relation(
        self,
        request: Request | None,
        model: object,
        field_name: str,
    ) -> dict[str, Any]:
        """Regras de atualização apenas do relacionamento `field_name`."""
        return self._collect(
            lambda field: (
                field.rules_for_update(request, model) if field.name == field_name else None
            ),
            request,
            model,
        )

    def _collect(
        self,
        extract: Callable[[ValidatedFieldProtocol], Any],
        request: Request | None,
        model: object | None,
    ) -> dict[str, Any]:
        rules: dict[str, Any] = {}

        for name, resolved in member_rules(
            ((field.name, field) for field in self),
            extract,
            request,
            model,
            kind="field",
            component="list_of_fields",
        ):
            if isinstance(resolved, Mapping):
                rules.update(resolved)
            else:
                rules[name] = resolved

        return rules
