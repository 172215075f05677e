"""Mapa de regras dos filtros de uma query, indexado pela chave do filtro."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Self

from validation.filters.protocols import ValidatedFilterProtocol
from validation.rule_sets.maps import member_rules, with_array_keys

if TYPE_CHECKING:
    from starlette.requests import Request

    from validation.query.models import Query


class FilterRuleMap:
    """Regras do objeto `filter` inteiro, relativas a ele.

    Filtros sem capacidade de validação ou sem regras ficam de fora.
    A regra em "." restringe o objeto às chaves dos filtros validados:

        FilterRuleMap(title, tags).rules(request, query)
        # {".": ["array:tags,title"], "tags": [...], "title": [...]}
    """

    def __init__(self, *filters: object) -> None:
        self._filters = filters

    @classmethod
    def make(cls, filters: Iterable[object]) -> Self:
        return cls(*filters)

    def rules(self, request: Request | None, query: Query) -> dict[str, Any]:
        validated = (
            (filter_.key, filter_)
            for filter_ in self._filters
            if isinstance(filter_, ValidatedFilterProtocol)
        )

        return with_array_keys(
            dict(
                member_rules(
                    validated,
                    lambda filter_: filter_.validation_rules(request, query),
                    request,
                    query,
                    kind="filter",
                    component="filter_rule_map",
                )
            )
        )
