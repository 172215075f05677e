"""Visão de um schema de query durante uma passada de validação."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from validation.pagination.paginator import DEFAULT_PAGE_PARAMETER, ValidatedPaginator

if TYPE_CHECKING:
    from starlette.requests import Request

    from validation.query.protocols import QuerySchemaProtocol, RelationProtocol


class ValidatedQuery:
    """Agrega filtros, paginação e mensagens do schema para um request.

    Args:
        schema: Schema de query do recurso.
        request: Request HTTP atual, ou None fora de HTTP.
        page_parameter: Parâmetro de query da paginação.
    """

    def __init__(
        self,
        schema: QuerySchemaProtocol,
        request: Request | None = None,
        *,
        page_parameter: str = DEFAULT_PAGE_PARAMETER,
    ) -> None:
        self._schema = schema
        self._request = request
        self._page_parameter = page_parameter
        self._relation: RelationProtocol | None = None
        self._has_paginator = False
        self._paginator: ValidatedPaginator | None = None

    @property
    def request(self) -> Request | None:
        return self._request

    def with_relation(self, relation: RelationProtocol) -> None:
        """Inclui os filtros do relacionamento consultado."""
        self._relation = relation

    def filters(self) -> Iterator[Any]:
        yield from self._schema.filters()
        if self._relation is not None:
            yield from self._relation.filters()

    def pagination(self) -> ValidatedPaginator | None:
        """Paginator decorado, criado uma única vez (None sem paginação)."""
        if self._has_paginator:
            return self._paginator

        paginator = self._schema.pagination()
        self._has_paginator = True
        self._paginator = (
            ValidatedPaginator(paginator, self._request, prefix=self._page_parameter)
            if paginator is not None
            else None
        )
        return self._paginator

    def messages(self) -> dict[str, Any]:
        return self._optional("validation_messages")

    def attributes(self) -> dict[str, Any]:
        return self._optional("validation_attributes")

    def _optional(self, name: str) -> dict[str, Any]:
        method = getattr(self._schema, name, None)
        if not callable(method):
            return {}
        return dict(method() or {})
