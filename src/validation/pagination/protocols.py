"""Capacidade opcional de paginators: expor regras de validação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from starlette.requests import Request

    from validation.query.models import Query


@runtime_checkable
class ValidatedPaginatorProtocol(Protocol):
    """Paginator que declara regras para os seus parâmetros de página.

    As chaves são relativas ao parâmetro de página ("number", não
    "page.number"). O retorno pode ser mapping, função
    `(request, query) -> mapping | None`, ou None.
    """

    def validation_rules(self, request: Request | None, query: Query) -> Any: ...


def supports_validation(paginator: object) -> bool:
    """Consulta a capacidade de validação do paginator."""
    return isinstance(paginator, ValidatedPaginatorProtocol)
