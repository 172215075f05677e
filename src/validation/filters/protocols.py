"""Contratos de filtros de query."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from starlette.requests import Request

    from validation.query.models import Query


@runtime_checkable
class FilterProtocol(Protocol):
    """Filtro declarado no schema, identificado pela sua chave."""

    @property
    def key(self) -> str: ...


@runtime_checkable
class ValidatedFilterProtocol(Protocol):
    """Filtro que declara regras para o seu valor.

    Regras vazias ou None significam que o filtro não é validado.
    """

    @property
    def key(self) -> str: ...

    def validation_rules(self, request: Request | None, query: Query) -> Any: ...

    def is_validated_for_one(self) -> bool: ...

    def is_validated_for_many(self) -> bool: ...
