"""Contratos dos schemas consultados na montagem de regras de query."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol


class QuerySchemaProtocol(Protocol):
    """Schema de query de um tipo de recurso.

    Opcionalmente expõe `validation_messages()` e
    `validation_attributes()` para o motor de validação.
    """

    def filters(self) -> Iterable[Any]: ...

    def pagination(self) -> object | None: ...


class RelationProtocol(Protocol):
    """Relacionamento cujos filtros se somam aos do schema."""

    def filters(self) -> Iterable[Any]: ...
