"""Contratos de campos de recurso (attributes e relationships)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from starlette.requests import Request


@runtime_checkable
class FieldProtocol(Protocol):
    """Campo declarado no schema do recurso."""

    @property
    def name(self) -> str: ...


@runtime_checkable
class ValidatedFieldProtocol(Protocol):
    """Campo que declara regras para criação e atualização do recurso.

    Regras vazias ou None significam que o campo não é validado. O
    retorno também pode ser uma função `(request, model) -> regras | None`.
    """

    @property
    def name(self) -> str: ...

    def rules_for_creation(self, request: Request | None) -> Any: ...

    def rules_for_update(self, request: Request | None, model: object) -> Any: ...
