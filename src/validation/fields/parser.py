"""Parsers das regras dos campos de um recurso (criação e atualização)."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Self

from utils.errors import ValidationSetupError
from validation.fields.protocols import FieldProtocol, ValidatedFieldProtocol
from validation.rule_sets.parser import RulesParser

if TYPE_CHECKING:
    from starlette.requests import Request


class FieldRulesParser(RulesParser):
    """Achata as regras dos campos em caminhos relativos ao documento.

    Sem posição raiz: `"."` só é válido dentro de um campo aninhado.
    Funções de regras recebem `(request, model)`; na criação, model é None.
    """

    kind = "field"
    component = "field_rules_parser"
    member_type = FieldProtocol

    def __init__(self, request: Request | None = None, *, position: str = "") -> None:
        super().__init__(request, position=position)
        self._model: object | None = None

    @abstractmethod
    def _extract(self, field: ValidatedFieldProtocol) -> Any: ...

    def _context(self) -> object | None:
        return self._model

    def _member_key(self, member: FieldProtocol) -> str:
        return member.name

    def _member_rules(self, member: FieldProtocol) -> Any:
        if isinstance(member, ValidatedFieldProtocol):
            return self._extract(member)
        return None


class CreationRulesParser(FieldRulesParser):
    """Regras para criar o recurso."""

    def _extract(self, field: ValidatedFieldProtocol) -> Any:
        return field.rules_for_creation(self._request)


class UpdateRulesParser(FieldRulesParser):
    """Regras para atualizar o recurso; exige `with_model()` antes do parse."""

    def with_model(self, model: object) -> Self:
        self._model = model
        return self

    def _extract(self, field: ValidatedFieldProtocol) -> Any:
        if self._model is None:
            raise ValidationSetupError(
                f"Expecting model to be injected before parsing update rules of field {field.name}."
            )
        return field.rules_for_update(self._request, self._model)
