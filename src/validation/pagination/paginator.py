"""Decorator que publica as regras de um paginator no namespace `page.*`."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from validation.pagination.protocols import supports_validation
from validation.rule_sets.paths import check_parameter
from validation.rule_sets.sources import resolve_rules, rule_source

if TYPE_CHECKING:
    from starlette.requests import Request

    from validation.query.models import Query

DEFAULT_PAGE_PARAMETER = "page"


class ValidatedPaginator:
    """Traduz as regras do paginator para caminhos de query.

    Mantém referências emprestadas ao paginator e ao request: uma
    instância vale para uma única passada de validação.

    Args:
        paginator: Paginator do schema (com ou sem capacidade de validação).
        request: Request HTTP atual, ou None fora de HTTP.
        prefix: Parâmetro de query da paginação (um único segmento).

    Raises:
        RulePathError: Prefixo vazio ou com ".".
    """

    def __init__(
        self,
        paginator: object,
        request: Request | None = None,
        *,
        prefix: str = DEFAULT_PAGE_PARAMETER,
    ) -> None:
        self._paginator = paginator
        self._request = request
        self._prefix = check_parameter(prefix, owner="pagination")

    @property
    def paginator(self) -> object:
        return self._paginator

    def rules(self, query: Query) -> dict[str, Any]:
        """Retorna as regras do paginator com chaves `page.<chave>`.

        Raises:
            ContractViolationError: Se o paginator (ou a função que ele
                retornou) produzir algo que não é mapping nem None.
        """
        return {
            f"{self._prefix}.{key}": value
            for key, value in self._validation_rules(query).items()
        }

    def _validation_rules(self, query: Query) -> Mapping[str, Any]:
        if not supports_validation(self._paginator):
            return {}

        rules = self._paginator.validation_rules(self._request, query)  # type: ignore[attr-defined]
        resolved = resolve_rules(
            rule_source(rules),
            self._request,
            query,
            accept=(Mapping,),
            owner=f"paginator {type(self._paginator).__qualname__}",
            component="validated_paginator",
        )
        return resolved or {}
