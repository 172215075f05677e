"""Montagem do conjunto final de regras de uma query."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from config.logging import get_logger
from config.settings import ValidationSettings, get_validation_settings
from validation.filters.parser import FilterRulesParser, QueryManyParser, QueryOneParser
from validation.rule_sets.keyed import KeyedSetOfRules

if TYPE_CHECKING:
    from validation.query.models import Query
    from validation.query.validated_query import ValidatedQuery

logger = get_logger(__name__)


class QueryRuleSetBuilder:
    """Mescla regras padrão, de filtros e de paginação.

    Precedência: defaults < filtros < paginação. Queries de zero-a-um
    recurso não recebem regras de paginação.

    Args:
        validated_query: Schema de query ligado ao request atual.
        defaults: Regras padrão dos parâmetros (mapping, função ou None),
            fornecidas pelo motor de regras JSON:API.
        settings: Settings (default: get_validation_settings()).
    """

    def __init__(
        self,
        validated_query: ValidatedQuery,
        defaults: object = None,
        *,
        settings: ValidationSettings | None = None,
    ) -> None:
        self._validated = validated_query
        self._defaults = defaults
        self._settings = settings or get_validation_settings()

    def build(self, query: Query) -> dict[str, Any]:
        if query.kind == "one":
            return self.for_one(query)
        return self.for_many(query)

    def for_many(self, query: Query) -> dict[str, Any]:
        paginator = self._validated.pagination()
        page = paginator.rules(query) if paginator is not None else {}

        return self._compose(
            query,
            QueryManyParser(self._validated.request, position=self._settings.filter_parameter),
            page,
        )

    def for_one(self, query: Query) -> dict[str, Any]:
        return self._compose(
            query,
            QueryOneParser(self._validated.request, position=self._settings.filter_parameter),
            {},
        )

    def _compose(
        self,
        query: Query,
        parser: FilterRulesParser,
        page: dict[str, Any],
    ) -> dict[str, Any]:
        filters = parser.with_query(query).parse(self._validated.filters())

        rules = (
            KeyedSetOfRules.make()
            .prepend(self._defaults)
            .rules(filters)
            .append(page)
            .all(self._validated.request, query)
        )

        logger.debug(
            "query_rules_built",
            extra={
                "resource_type": query.resource_type,
                "query_kind": query.kind,
                "filter_rule_count": len(filters),
                "page_rule_count": len(page),
                "rule_count": len(rules),
            },
        )
        return rules
