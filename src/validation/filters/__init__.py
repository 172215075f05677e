"""Validação de parâmetros de filtro (`filter.*`)."""

from validation.filters.parser import (
    DEFAULT_FILTER_PARAMETER,
    FilterRulesParser,
    QueryManyParser,
    QueryOneParser,
)
from validation.filters.protocols import FilterProtocol, ValidatedFilterProtocol
from validation.filters.rule_map import FilterRuleMap
from validation.filters.validated import (
    FilterCardinality,
    ValidatedFilter,
    ValidatedFilterWithKeys,
)

__all__ = [
    "DEFAULT_FILTER_PARAMETER",
    "FilterCardinality",
    "FilterProtocol",
    "FilterRuleMap",
    "FilterRulesParser",
    "QueryManyParser",
    "QueryOneParser",
    "ValidatedFilter",
    "ValidatedFilterProtocol",
    "ValidatedFilterWithKeys",
]
