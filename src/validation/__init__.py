"""Composição de regras de validação de queries JSON:API.

Uso:
    from validation import KeyedSetOfRules, ValidatedPaginator

    rules = KeyedSetOfRules.make().prepend(defaults).rules(custom).all(request, query)
    page_rules = ValidatedPaginator(paginator, request).rules(query)
"""

from validation.fields import (
    CreationRulesParser,
    FieldRuleMap,
    ListOfFields,
    UpdateRulesParser,
    ValidatedField,
    ValidatedFieldWithKeys,
)
from validation.filters import (
    FilterRuleMap,
    QueryManyParser,
    QueryOneParser,
    ValidatedFilter,
    ValidatedFilterWithKeys,
)
from validation.pagination import ValidatedPagination, ValidatedPaginator, supports_validation
from validation.query import Query, QueryRuleSet, QueryRuleSetBuilder, ValidatedQuery
from validation.rule_sets import (
    DeferredRules,
    KeyedSetOfRules,
    ListOfRules,
    StaticRules,
    UnknownSetOfRules,
)

__all__ = [
    "CreationRulesParser",
    "DeferredRules",
    "FieldRuleMap",
    "FilterRuleMap",
    "KeyedSetOfRules",
    "ListOfFields",
    "ListOfRules",
    "Query",
    "QueryManyParser",
    "QueryOneParser",
    "QueryRuleSet",
    "QueryRuleSetBuilder",
    "StaticRules",
    "UnknownSetOfRules",
    "UpdateRulesParser",
    "ValidatedField",
    "ValidatedFieldWithKeys",
    "ValidatedFilter",
    "ValidatedFilterWithKeys",
    "ValidatedPagination",
    "ValidatedPaginator",
    "ValidatedQuery",
    "supports_validation",
]
