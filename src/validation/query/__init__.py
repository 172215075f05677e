"""Montagem das regras de validação de queries JSON:API."""

from validation.query.builder import QueryRuleSetBuilder
from validation.query.models import Query, QueryKind, QueryRuleSet
from validation.query.parameters import parse_query_parameters
from validation.query.protocols import QuerySchemaProtocol, RelationProtocol
from validation.query.validated_query import ValidatedQuery

__all__ = [
    "Query",
    "QueryKind",
    "QueryRuleSet",
    "QueryRuleSetBuilder",
    "QuerySchemaProtocol",
    "RelationProtocol",
    "ValidatedQuery",
    "parse_query_parameters",
]
