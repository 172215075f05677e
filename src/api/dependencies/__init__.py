"""Dependencies FastAPI do adaptador de validação."""

from api.dependencies.query_rules import query_from_request, query_rules_dependency

__all__ = [
    "query_from_request",
    "query_rules_dependency",
]
