"""Validação de parâmetros de paginação (`page.*`)."""

from validation.pagination.paginator import DEFAULT_PAGE_PARAMETER, ValidatedPaginator
from validation.pagination.protocols import ValidatedPaginatorProtocol, supports_validation
from validation.pagination.validated import ValidatedPagination

__all__ = [
    "DEFAULT_PAGE_PARAMETER",
    "ValidatedPagination",
    "ValidatedPaginator",
    "ValidatedPaginatorProtocol",
    "supports_validation",
]
