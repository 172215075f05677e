"""Parser das regras de filtros para caminhos `filter.*`."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Self

from validation.filters.protocols import FilterProtocol, ValidatedFilterProtocol
from validation.rule_sets.parser import RulesParser
from validation.rule_sets.paths import check_parameter

if TYPE_CHECKING:
    from starlette.requests import Request

    from validation.query.models import Query

DEFAULT_FILTER_PARAMETER = "filter"


class FilterRulesParser(RulesParser):
    """Achata as regras dos filtros sob o parâmetro de filtros.

    Em um mapping, "." aponta para o próprio parâmetro (`filter`).
    Filtros entram apenas quando validados para a cardinalidade da query.

    Args:
        request: Request HTTP atual, ou None.
        position: Parâmetro de query dos filtros (um único segmento).

    Raises:
        RulePathError: Parâmetro vazio ou com ".".
    """

    kind = "filter"
    component = "filter_rules_parser"
    member_type = FilterProtocol

    def __init__(
        self,
        request: Request | None = None,
        *,
        position: str = DEFAULT_FILTER_PARAMETER,
    ) -> None:
        super().__init__(request, position=check_parameter(position, owner="filters"))
        self._query: Query | None = None

    @abstractmethod
    def is_validated(self, filter_: ValidatedFilterProtocol) -> bool:
        """Cardinalidade: o filtro é validado nesta query?"""

    def with_query(self, query: Query) -> Self:
        self._query = query
        return self

    def _context(self) -> Query | None:
        return self._query

    def _member_key(self, member: FilterProtocol) -> str:
        return member.key

    def _member_rules(self, member: FilterProtocol) -> Any:
        if isinstance(member, ValidatedFilterProtocol) and self.is_validated(member):
            return member.validation_rules(self._request, self._query)
        return None


class QueryOneParser(FilterRulesParser):
    """Filtros de queries que retornam zero-a-um recurso."""

    def is_validated(self, filter_: ValidatedFilterProtocol) -> bool:
        return filter_.is_validated_for_one()


class QueryManyParser(FilterRulesParser):
    """Filtros de queries que retornam zero-a-muitos recursos."""

    def is_validated(self, filter_: ValidatedFilterProtocol) -> bool:
        return filter_.is_validated_for_many()
