"""Testes para FilterRulesParser (QueryOneParser / QueryManyParser)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from utils.errors import ContractViolationError, RulePathError
from validation.filters import QueryManyParser, QueryOneParser, ValidatedFilter
from validation.query.models import Query


class Where(ValidatedFilter):
    """Filtro validado de teste."""

    def __init__(self, key: str) -> None:
        self._key = key

    @property
    def key(self) -> str:
        return self._key


class RulesWithKey:
    """Fábrica de regras chamável que também expõe `key`."""

    def __init__(self, key: str, rules: list[str]) -> None:
        self.key = key
        self._rules = rules
        self.calls: list[tuple[object, object]] = []

    def __call__(self, request, query):
        self.calls.append((request, query))
        return self._rules


class PlainFilter:
    """Filtro sem capacidade de validação."""

    def __init__(self, key: str) -> None:
        self.key = key


@pytest.fixture
def query() -> Query:
    return Query(resource_type="posts")


class TestFilterRulesParser:
    """Testes de achatamento das regras de filtros."""

    def test_list_rules_use_filter_key(self, query) -> None:
        """Lista de regras vira filter.<key>."""
        rules = QueryManyParser().with_query(query).parse([Where("title").rules("string")])

        assert rules == {"filter.title": ["string"]}

    def test_filters_without_rules_are_skipped(self, query) -> None:
        """Filtro sem regras ou sem capacidade não gera caminho."""
        rules = QueryManyParser().with_query(query).parse(
            [Where("slug"), PlainFilter("author"), Where("id").rules("integer")]
        )

        assert rules == {"filter.id": ["integer"]}

    def test_nested_rules_with_self_key(self, query) -> None:
        """"." aponta para o próprio filtro e chaves descem um nível."""
        rules = QueryManyParser().with_query(query).parse(
            [Where("ids").rules({".": ["array"], "*": ["string"]})]
        )

        assert rules == {"filter.ids": ["array"], "filter.ids.*": ["string"]}

    def test_cardinality_is_respected(self, query) -> None:
        """only_to_one/only_to_many escolhem o parser."""
        filters = [
            Where("one").rules("string").only_to_one(),
            Where("many").rules("string").only_to_many(),
            Where("both").rules("string"),
        ]

        assert QueryOneParser().with_query(query).parse(filters) == {
            "filter.one": ["string"],
            "filter.both": ["string"],
        }
        assert QueryManyParser().with_query(query).parse(filters) == {
            "filter.many": ["string"],
            "filter.both": ["string"],
        }

    def test_mapping_input_with_raw_values(self, query) -> None:
        """Mapping aceita regras cruas, funções e None."""
        request = MagicMock(name="request")
        factory = MagicMock(return_value={".": ["array"], "*": ["integer"]})

        rules = QueryManyParser(request).with_query(query).parse(
            {"status": ["string"], "tags": factory, "skip": None, "empty": []}
        )

        assert rules == {
            "filter.status": ["string"],
            "filter.tags": ["array"],
            "filter.tags.*": ["integer"],
        }
        factory.assert_called_once_with(request, query)

    def test_filter_in_mapping_uses_mapping_key(self, query) -> None:
        """Em mapping, a chave do mapping tem precedência."""
        rules = QueryManyParser().with_query(query).parse({"alias": Where("title").rules("string")})

        assert rules == {"filter.alias": ["string"]}

    def test_filter_rules_receive_request_and_query(self, query) -> None:
        """Regras diferidas do filtro recebem (request, query)."""
        request = MagicMock(name="request")
        seen = []

        def rules(r, q):
            seen.append((r, q))
            return ["date"]

        QueryManyParser(request).with_query(query).parse([Where("published").rules(rules)])

        assert seen == [(request, query)]

    def test_tuple_rules_become_list(self, query) -> None:
        rules = QueryManyParser().with_query(query).parse({"id": ("string", "uuid")})

        assert rules == {"filter.id": ["string", "uuid"]}

    def test_scalar_from_closure_raises(self, query) -> None:
        """Escalar viola o contrato e cita o filtro."""
        parser = QueryManyParser().with_query(query)

        with pytest.raises(ContractViolationError, match="filter tags"):
            parser.parse({"tags": lambda r, q: "string"})

    def test_self_key_at_root_uses_position(self, query) -> None:
        """"." na raiz aponta para o próprio parâmetro filter."""
        rules = QueryManyParser().with_query(query).parse({".": ["array"]})

        assert rules == {"filter": ["array"]}

    @pytest.mark.parametrize("position", ["", "filter.nested"])
    def test_invalid_position_raises(self, position: str) -> None:
        """Parâmetro de filtros vazio ou com "." é rejeitado."""
        with pytest.raises(RulePathError):
            QueryManyParser(position=position)

    def test_callable_with_key_is_deferred(self, query) -> None:
        """Objeto chamável com `key` é função de regras, não filtro."""
        request = MagicMock(name="request")
        factory = RulesWithKey("ignored", ["date"])

        rules = QueryManyParser(request).with_query(query).parse({"published": factory})

        assert rules == {"filter.published": ["date"]}
        assert factory.calls == [(request, query)]

    def test_custom_position(self, query) -> None:
        rules = QueryManyParser(position="where").with_query(query).parse(
            [Where("title").rules("string")]
        )

        assert rules == {"where.title": ["string"]}
