"""Testes para FieldRuleMap e ListOfFields."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from utils.errors import ContractViolationError
from validation.fields import FieldRuleMap, ListOfFields, ValidatedField, ValidatedFieldWithKeys


class Str(ValidatedField):
    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name


class Tags(ValidatedFieldWithKeys):
    name = "tags"


class PlainField:
    def __init__(self, name: str) -> None:
        self.name = name


@pytest.fixture
def request_() -> MagicMock:
    return MagicMock(name="request")


class TestFieldRuleMap:
    """Testes do mapa de regras por campo."""

    def test_creation(self, request_) -> None:
        """Campos validados em ordem alfabética com regra em "."."""
        rule_map = FieldRuleMap(
            Str("title").rules("required", "string"),
            PlainField("foo"),
            Str("body").creation_rules("string"),
            Str("slug"),
        )

        rules = rule_map.creation(request_)

        assert rules == {
            ".": ["array:body,title"],
            "body": ["string"],
            "title": ["required", "string"],
        }
        assert list(rules) == [".", "body", "title"]

    def test_update_uses_update_rules(self, request_) -> None:
        model = object()
        rule_map = FieldRuleMap.make(
            [Str("title").creation_rules("required"), Str("body").update_rules("filled")]
        )

        assert rule_map.update(request_, model) == {".": ["array:body"], "body": ["filled"]}

    def test_deferred_rules_receive_model(self, request_) -> None:
        model = object()
        field = MagicMock()
        field.name = "status"
        seen = []

        def rules(r, m):
            seen.append((r, m))
            return ["string"]

        field.rules_for_update.return_value = rules

        assert FieldRuleMap(field).update(request_, model) == {
            ".": ["array:status"],
            "status": ["string"],
        }
        assert seen == [(request_, model)]

    def test_scalar_rules_raise(self, request_) -> None:
        field = MagicMock()
        field.name = "status"
        field.rules_for_creation.return_value = lambda r, m: 1

        with pytest.raises(ContractViolationError, match="field status"):
            FieldRuleMap(field).creation(request_)

    def test_empty(self, request_) -> None:
        assert FieldRuleMap(PlainField("foo")).creation(request_) == {}


class TestListOfFields:
    """Testes da lista de campos validados."""

    def test_iterates_validated_fields_only(self) -> None:
        title = Str("title")

        assert list(ListOfFields(title, PlainField("foo"))) == [title]

    def test_for_creation(self, request_) -> None:
        """Listas ficam sob o nome; mappings já trazem os caminhos."""
        fields = ListOfFields(
            Str("title").rules("required", "string"),
            Tags().rules({"tags": ["array"], "tags.*": ["string"]}),
            Str("slug"),
        )

        assert fields.for_creation(request_) == {
            "title": ["required", "string"],
            "tags": ["array"],
            "tags.*": ["string"],
        }

    def test_for_update(self, request_) -> None:
        fields = ListOfFields(
            Str("title").update_rules("filled"),
            Str("body").creation_rules("string"),
        )

        assert fields.for_update(request_, object()) == {"title": ["filled"]}

    def test_for_relation(self, request_) -> None:
        """Apenas o relacionamento pedido."""
        fields = ListOfFields(Str("author").rules("array"), Str("tags").rules("array"))

        assert fields.for_relation(request_, object(), "tags") == {"tags": ["array"]}
