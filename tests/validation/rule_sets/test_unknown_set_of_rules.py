"""Testes para UnknownSetOfRules (inferência de formato)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from utils.errors import ContractViolationError
from validation.rule_sets import DeferredRules, UnknownSetOfRules


class TestUnknownSetOfRules:
    """Testes de escolha entre lista e mapping."""

    def test_no_rules_returns_empty_list(self) -> None:
        """Sem regras retorna []."""
        assert UnknownSetOfRules.make().all() == []

    def test_list_defaults_compose_a_list(self) -> None:
        """Defaults em lista -> ListOfRules."""
        rules = UnknownSetOfRules.make().defaults(["string"]).rules("required").all()

        assert rules == ["required", "string"]

    def test_mapping_rules_compose_a_keyed_set(self) -> None:
        """Rules em mapping -> KeyedSetOfRules."""
        rules = UnknownSetOfRules.make().rules({".": ["array"], "*": ["string"]}).all()

        assert rules == {".": ["array"], "*": ["string"]}

    def test_mapping_defaults_merge_with_deferred_rules(self) -> None:
        """Defaults em mapping são sobrescritos pelas rules diferidas."""
        rules = (
            UnknownSetOfRules.make()
            .prepend({".": ["array"], "*": ["string"]})
            .rules(lambda request, query: {"*": ["integer"]})
            .all()
        )

        assert rules == {".": ["array"], "*": ["integer"]}

    def test_single_scalar_is_wrapped(self) -> None:
        """Valor único vira lista."""
        assert UnknownSetOfRules.make().rules("string").all() == ["string"]

    def test_several_values_form_a_list(self) -> None:
        """Vários valores formam a lista."""
        assert UnknownSetOfRules.make().rules("required", "string").all() == ["required", "string"]

    def test_only_append(self) -> None:
        """Apenas append também define o formato."""
        assert UnknownSetOfRules.make().append("max:5").all() == ["max:5"]

    def test_only_keyed_append(self) -> None:
        """Append em mapping retorna mapping."""
        assert UnknownSetOfRules.make().append({"id": ["string"]}).all() == {"id": ["string"]}

    def test_deferred_rules_are_evaluated_once(self) -> None:
        """Fonte diferida é avaliada uma única vez."""
        request = MagicMock(name="request")
        query = MagicMock(name="query")
        factory = MagicMock(return_value=["boolean"])

        rules = UnknownSetOfRules.make().rules(DeferredRules(factory)).all(request, query)

        assert rules == ["boolean"]
        factory.assert_called_once_with(request, query)

    def test_none_defaults_are_ignored(self) -> None:
        """defaults(None) equivale a nenhum default."""
        assert UnknownSetOfRules.make().defaults(None).rules("string").all() == ["string"]

    def test_scalar_from_deferred_raises(self) -> None:
        """Escalar de função diferida viola o contrato."""
        composer = UnknownSetOfRules.make().rules(lambda request, query: 3)

        with pytest.raises(ContractViolationError, match="a mapping or a list or None"):
            composer.all()

    def test_mixed_shapes_raise(self) -> None:
        """Defaults em lista com rules em mapping é contrato inválido."""
        composer = UnknownSetOfRules.make().defaults(["string"]).rules({"id": ["string"]})

        with pytest.raises(ContractViolationError):
            composer.all()
