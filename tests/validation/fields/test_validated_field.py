"""Testes para os mixins ValidatedField e ValidatedFieldWithKeys."""

from __future__ import annotations

from validation.fields import ValidatedField, ValidatedFieldProtocol, ValidatedFieldWithKeys


class Str(ValidatedField):
    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def default_rules(self):
        return ["string"]


class Address(ValidatedFieldWithKeys):
    name = "address"

    def default_rules(self):
        return {".": ["array:city,street"], "city": ["string"]}


class TestValidatedField:
    """Testes de campos com lista de regras."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(Str("title"), ValidatedFieldProtocol)

    def test_defaults_only(self) -> None:
        assert Str("title").rules_for_creation(None) == ["string"]

    def test_defaults_after_required(self) -> None:
        field = Str("title").rules("required", "max:255")

        assert field.rules_for_creation(None) == ["required", "string", "max:255"]

    def test_creation_and_update_rules(self) -> None:
        """Regras específicas entram no fim, por operação."""
        field = Str("slug").rules("required").creation_rules("unique:posts").update_rules("filled")

        assert field.rules_for_creation(None) == ["required", "string", "unique:posts"]
        assert field.rules_for_update(None, object()) == ["required", "string", "filled"]

    def test_update_function_receives_model(self) -> None:
        model = object()
        seen = []

        def rules(request, m):
            seen.append(m)
            return ["nullable"]

        assert Str("bio").rules(rules).rules_for_update(None, model) == ["nullable", "string"]
        assert seen == [model]


class TestValidatedFieldWithKeys:
    """Testes de campos com regras indexadas por caminho."""

    def test_precedence(self) -> None:
        """default < rules < creation/update."""
        field = (
            Address()
            .rules({"city": ["required", "string"], "street": ["string"]})
            .update_rules({"street": ["filled", "string"]})
        )

        assert field.rules_for_creation(None) == {
            ".": ["array:city,street"],
            "city": ["required", "string"],
            "street": ["string"],
        }
        assert field.rules_for_update(None, object())["street"] == ["filled", "string"]

    def test_creation_function(self) -> None:
        field = Address().creation_rules(
            lambda request, model: {"zip": ["string"]} if model is None else None
        )

        assert field.rules_for_creation(None)["zip"] == ["string"]
        assert "zip" not in field.rules_for_update(None, object())
