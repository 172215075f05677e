"""Validação dos campos de recurso (criação e atualização)."""

from validation.fields.listed import ListOfFields
from validation.fields.parser import CreationRulesParser, FieldRulesParser, UpdateRulesParser
from validation.fields.protocols import FieldProtocol, ValidatedFieldProtocol
from validation.fields.rule_map import FieldRuleMap
from validation.fields.validated import ValidatedField, ValidatedFieldWithKeys

__all__ = [
    "CreationRulesParser",
    "FieldProtocol",
    "FieldRuleMap",
    "FieldRulesParser",
    "ListOfFields",
    "UpdateRulesParser",
    "ValidatedField",
    "ValidatedFieldProtocol",
    "ValidatedFieldWithKeys",
]
