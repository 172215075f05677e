"""Composers de regras de validação.

- KeyedSetOfRules: mapping campo -> regras, com precedência prepend/rules/append.
- ListOfRules: lista de regras de um único campo.
- UnknownSetOfRules: escolhe entre os dois pelo formato das regras.
- RulesParser: base dos parsers que achatam regras aninhadas em caminhos.
"""

from validation.rule_sets.keyed import KeyedSetOfRules
from validation.rule_sets.listed import ListOfRules
from validation.rule_sets.maps import with_array_keys
from validation.rule_sets.parser import RulesParser
from validation.rule_sets.paths import SELF_KEY, check_parameter, join_path
from validation.rule_sets.sources import (
    EMPTY_RULES,
    DeferredRules,
    RuleSource,
    StaticRules,
    resolve_rules,
    rule_source,
)
from validation.rule_sets.unknown import UnknownSetOfRules

__all__ = [
    "EMPTY_RULES",
    "DeferredRules",
    "KeyedSetOfRules",
    "ListOfRules",
    "RulesParser",
    "SELF_KEY",
    "RuleSource",
    "StaticRules",
    "UnknownSetOfRules",
    "check_parameter",
    "join_path",
    "resolve_rules",
    "rule_source",
    "with_array_keys",
]
