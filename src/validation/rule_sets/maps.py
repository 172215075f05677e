"""Mapas de regras por membro com a regra `array:<chaves>` na raiz."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from validation.rule_sets.paths import SELF_KEY
from validation.rule_sets.sources import resolve_rules, rule_source


def with_array_keys(rules: Mapping[str, Any]) -> dict[str, Any]:
    """Ordena as chaves e restringe o objeto a elas via regra em ".".

        {"b": [...], "a": [...]} -> {".": ["array:a,b"], "a": [...], "b": [...]}
    """
    if not rules:
        return {}

    ordered = dict(sorted(rules.items()))
    return {SELF_KEY: [f"array:{','.join(ordered)}"], **ordered}


def member_rules(
    members: Iterable[tuple[str, Any]],
    extract: Callable[[Any], Any],
    request: Any,
    context: Any,
    *,
    kind: str,
    component: str,
) -> Iterator[tuple[str, Any]]:
    """Resolve as regras de cada membro validado, pulando as vazias."""
    for key, member in members:
        resolved = resolve_rules(
            rule_source(extract(member)),
            request,
            context,
            accept=(Mapping, list, tuple),
            owner=f"{kind} {key}",
            component=component,
        )
        if resolved:
            yield key, list(resolved) if isinstance(resolved, tuple) else resolved
