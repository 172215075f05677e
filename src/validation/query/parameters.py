"""Parsing de parâmetros de query com notação de colchetes.

    page[number]=2&page[size]=10          ->  {"page": {"number": "2", "size": "10"}}
    filter[id][]=1&filter[id][]=2         ->  {"filter": {"id": ["1", "2"]}}
    filter[tags][][name]=a&...[name]=b    ->  {"filter": {"tags": [{"name": "a"}, {"name": "b"}]}}
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

_KEY_PATTERN = re.compile(r"^(?P<root>[^\[\]]+)(?P<segments>(?:\[[^\[\]]*\])*)$")
_SEGMENT_PATTERN = re.compile(r"\[([^\[\]]*)\]")


def parse_query_parameters(pairs: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """Converte pares (chave, valor) em parâmetros aninhados.

    Chaves repetidas mantêm o último valor. `[]` monta uma lista: no fim
    da chave acumula valores; no meio, cada elemento é um mapping e um
    novo elemento começa quando a chave dentro dele se repete. Chaves
    fora da notação são mantidas literalmente.
    """
    parameters: dict[str, Any] = {}

    for raw_key, value in pairs:
        _assign(parameters, _split_key(raw_key), value)

    return parameters


def _split_key(raw_key: str) -> list[str]:
    match = _KEY_PATTERN.match(raw_key)
    if match is None:
        return [raw_key]
    return [match.group("root"), *_SEGMENT_PATTERN.findall(match.group("segments"))]


def _assign(node: dict[str, Any], path: list[str], value: str) -> None:
    key, *rest = path

    if not rest:
        node[key] = value
        return

    if rest[0] == "":
        items = node.get(key)
        if not isinstance(items, list):
            items = []
            node[key] = items
        _append(items, rest[1:], value)
        return

    child = node.get(key)
    if not isinstance(child, dict):
        child = {}
        node[key] = child
    _assign(child, rest, value)


def _append(items: list[Any], path: list[str], value: str) -> None:
    if not path:
        items.append(value)
        return

    if path[0] == "":
        nested: list[Any] = []
        items.append(nested)
        _append(nested, path[1:], value)
        return

    last = items[-1] if items else None
    if not isinstance(last, dict) or _occupied(last, path):
        last = {}
        items.append(last)
    _assign(last, path, value)


def _occupied(node: dict[str, Any], path: list[str]) -> bool:
    # A chave final já tem valor: o próximo par abre outro elemento
    current: Any = node
    for segment in path:
        if segment == "":
            return False
        if not isinstance(current, dict) or segment not in current:
            return False
        current = current[segment]
    return True
