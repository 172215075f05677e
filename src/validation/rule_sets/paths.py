"""Caminhos de regra pontuados (`filter.tags.*`)."""

from __future__ import annotations

from utils.errors import RulePathError

SEPARATOR = "."

# Chave que representa a própria posição atual
SELF_KEY = "."


def check_parameter(name: str, *, owner: str) -> str:
    """Garante que o parâmetro raiz é um único segmento não vazio.

    Raises:
        RulePathError: Se o nome é vazio ou contém ".".
    """
    if not name or SEPARATOR in name:
        raise RulePathError(
            f"Query parameter for {owner} must be a non-empty name without {SEPARATOR!r}, "
            f"got {name!r}."
        )
    return name


def join_path(position: str, key: str, *, kind: str = "schema") -> str:
    """Desce um nível a partir de `position`.

    Raises:
        RulePathError: Chave "." sem posição atual.
    """
    if key == SELF_KEY:
        if not position:
            raise RulePathError(f'Not expecting key "." at the root of {kind} rules.')
        return position

    return f"{position}{SEPARATOR}{key}" if position else key
