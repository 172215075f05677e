"""Base dos parsers que achatam regras aninhadas em caminhos."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from validation.rule_sets.paths import join_path
from validation.rule_sets.sources import resolve_rules, rule_source


class RulesParser(ABC):
    """Achata membros do schema (filtros, campos) em caminho -> lista de regras.

    Aceita um iterável de membros (chave = nome do membro) ou um mapping
    chave -> membro | regras | função | None. Funções são chamadas com
    `(request, contexto)`; mappings descem um nível no caminho e listas
    são folhas. Membros chamáveis são tratados como funções de regras.

    Args:
        request: Request HTTP atual, ou None.
        position: Caminho raiz. Vazio para caminhos sem raiz.
    """

    # Nome do tipo de membro nas mensagens de erro e no log
    kind: str = "member"
    component: str = "rules_parser"
    member_type: type = object

    def __init__(self, request: Any = None, *, position: str = "") -> None:
        self._request = request
        self._position = position

    def parse(self, values: Iterable[Any] | Mapping[Any, Any]) -> dict[str, Any]:
        return dict(self._cursor(values, self._position))

    @abstractmethod
    def _context(self) -> Any:
        """Segundo argumento das funções de regras (query ou model)."""

    @abstractmethod
    def _member_key(self, member: Any) -> str: ...

    @abstractmethod
    def _member_rules(self, member: Any) -> Any:
        """Regras cruas do membro, ou None se ele não é validado aqui."""

    def _is_member(self, value: object) -> bool:
        return isinstance(value, self.member_type) and not callable(value)

    def _cursor(
        self,
        values: Iterable[Any] | Mapping[Any, Any],
        position: str,
    ) -> Iterator[tuple[str, Any]]:
        items = values.items() if isinstance(values, Mapping) else enumerate(values)

        for key, value in items:
            if self._is_member(value):
                key = self._member_key(value) if isinstance(key, int) else key
                value = self._member_rules(value)

            resolved = resolve_rules(
                rule_source(value),
                self._request,
                self._context(),
                accept=(Mapping, list, tuple),
                owner=f"{self.kind} {key}",
                component=self.component,
            )

            if not resolved:
                continue

            path = join_path(position, str(key), kind=self.kind)

            if isinstance(resolved, list | tuple):
                yield path, list(resolved)
                continue

            yield from self._cursor(resolved, path)
