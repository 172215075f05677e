"""Modelos da query JSON:API em validação."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

QueryKind = Literal["one", "many"]


class Query(BaseModel):
    """Query JSON:API já parseada.

    Attributes:
        resource_type: Tipo do recurso consultado (ex: "posts").
        kind: "one" para zero-a-um recurso, "many" para zero-a-muitos.
        field_name: Relacionamento consultado (rotas related/relationship).
        parameters: Parâmetros de query aninhados (ex: {"page": {"number": "1"}}).
    """

    model_config = ConfigDict(frozen=True)

    resource_type: str = Field(min_length=1)
    kind: QueryKind = "many"
    field_name: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_relation(self) -> bool:
        """True para queries de related/relationship."""
        return self.field_name is not None


@dataclass(frozen=True, slots=True)
class QueryRuleSet:
    """Resultado entregue ao motor de validação externo."""

    query: Query
    rules: dict[str, Any]
    messages: dict[str, Any] = field(default_factory=dict)
    attributes: dict[str, Any] = field(default_factory=dict)
