"""Dependency FastAPI que entrega as regras de validação da query.

Uso:
    from fastapi import Depends, FastAPI

    from api.dependencies import query_rules_dependency

    app = FastAPI()
    posts_rules = query_rules_dependency(PostsQuerySchema, "posts", defaults=POSTS_DEFAULTS)

    @app.get("/posts")
    def list_posts(rule_set: QueryRuleSet = Depends(posts_rules)) -> dict:
        errors = engine.validate(rule_set.query.parameters, rule_set.rules)
        ...
"""

from __future__ import annotations

from collections.abc import Callable

from starlette.requests import Request

from config.logging import get_logger
from config.settings import get_validation_settings
from validation.query.builder import QueryRuleSetBuilder
from validation.query.models import Query, QueryKind, QueryRuleSet
from validation.query.parameters import parse_query_parameters
from validation.query.protocols import QuerySchemaProtocol, RelationProtocol
from validation.query.validated_query import ValidatedQuery

logger = get_logger(__name__)


def query_from_request(
    request: Request,
    resource_type: str,
    *,
    kind: QueryKind = "many",
    field_name: str | None = None,
) -> Query:
    """Constrói a Query a partir dos parâmetros do request."""
    return Query(
        resource_type=resource_type,
        kind=kind,
        field_name=field_name,
        parameters=parse_query_parameters(request.query_params.multi_items()),
    )


def query_rules_dependency(
    schema_factory: Callable[[], QuerySchemaProtocol],
    resource_type: str,
    *,
    kind: QueryKind = "many",
    field_name: str | None = None,
    relation_factory: Callable[[], RelationProtocol] | None = None,
    defaults: object = None,
) -> Callable[[Request], QueryRuleSet]:
    """Cria dependency que monta as regras da query por request.

    Schema, paginator e composers são instanciados a cada request;
    nada é compartilhado entre requests concorrentes.

    Args:
        schema_factory: Cria o schema de query do recurso.
        resource_type: Tipo do recurso consultado.
        kind: "many" (lista) ou "one" (recurso único).
        field_name: Relacionamento consultado, em rotas related/relationship.
        relation_factory: Cria o relacionamento cujos filtros se somam.
        defaults: Regras padrão dos parâmetros (mapping ou função).

    Returns:
        Função `(request) -> QueryRuleSet` para `Depends`.
    """

    def dependency(request: Request) -> QueryRuleSet:
        settings = get_validation_settings()
        query = query_from_request(request, resource_type, kind=kind, field_name=field_name)

        validated = ValidatedQuery(
            schema_factory(),
            request,
            page_parameter=settings.page_parameter,
        )
        if relation_factory is not None:
            validated.with_relation(relation_factory())

        rules = QueryRuleSetBuilder(validated, defaults, settings=settings).build(query)

        logger.debug(
            "query_rules_resolved",
            extra={
                "resource_type": resource_type,
                "query_kind": kind,
                "path": request.url.path,
                "rule_count": len(rules),
            },
        )

        return QueryRuleSet(
            query=query,
            rules=rules,
            messages=validated.messages(),
            attributes=validated.attributes(),
        )

    return dependency
