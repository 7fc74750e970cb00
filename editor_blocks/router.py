"""
Router FastAPI — endpoint GraphQL + catalogue des blocs.

POST /graphql                → {"query", "variables"?, "operationName"?} → {"data", "errors"?}
GET  /graphql                → page GraphiQL (si activée)
GET  /graphql/schema         → SDL du schéma
GET  /editor-blocks/catalog  → types de bloc enregistrés + nom de type GraphQL dérivé
"""
import logging
from typing import Any, Dict, Optional

import graphene
from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field

from .blocks.registry import BlockTypeRegistry
from .schema.type_names import block_type_name

log = logging.getLogger(__name__)

_GRAPHIQL_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>GraphiQL — editor blocks</title>
  <link rel="stylesheet" href="https://unpkg.com/graphiql/graphiql.min.css">
</head>
<body style="margin:0;height:100vh;">
  <div id="graphiql" style="height:100vh;"></div>
  <script crossorigin src="https://unpkg.com/react/umd/react.production.min.js"></script>
  <script crossorigin src="https://unpkg.com/react-dom/umd/react-dom.production.min.js"></script>
  <script crossorigin src="https://unpkg.com/graphiql/graphiql.min.js"></script>
  <script>
    const fetcher = GraphiQL.createFetcher({ url: window.location.pathname });
    ReactDOM.render(React.createElement(GraphiQL, { fetcher }), document.getElementById("graphiql"));
  </script>
</body>
</html>"""


class GraphQLRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: Optional[Dict[str, Any]] = None
    operation_name: Optional[str] = Field(default=None, alias="operationName")


def create_graphql_router(schema: graphene.Schema, block_types: BlockTypeRegistry,
                          graphiql: bool = True) -> APIRouter:
    """
    Crée le router exposant un schéma déjà construit.

    Example:
        >>> schema = build_schema(default_registry())
        >>> app.include_router(create_graphql_router(schema, default_registry()))
    """
    router = APIRouter(tags=["editor_blocks"])

    @router.post("/graphql", summary="Exécute une requête GraphQL")
    def graphql(request: GraphQLRequest) -> JSONResponse:
        result = schema.execute(
            request.query,
            variable_values=request.variables,
            operation_name=request.operation_name,
        )
        payload: Dict[str, Any] = {"data": result.data}
        if result.errors:
            for error in result.errors:
                log.info("Erreur GraphQL : %s", error.message)
            payload["errors"] = [error.formatted for error in result.errors]
        # Erreur de syntaxe ou de validation : aucune exécution
        status_code = 400 if result.data is None and result.errors else 200
        return JSONResponse(payload, status_code=status_code)

    @router.get("/graphql", response_class=HTMLResponse, summary="Page GraphiQL")
    def graphql_ide() -> HTMLResponse:
        if not graphiql:
            raise HTTPException(status_code=404, detail="GraphiQL désactivé")
        return HTMLResponse(_GRAPHIQL_HTML)

    @router.get("/graphql/schema", response_class=PlainTextResponse, summary="SDL du schéma")
    def graphql_schema() -> PlainTextResponse:
        return PlainTextResponse(str(schema))

    @router.get("/editor-blocks/catalog", summary="Liste les types de bloc enregistrés")
    def catalog() -> JSONResponse:
        catalog_data = []
        for descriptor in block_types:
            catalog_data.append({
                "name":       descriptor.name,
                "type_name":  block_type_name(descriptor.name),
                "descriptor": descriptor.model_dump(),
            })
        return JSONResponse({"blocks": catalog_data})

    return router
