"""
FastAPI router for the GraphQL bounded context.

Routes parse the HTTP request into an ExecuteQueryCommand, negotiate the
response media type and delegate to ExecuteQueryUseCase. No business
logic here. Error mapping is handled by centralized error handlers.
"""

import json
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from slowapi import Limiter

from graphql_http.application.graphql.dtos import ExecuteQueryCommand
from graphql_http.application.graphql.execute_query import ExecuteQueryUseCase
from graphql_http.core.config import Settings
from graphql_http.domain.graphql.errors import (
    InvalidRequestError,
    UnsupportedMediaTypeError,
)
from graphql_http.interfaces.graphql.dependencies import (
    get_execute_query_use_case,
    get_settings,
)
from graphql_http.interfaces.graphql.negotiation import (
    APPLICATION_GRAPHQL,
    APPLICATION_JSON,
    negotiate_media_type,
)
from graphql_http.interfaces.graphql.responses import to_json_response
from graphql_http.interfaces.graphql.schemas import GraphqlRequest, GraphqlResponse

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": GraphqlResponse},
    405: {"model": GraphqlResponse},
    406: {"model": GraphqlResponse},
    415: {"model": GraphqlResponse},
    500: {"model": GraphqlResponse},
}


def _validation_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"Invalid GraphQL request: {location}: {error['msg']}"


def _to_command(payload: Any, allow_mutations: bool = True) -> ExecuteQueryCommand:
    if not isinstance(payload, dict):
        raise InvalidRequestError("GraphQL request body must be a JSON object")
    try:
        request = GraphqlRequest.model_validate(payload)
    except ValidationError as exc:
        raise InvalidRequestError(_validation_message(exc)) from exc
    return ExecuteQueryCommand(
        query=request.query,
        operation_name=request.operation_name,
        variables=request.variables,
        allow_mutations=allow_mutations,
    )


def _parse_json(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        raise InvalidRequestError(f"{what} is not valid JSON") from exc


async def read_post_command(request: Request) -> ExecuteQueryCommand:
    """Read a POST request body as ``application/json`` or ``application/graphql``."""
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";")[0].strip().lower()
    body = await request.body()

    if media_type == APPLICATION_JSON or media_type.endswith("+json"):
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidRequestError("Request body is not valid UTF-8") from exc
        return _to_command(_parse_json(text, "Request body"))

    if media_type == APPLICATION_GRAPHQL:
        try:
            query = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidRequestError("Request body is not valid UTF-8") from exc
        return _to_command({"query": query})

    raise UnsupportedMediaTypeError(media_type or "<missing>")


def read_get_command(request: Request) -> ExecuteQueryCommand:
    """Read a GET request's ``query``, ``operationName`` and ``variables`` parameters.

    Mutations are not allowed over GET.
    """
    params = request.query_params
    payload: dict[str, Any] = {"query": params.get("query")}
    if params.get("operationName"):
        payload["operationName"] = params["operationName"]
    variables: Optional[str] = params.get("variables")
    if variables:
        payload["variables"] = _parse_json(variables, "variables")
    return _to_command(payload, allow_mutations=False)


def build_router(graphql_path: str, limiter: Limiter, rate_limit: str) -> APIRouter:
    """Build the GraphQL router serving ``graphql_path``.

    Args:
        graphql_path: Route for both GET and POST requests.
        limiter: Per-application rate limiter.
        rate_limit: Limit applied per client to each route.

    Returns:
        The configured router.
    """
    router = APIRouter(tags=["graphql"])

    @router.post(
        graphql_path,
        response_model=GraphqlResponse,
        responses=ERROR_RESPONSES,
        summary="Execute a GraphQL operation",
        description="Execute a query or mutation sent as JSON or as raw GraphQL.",
    )
    @limiter.limit(rate_limit)
    async def graphql_post(
        request: Request,
        use_case: ExecuteQueryUseCase = Depends(get_execute_query_use_case),
        app_settings: Settings = Depends(get_settings),
    ) -> JSONResponse:
        """Execute a GraphQL operation sent in the request body."""
        content_type = negotiate_media_type(
            request.headers.get("accept"), app_settings.default_media_type
        )
        command = await read_post_command(request)
        envelope = await use_case.execute(request, command, content_type)
        return to_json_response(envelope)

    @router.get(
        graphql_path,
        response_model=GraphqlResponse,
        responses=ERROR_RESPONSES,
        summary="Execute a GraphQL query",
        description="Execute a query sent as URL parameters.",
    )
    @limiter.limit(rate_limit)
    async def graphql_get(
        request: Request,
        use_case: ExecuteQueryUseCase = Depends(get_execute_query_use_case),
        app_settings: Settings = Depends(get_settings),
    ) -> JSONResponse:
        """Execute a GraphQL operation sent as query parameters."""
        content_type = negotiate_media_type(
            request.headers.get("accept"), app_settings.default_media_type
        )
        command = read_get_command(request)
        envelope = await use_case.execute(request, command, content_type)
        return to_json_response(envelope)

    return router
