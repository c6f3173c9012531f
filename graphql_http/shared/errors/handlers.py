"""
Centralized error handlers for FastAPI.

Maps transport and wiring errors to GraphQL-shaped HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ``{"errors": [{"message": ...}]}`` body.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from graphql_http.domain.graphql.errors import (
    GraphqlHttpError,
    InvalidOutcomeError,
    InvalidRequestError,
    MissingResponseError,
    NotAcceptableError,
    OperationNotAllowedError,
    UnsupportedMediaTypeError,
)
from graphql_http.interfaces.graphql.responses import (
    INTERNAL_ERROR_MESSAGE,
    error_response,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_405 = 405
HTTP_406 = 406
HTTP_415 = 415
HTTP_500 = 500


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidRequestError)
    async def handle_invalid_request(
        _request: Request, exc: InvalidRequestError
    ) -> JSONResponse:
        """Handle malformed GraphQL requests."""
        logger.warning("Invalid GraphQL request: %s", exc.message)
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request parameter validation failures."""
        logger.warning("Request validation failed: %d error(s)", len(exc.errors()))
        return error_response(HTTP_400, "Invalid request parameters")

    @app.exception_handler(OperationNotAllowedError)
    async def handle_operation_not_allowed(
        _request: Request, exc: OperationNotAllowedError
    ) -> JSONResponse:
        """Handle operations the request method may not run."""
        logger.warning("Rejected %s over %s", exc.operation, exc.method)
        return error_response(HTTP_405, exc.message, headers={"Allow": "POST"})

    @app.exception_handler(UnsupportedMediaTypeError)
    async def handle_unsupported_media_type(
        _request: Request, exc: UnsupportedMediaTypeError
    ) -> JSONResponse:
        """Handle request bodies in a media type we cannot read."""
        logger.warning("Unsupported media type: %s", exc.media_type)
        return error_response(HTTP_415, exc.message)

    @app.exception_handler(NotAcceptableError)
    async def handle_not_acceptable(
        _request: Request, exc: NotAcceptableError
    ) -> JSONResponse:
        """Handle clients that accept none of our response media types."""
        logger.warning("Not acceptable: %s", exc.accept)
        return error_response(HTTP_406, exc.message)

    @app.exception_handler(MissingResponseError)
    async def handle_missing_response(
        _request: Request, exc: MissingResponseError
    ) -> JSONResponse:
        """The errors-handler chain declined; treat as an internal failure."""
        logger.error("Errors handler chain produced no response")
        return error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(InvalidOutcomeError)
    async def handle_invalid_outcome(
        _request: Request, exc: InvalidOutcomeError
    ) -> JSONResponse:
        """No execution outcome reached the response chain."""
        logger.error("Invalid outcome: %s", exc.message)
        return error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(GraphqlHttpError)
    async def handle_graphql_http(
        _request: Request, exc: GraphqlHttpError
    ) -> JSONResponse:
        """Catch-all for unhandled GraphQL HTTP errors."""
        logger.error("Unhandled GraphQL HTTP error: %s", exc.message)
        return error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)
