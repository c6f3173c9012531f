"""
Application entry point.

Creates the FastAPI application and wires together:
- GraphQL execution adapter and use cases
- Errors-handler chain (custom handler ahead of the default)
- Routers
- Error handlers (centralized error-to-HTTP mapping)
- Security middleware (headers) and per-route rate limiting
- Logging configuration

No business logic belongs here. Serve with::

    uvicorn graphql_http.main:create_app --factory
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI
from graphql import GraphQLSchema
from slowapi.errors import RateLimitExceeded

from graphql_http.application.graphql.execute_query import ExecuteQueryUseCase
from graphql_http.application.graphql.resolve_response import ResolveResponseUseCase
from graphql_http.core.config import Settings, settings
from graphql_http.domain.graphql.errors import ConfigurationError
from graphql_http.domain.graphql.ports import ErrorsHandler
from graphql_http.infrastructure.graphql.graphql_core_adapter import (
    GraphqlCoreExecutionAdapter,
    load_schema,
)
from graphql_http.interfaces.graphql.router import build_router
from graphql_http.interfaces.health import router as health_router
from graphql_http.shared.errors.handlers import register_error_handlers
from graphql_http.shared.logging import configure_logging
from graphql_http.shared.security.headers import SecurityHeadersMiddleware
from graphql_http.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def _resolve_schema(
    schema: Optional[GraphQLSchema], app_settings: Settings
) -> GraphQLSchema:
    if schema is not None:
        return schema
    if app_settings.schema_file:
        return load_schema(app_settings.schema_file)
    raise ConfigurationError(
        "No GraphQL schema: pass one to create_app() or set GRAPHQL_HTTP_SCHEMA_FILE"
    )


def create_app(
    schema: Optional[GraphQLSchema] = None,
    errors_handler: Optional[ErrorsHandler] = None,
    root_value: Any = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        schema: Executable schema. Loaded from ``schema_file`` when omitted.
        errors_handler: Custom response policy consulted before the
            default one. It may decline by returning ``None``.
        root_value: Root value handed to top-level resolvers.
        app_settings: Settings override, mainly for tests.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        ConfigurationError: If no schema is available.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level, access_log=app_settings.access_log)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )

    # --- Use cases ---
    execution_port = GraphqlCoreExecutionAdapter(
        _resolve_schema(schema, app_settings), root_value=root_value
    )
    app.state.settings = app_settings
    app.state.execute_query_use_case = ExecuteQueryUseCase(
        execution_port=execution_port,
        resolve_response=ResolveResponseUseCase(errors_handler),
    )

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(app_settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(
        build_router(
            app_settings.graphql_path, app.state.limiter, app_settings.rate_limit_default
        )
    )

    logger.info(
        "GraphQL endpoint ready at %s (custom errors handler: %s)",
        app_settings.graphql_path,
        errors_handler is not None,
    )
    return app
