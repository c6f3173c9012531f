"""
Dependency injection for the GraphQL bounded context.

Provides FastAPI dependency functions that hand the use cases wired by
``create_app`` to the routes. The wiring itself is kept on
``app.state`` so each application instance owns its own chain.
"""

from fastapi import Request

from graphql_http.application.graphql.execute_query import ExecuteQueryUseCase
from graphql_http.core.config import Settings


def get_execute_query_use_case(request: Request) -> ExecuteQueryUseCase:
    """Return the ExecuteQueryUseCase wired for this application."""
    return request.app.state.execute_query_use_case


def get_settings(request: Request) -> Settings:
    """Return the settings this application was created with."""
    return request.app.state.settings
