"""
Shared fixtures: a small executable schema and app/client builders.
"""

from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient
from graphql import GraphQLSchema, build_schema

from graphql_http.core.config import Settings
from graphql_http.domain.graphql.ports import ErrorsHandler
from graphql_http.main import create_app

SDL = """
type Query {
  hello: String
  greet(name: String!): String
  foo: String
  error: String
  slow: String
}

type Mutation {
  bump: Int
}
"""


def _fail_with(message: str) -> Callable[..., Any]:
    def resolver(info: Any, **kwargs: Any) -> Any:
        raise ValueError(message)

    return resolver


async def _slow(info: Any) -> str:
    return "done"


ROOT_VALUE = {
    "hello": "world",
    "greet": lambda info, name: f"Hello, {name}!",
    "foo": _fail_with("foo"),
    "error": _fail_with("error"),
    "slow": _slow,
    "bump": lambda info: 1,
}


@pytest.fixture(scope="session")
def schema() -> GraphQLSchema:
    return build_schema(SDL)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(rate_limit_enabled=False, log_level="WARNING")


@pytest.fixture
def make_client(
    schema: GraphQLSchema, test_settings: Settings
) -> Callable[..., TestClient]:
    """Build a TestClient around a freshly created app."""

    def build(
        errors_handler: Optional[ErrorsHandler] = None,
        app_settings: Optional[Settings] = None,
        raise_server_exceptions: bool = True,
        root_value: Optional[dict[str, Any]] = None,
    ) -> TestClient:
        app = create_app(
            schema=schema,
            errors_handler=errors_handler,
            root_value=ROOT_VALUE if root_value is None else root_value,
            app_settings=app_settings or test_settings,
        )
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return build


@pytest.fixture
def root_value() -> dict[str, Any]:
    return dict(ROOT_VALUE)
