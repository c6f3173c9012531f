"""
Tests for the graphql-core execution adapter.

Runs real documents against a small in-memory schema.
"""

import asyncio
from pathlib import Path

import pytest
from graphql import GraphQLSchema, print_schema

from graphql_http.domain.graphql.entities import ABSENT, ErrorKind, ExecutionOutcome
from graphql_http.domain.graphql.errors import ConfigurationError, OperationNotAllowedError
from graphql_http.infrastructure.graphql.graphql_core_adapter import (
    GraphqlCoreExecutionAdapter,
    load_schema,
)


@pytest.fixture
def adapter(schema: GraphQLSchema, root_value: dict) -> GraphqlCoreExecutionAdapter:
    return GraphqlCoreExecutionAdapter(schema, root_value=root_value)


def _execute(
    adapter: GraphqlCoreExecutionAdapter, query: str, **kwargs
) -> ExecutionOutcome:
    return asyncio.run(adapter.execute(query, **kwargs))


class TestGraphqlCoreExecutionAdapter:
    """Tests for GraphqlCoreExecutionAdapter."""

    def test_successful_query(self, adapter: GraphqlCoreExecutionAdapter) -> None:
        outcome = _execute(adapter, "{ hello }")
        assert outcome.data == {"hello": "world"}
        assert outcome.errors == ()

    def test_variables_and_operation_name(
        self, adapter: GraphqlCoreExecutionAdapter
    ) -> None:
        outcome = _execute(
            adapter,
            "query A { hello } query B($name: String!) { greet(name: $name) }",
            operation_name="B",
            variables={"name": "Ada"},
        )
        assert outcome.data == {"greet": "Hello, Ada!"}

    def test_async_resolver_is_awaited(
        self, adapter: GraphqlCoreExecutionAdapter
    ) -> None:
        assert _execute(adapter, "{ slow }").data == {"slow": "done"}

    def test_syntax_error_is_a_validation_error(
        self, adapter: GraphqlCoreExecutionAdapter
    ) -> None:
        outcome = _execute(adapter, "{ hello")
        assert outcome.data is ABSENT
        assert len(outcome.errors) == 1
        assert outcome.errors[0].kind is ErrorKind.VALIDATION
        assert outcome.errors[0].message.startswith("Syntax Error")
        assert outcome.errors[0].locations

    def test_unknown_field_is_a_validation_error(
        self, adapter: GraphqlCoreExecutionAdapter
    ) -> None:
        outcome = _execute(adapter, "{ nope }")
        assert outcome.data is ABSENT
        assert [e.kind for e in outcome.errors] == [ErrorKind.VALIDATION]
        assert "nope" in outcome.errors[0].message

    def test_resolver_error_is_returned_inline(
        self, adapter: GraphqlCoreExecutionAdapter
    ) -> None:
        outcome = _execute(adapter, "{ hello foo }")
        assert outcome.data == {"hello": "world", "foo": None}
        assert len(outcome.errors) == 1
        error = outcome.errors[0]
        assert error.kind is ErrorKind.EXECUTION
        assert error.message == "foo"
        assert error.path == ["foo"]

    def test_context_is_handed_to_resolvers(self, schema: GraphQLSchema) -> None:
        seen = []

        def resolver(info):
            seen.append(info.context)
            return "ok"

        adapter = GraphqlCoreExecutionAdapter(schema, root_value={"hello": resolver})
        ctx = object()
        asyncio.run(adapter.execute("{ hello }", context_value=ctx))
        assert seen == [ctx]

    def test_mutation_runs_when_allowed(self, adapter: GraphqlCoreExecutionAdapter) -> None:
        outcome = _execute(adapter, "mutation { bump }")
        assert outcome.data == {"bump": 1}

    def test_mutation_rejected_when_not_allowed(self, schema: GraphQLSchema) -> None:
        calls = []
        adapter = GraphqlCoreExecutionAdapter(
            schema, root_value={"bump": lambda info: calls.append(1)}
        )
        with pytest.raises(OperationNotAllowedError):
            _execute(adapter, "mutation { bump }", allow_mutations=False)
        assert calls == []

    def test_query_runs_when_mutations_not_allowed(
        self, adapter: GraphqlCoreExecutionAdapter
    ) -> None:
        outcome = _execute(adapter, "{ hello }", allow_mutations=False)
        assert outcome.data == {"hello": "world"}


class TestLoadSchema:
    """Tests for loading an SDL file."""

    def test_loads_sdl(self, tmp_path: Path, schema: GraphQLSchema) -> None:
        path = tmp_path / "schema.graphqls"
        path.write_text(print_schema(schema), encoding="utf-8")
        loaded = load_schema(str(path))
        assert "hello" in loaded.query_type.fields

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_schema(str(tmp_path / "missing.graphqls"))
