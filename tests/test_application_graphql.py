"""
Tests for the GraphQL application layer.

Use cases are exercised with in-memory execution ports.
No HTTP server or GraphQL engine required.
"""

import asyncio
from typing import Any, Optional

import pytest

from graphql_http.application.graphql.dtos import ExecuteQueryCommand
from graphql_http.application.graphql.execute_query import ExecuteQueryUseCase
from graphql_http.application.graphql.resolve_response import ResolveResponseUseCase
from graphql_http.domain.graphql.entities import (
    ErrorKind,
    ExecutionOutcome,
    GraphError,
    ResponseEnvelope,
)
from graphql_http.domain.graphql.errors import (
    InvalidOutcomeError,
    OperationNotAllowedError,
)
from graphql_http.domain.graphql.handlers import DEFAULT_ERRORS_HANDLER, status_handler
from graphql_http.domain.graphql.ports import GraphqlExecutionPort

JSON = "application/json"


class StubExecutionPort(GraphqlExecutionPort):
    """Returns a canned outcome, or raises a canned exception."""

    def __init__(
        self,
        outcome: Optional[ExecutionOutcome] = None,
        failure: Optional[Exception] = None,
    ) -> None:
        self.outcome = outcome or ExecutionOutcome(data={})
        self.failure = failure
        self.calls: list[dict[str, Any]] = []

    async def execute(
        self,
        query,
        operation_name=None,
        variables=None,
        context_value=None,
        allow_mutations=True,
    ):
        self.calls.append(
            {
                "query": query,
                "operation_name": operation_name,
                "variables": variables,
                "context_value": context_value,
                "allow_mutations": allow_mutations,
            }
        )
        if self.failure is not None:
            raise self.failure
        return self.outcome


class TestResolveResponseUseCase:
    """Tests for ResolveResponseUseCase."""

    def test_default_chain_is_the_default_handler(self) -> None:
        assert ResolveResponseUseCase().errors_handler is DEFAULT_ERRORS_HANDLER

    def test_none_outcome_is_rejected(self) -> None:
        with pytest.raises(InvalidOutcomeError):
            ResolveResponseUseCase().execute(None, None, JSON)  # type: ignore[arg-type]

    def test_custom_handler_runs_first(self) -> None:
        use_case = ResolveResponseUseCase(status_handler(lambda ctx, o, errors: 299))
        envelope = use_case.execute(None, ExecutionOutcome(data={}), JSON)
        assert envelope.status_code == 299

    def test_declining_handler_falls_back_to_default(self) -> None:
        use_case = ResolveResponseUseCase(lambda ctx, o, content_type: None)
        outcome = ExecutionOutcome(errors=[GraphError("bad", ErrorKind.VALIDATION)])
        assert use_case.execute(None, outcome, JSON).status_code == 400

    def test_fatal_outcome_is_500(self) -> None:
        envelope = ResolveResponseUseCase().execute(
            None, ExecutionOutcome(cause=RuntimeError("boom")), JSON
        )
        assert envelope.status_code == 500
        assert envelope.to_dict() == {"errors": [{"message": "boom"}]}

    def test_context_reaches_the_handler(self) -> None:
        ctx = object()
        seen = []

        def handler(c, outcome, content_type) -> Optional[ResponseEnvelope]:
            seen.append(c)
            return None

        ResolveResponseUseCase(handler).execute(ctx, ExecutionOutcome(), JSON)
        assert seen == [ctx]

    def test_shared_instance_is_reusable(self) -> None:
        use_case = ResolveResponseUseCase()
        first = use_case.execute(None, ExecutionOutcome(cause=RuntimeError("a")), JSON)
        second = use_case.execute(None, ExecutionOutcome(data={"ok": True}), JSON)
        assert first.status_code == 500
        assert second.status_code == 200
        assert second.to_dict() == {"data": {"ok": True}}


class TestExecuteQueryUseCase:
    """Tests for ExecuteQueryUseCase."""

    def _run(self, port: StubExecutionPort, ctx: Any = None) -> ResponseEnvelope:
        use_case = ExecuteQueryUseCase(port, ResolveResponseUseCase())
        command = ExecuteQueryCommand(
            query="{ hello }", operation_name="Op", variables={"a": 1}
        )
        return asyncio.run(use_case.execute(ctx, command, JSON))

    def test_command_is_forwarded_to_the_port(self) -> None:
        port = StubExecutionPort()
        ctx = object()
        self._run(port, ctx)
        assert port.calls == [
            {
                "query": "{ hello }",
                "operation_name": "Op",
                "variables": {"a": 1},
                "context_value": ctx,
                "allow_mutations": True,
            }
        ]

    def test_outcome_is_resolved(self) -> None:
        port = StubExecutionPort(ExecutionOutcome(data={"hello": "world"}))
        envelope = self._run(port)
        assert envelope.status_code == 200
        assert envelope.to_dict() == {"data": {"hello": "world"}}

    def test_engine_failure_becomes_500(self) -> None:
        envelope = self._run(StubExecutionPort(failure=RuntimeError("engine down")))
        assert envelope.status_code == 500
        assert envelope.to_dict() == {"errors": [{"message": "engine down"}]}

    def test_get_command_forbids_mutations(self) -> None:
        port = StubExecutionPort()
        use_case = ExecuteQueryUseCase(port, ResolveResponseUseCase())
        command = ExecuteQueryCommand(query="{ hello }", allow_mutations=False)
        asyncio.run(use_case.execute(None, command, JSON))
        assert port.calls[0]["allow_mutations"] is False

    def test_disallowed_operation_propagates(self) -> None:
        port = StubExecutionPort(failure=OperationNotAllowedError("mutation", "GET"))
        with pytest.raises(OperationNotAllowedError):
            self._run(port)
