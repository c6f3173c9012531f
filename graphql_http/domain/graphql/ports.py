"""
Port interfaces for the GraphQL response-mapping context.

Ports define the contracts the domain requires from the outside world:
the execution engine that produces outcomes and the response policies
that turn outcomes into envelopes.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol

from graphql_http.domain.graphql.entities import ExecutionOutcome, ResponseEnvelope


class ErrorsHandler(Protocol):
    """A response policy.

    Returns a ``ResponseEnvelope`` for outcomes it has an opinion on and
    ``None`` to decline, letting the next policy in the chain respond.
    Implementations must be stateless and must not block.
    """

    def __call__(
        self, ctx: Any, outcome: ExecutionOutcome, content_type: str
    ) -> Optional[ResponseEnvelope]:
        ...


class GraphqlExecutionPort(ABC):
    """Port for running a GraphQL operation against a schema."""

    @abstractmethod
    async def execute(
        self,
        query: str,
        operation_name: Optional[str] = None,
        variables: Optional[dict[str, Any]] = None,
        context_value: Any = None,
        allow_mutations: bool = True,
    ) -> ExecutionOutcome:
        """Parse, validate and execute a query.

        Errors the engine reports inline are returned in the outcome.
        Anything that aborts execution is raised to the caller.

        Args:
            query: GraphQL document text.
            operation_name: Operation to run when the document has several.
            variables: Variable values for the operation.
            context_value: Per-request context passed to resolvers.
            allow_mutations: Whether a mutation may be selected.

        Returns:
            The outcome of the execution.

        Raises:
            OperationNotAllowedError: If a mutation is selected while
                ``allow_mutations`` is False.
        """
        raise NotImplementedError
