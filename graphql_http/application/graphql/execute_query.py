"""
Use case: Execute a GraphQL operation and build its HTTP response.

Input: request context, ExecuteQueryCommand, negotiated content type
Output: ResponseEnvelope
Side effects: Whatever the schema's resolvers do.
Failure cases: Engine failures become a fatal outcome (HTTP 500);
OperationNotAllowedError and errors raised by custom errors handlers
propagate.
"""

import logging
from typing import Any

from graphql_http.application.graphql.dtos import ExecuteQueryCommand
from graphql_http.application.graphql.resolve_response import ResolveResponseUseCase
from graphql_http.domain.graphql.entities import ExecutionOutcome, ResponseEnvelope
from graphql_http.domain.graphql.errors import OperationNotAllowedError
from graphql_http.domain.graphql.ports import GraphqlExecutionPort

logger = logging.getLogger(__name__)


class ExecuteQueryUseCase:
    """Orchestrates query execution and response resolution.

    Delegates execution to the GraphqlExecutionPort. An exception escaping
    the engine is recorded as the outcome's cause rather than raised, so
    the response chain decides how it is reported.
    """

    def __init__(
        self,
        execution_port: GraphqlExecutionPort,
        resolve_response: ResolveResponseUseCase,
    ) -> None:
        self._execution_port = execution_port
        self._resolve_response = resolve_response

    async def execute(
        self, ctx: Any, command: ExecuteQueryCommand, content_type: str
    ) -> ResponseEnvelope:
        """Run the query execution use case.

        Args:
            ctx: Request context passed to resolvers and errors handlers.
            command: The operation to run.
            content_type: Negotiated response media type.

        Returns:
            The response envelope for the operation.
        """
        logger.debug("Executing GraphQL operation=%s", command.operation_name)

        try:
            outcome = await self._execution_port.execute(
                query=command.query,
                operation_name=command.operation_name,
                variables=command.variables,
                context_value=ctx,
                allow_mutations=command.allow_mutations,
            )
        except OperationNotAllowedError:
            raise
        except Exception as exc:
            outcome = ExecutionOutcome(cause=exc)

        return self._resolve_response.execute(ctx, outcome, content_type)
