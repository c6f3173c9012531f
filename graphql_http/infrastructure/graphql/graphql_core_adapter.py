"""
Infrastructure adapter: GraphQL execution with graphql-core.

Implements GraphqlExecutionPort by parsing, validating and executing
documents with graphql-core, and converts its results into domain
ExecutionOutcome values.
"""

import logging
from inspect import isawaitable
from pathlib import Path
from typing import Any, Optional, Sequence

from graphql import (
    ExecutionResult,
    GraphQLError,
    GraphQLSchema,
    OperationType,
    build_schema,
    execute,
    get_operation_ast,
    parse,
    validate,
)

from graphql_http.domain.graphql.entities import ErrorKind, ExecutionOutcome, GraphError
from graphql_http.domain.graphql.errors import (
    ConfigurationError,
    GraphqlSpecificationError,
    OperationNotAllowedError,
)
from graphql_http.domain.graphql.ports import GraphqlExecutionPort

logger = logging.getLogger(__name__)


def to_graph_error(error: GraphQLError, kind: ErrorKind) -> GraphError:
    """Convert a graphql-core error into a domain GraphError."""
    formatted = error.formatted
    return GraphError(
        message=formatted["message"],
        kind=kind,
        locations=formatted.get("locations"),
        path=formatted.get("path"),
        extensions=formatted.get("extensions"),
    )


def _to_graph_errors(
    errors: Optional[Sequence[GraphQLError]], kind: ErrorKind
) -> tuple[GraphError, ...]:
    return tuple(to_graph_error(error, kind) for error in errors or ())


def load_schema(schema_file: str) -> GraphQLSchema:
    """Build a schema from an SDL file.

    Raises:
        ConfigurationError: If the file does not exist.
    """
    path = Path(schema_file)
    if not path.is_file():
        raise ConfigurationError(f"GraphQL schema file not found: {schema_file}")
    logger.info("Loading GraphQL schema from %s", path)
    return build_schema(path.read_text(encoding="utf-8"))


class GraphqlCoreExecutionAdapter(GraphqlExecutionPort):
    """Runs GraphQL operations against a graphql-core schema.

    Syntax and validation failures are reported as validation errors with
    no data. Field errors raised by resolvers are returned inline as
    execution errors alongside the data.
    """

    def __init__(self, schema: GraphQLSchema, root_value: Any = None) -> None:
        self._schema = schema
        self._root_value = root_value

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    async def execute(
        self,
        query: str,
        operation_name: Optional[str] = None,
        variables: Optional[dict[str, Any]] = None,
        context_value: Any = None,
        allow_mutations: bool = True,
    ) -> ExecutionOutcome:
        try:
            document = parse(query)
        except GraphQLError as exc:
            logger.info("Rejected GraphQL document with a syntax error")
            return ExecutionOutcome(errors=(to_graph_error(exc, ErrorKind.VALIDATION),))

        validation_errors = validate(self._schema, document)
        if validation_errors:
            logger.info(
                "Rejected GraphQL document with %d validation error(s)",
                len(validation_errors),
            )
            return ExecutionOutcome(
                errors=_to_graph_errors(validation_errors, ErrorKind.VALIDATION)
            )

        if not allow_mutations:
            operation = get_operation_ast(document, operation_name)
            if operation is not None and operation.operation is OperationType.MUTATION:
                raise OperationNotAllowedError("mutation", "GET")

        try:
            result = execute(
                self._schema,
                document,
                root_value=self._root_value,
                context_value=context_value,
                variable_values=variables,
                operation_name=operation_name,
            )
            if isawaitable(result):
                result = await result
        except GraphQLError as exc:
            raise GraphqlSpecificationError(
                exc.message,
                locations=exc.formatted.get("locations"),
                path=exc.formatted.get("path"),
                extensions=exc.formatted.get("extensions"),
            ) from exc

        return self._to_outcome(result)

    @staticmethod
    def _to_outcome(result: ExecutionResult) -> ExecutionOutcome:
        return ExecutionOutcome(
            data=result.data,
            errors=_to_graph_errors(result.errors, ErrorKind.EXECUTION),
        )
