"""
Use case: Resolve an execution outcome into an HTTP response envelope.

Input: request context, ExecutionOutcome, negotiated content type
Output: ResponseEnvelope
Side effects: None (logging only).
Failure cases: InvalidOutcomeError, MissingResponseError, and anything a
custom errors handler raises (propagated unchanged).
"""

import logging
from typing import Any, Optional

from graphql_http.domain.graphql.classifier import classify
from graphql_http.domain.graphql.entities import Category, ExecutionOutcome, ResponseEnvelope
from graphql_http.domain.graphql.errors import InvalidOutcomeError
from graphql_http.domain.graphql.handlers import DEFAULT_ERRORS_HANDLER, or_else, resolve
from graphql_http.domain.graphql.ports import ErrorsHandler

logger = logging.getLogger(__name__)


class ResolveResponseUseCase:
    """Runs the installed errors-handler chain for one outcome.

    A custom handler, when given, is consulted first. The default handler
    always terminates the chain, so the chain never declines.
    """

    def __init__(self, errors_handler: Optional[ErrorsHandler] = None) -> None:
        if errors_handler is None:
            self._errors_handler: ErrorsHandler = DEFAULT_ERRORS_HANDLER
        else:
            self._errors_handler = or_else(errors_handler, DEFAULT_ERRORS_HANDLER)

    @property
    def errors_handler(self) -> ErrorsHandler:
        return self._errors_handler

    def execute(
        self, ctx: Any, outcome: ExecutionOutcome, content_type: str
    ) -> ResponseEnvelope:
        """Run the response resolution use case.

        Args:
            ctx: Request context handed to every handler.
            outcome: The execution outcome to map.
            content_type: Negotiated response media type.

        Returns:
            The response envelope from the first handler that responded.
        """
        if outcome is None:
            raise InvalidOutcomeError()

        category = classify(outcome)
        if category is Category.FATAL:
            logger.error(
                "GraphQL execution aborted: %s",
                type(outcome.cause).__name__,
                exc_info=outcome.cause,
            )

        response = resolve(self._errors_handler, ctx, outcome, content_type)
        logger.info(
            "Resolved GraphQL outcome: category=%s, errors=%d, status=%d",
            category.value,
            len(outcome.errors),
            response.status_code,
        )
        return response
