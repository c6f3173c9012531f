"""
Response policies and their composition.

A policy maps ``(ctx, outcome, content_type)`` to a ``ResponseEnvelope``
or declines with ``None``. Policies are composed left to right with
:func:`or_else`; the earliest policy that responds wins. Chains installed
by the application always end in :data:`DEFAULT_ERRORS_HANDLER`, which
never declines.
"""

import functools
from typing import Any, Callable, Optional, Sequence

from graphql_http.domain.graphql.classifier import classify
from graphql_http.domain.graphql.entities import (
    HTTP_200,
    HTTP_400,
    HTTP_500,
    Category,
    ExecutionOutcome,
    GraphError,
    ResponseEnvelope,
)
from graphql_http.domain.graphql.errors import MissingResponseError
from graphql_http.domain.graphql.ports import ErrorsHandler

StatusFunction = Callable[[Any, ExecutionOutcome, Sequence[GraphError]], Optional[int]]

_STATUS_BY_CATEGORY = {
    Category.FATAL: HTTP_500,
    Category.CLIENT_VALIDATION: HTTP_400,
    Category.NORMAL: HTTP_200,
}


def _cause_message(cause: BaseException) -> str:
    message = str(cause)
    return message if message else type(cause).__name__


def cause_specification(cause: BaseException) -> dict[str, Any]:
    """Return the response body for an outcome aborted by ``cause``.

    A cause that carries its own error specification is used verbatim,
    anything else becomes a single ``{"message": ...}`` entry.
    """
    to_specification = getattr(cause, "to_specification", None)
    if callable(to_specification):
        error = dict(to_specification())
    else:
        error = {"message": _cause_message(cause)}
    return {"errors": [error]}


def outcome_body(outcome: ExecutionOutcome) -> dict[str, Any]:
    """Return the body for an outcome, preferring the cause when present."""
    if outcome.cause is not None:
        return cause_specification(outcome.cause)
    return outcome.to_specification()


class DefaultErrorsHandler:
    """Total response policy selecting the status from the outcome category.

    Fatal outcomes map to 500, validation failures to 400 and everything
    else to 200. Inline execution errors never change the status.
    """

    __slots__ = ()

    def __call__(
        self, ctx: Any, outcome: ExecutionOutcome, content_type: str
    ) -> ResponseEnvelope:
        return self.build(outcome, content_type)

    def build(self, outcome: ExecutionOutcome, content_type: str) -> ResponseEnvelope:
        """Build the response for any outcome. Never declines."""
        status_code = _STATUS_BY_CATEGORY[classify(outcome)]
        return ResponseEnvelope(
            status_code=status_code,
            content_type=content_type,
            body=outcome_body(outcome),
        )

    def __repr__(self) -> str:
        return "DEFAULT_ERRORS_HANDLER"


DEFAULT_ERRORS_HANDLER = DefaultErrorsHandler()


def or_else(first: ErrorsHandler, second: ErrorsHandler) -> ErrorsHandler:
    """Return a policy that tries ``first`` and falls back to ``second``.

    ``second`` is invoked with the same arguments only when ``first``
    declines. Composing a policy with itself returns it unchanged.
    """
    if first is None or second is None:
        raise TypeError("errors handlers must not be None")
    if first is second:
        return first

    def composed(
        ctx: Any, outcome: ExecutionOutcome, content_type: str
    ) -> Optional[ResponseEnvelope]:
        response = first(ctx, outcome, content_type)
        if response is not None:
            return response
        return second(ctx, outcome, content_type)

    return composed


def chain(*handlers: ErrorsHandler) -> ErrorsHandler:
    """Compose one or more policies left to right with :func:`or_else`."""
    if not handlers:
        raise ValueError("at least one errors handler is required")
    return functools.reduce(or_else, handlers)


def status_handler(status_function: StatusFunction) -> ErrorsHandler:
    """Build a policy from a function that only picks a status code.

    ``status_function`` receives ``(ctx, outcome, errors)``. Returning
    ``None`` declines; returning a status responds with it and the
    outcome's body.
    """

    def handler(
        ctx: Any, outcome: ExecutionOutcome, content_type: str
    ) -> Optional[ResponseEnvelope]:
        status_code = status_function(ctx, outcome, outcome.errors)
        if status_code is None:
            return None
        return ResponseEnvelope(
            status_code=int(status_code),
            content_type=content_type,
            body=outcome_body(outcome),
        )

    return handler


def resolve(
    handler: ErrorsHandler, ctx: Any, outcome: ExecutionOutcome, content_type: str
) -> ResponseEnvelope:
    """Invoke a policy chain that is required to respond.

    Raises:
        MissingResponseError: If the whole chain declined.
    """
    response = handler(ctx, outcome, content_type)
    if response is None:
        raise MissingResponseError()
    return response
