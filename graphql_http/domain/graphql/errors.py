"""
Domain-specific errors for the GraphQL response-mapping context.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses by the centralized error handlers.
No framework imports allowed.
"""

from typing import Any, Optional

from graphql_http.domain.graphql.entities import ErrorKind, GraphError


class GraphqlHttpError(Exception):
    """Base error for all GraphQL HTTP errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class GraphqlSpecificationError(GraphqlHttpError):
    """A protocol-level error that carries its own error specification.

    When such an error aborts execution, the default response policy uses
    :meth:`to_specification` verbatim instead of synthesizing a message.
    """

    def __init__(
        self,
        message: str,
        locations: Optional[list[dict[str, int]]] = None,
        path: Optional[list[Any]] = None,
        extensions: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.locations = locations
        self.path = path
        self.extensions = extensions

    def to_specification(self) -> dict[str, Any]:
        return GraphError(
            message=self.message,
            kind=ErrorKind.OTHER,
            locations=self.locations,
            path=self.path,
            extensions=self.extensions,
        ).to_specification()


class InvalidOutcomeError(GraphqlHttpError):
    """Raised when no execution outcome is supplied for resolution."""

    def __init__(self) -> None:
        super().__init__("An execution outcome is required")


class MissingResponseError(GraphqlHttpError):
    """Raised when every policy in an errors-handler chain declined."""

    def __init__(self) -> None:
        super().__init__(
            "Errors handler chain declined to produce a response; "
            "the last handler must always respond"
        )


class InvalidRequestError(GraphqlHttpError):
    """Raised when a GraphQL HTTP request cannot be parsed."""


class UnsupportedMediaTypeError(GraphqlHttpError):
    """Raised when the request body has a content type we cannot read."""

    def __init__(self, media_type: str) -> None:
        super().__init__(f"Unsupported request media type: {media_type}")
        self.media_type = media_type


class NotAcceptableError(GraphqlHttpError):
    """Raised when the client accepts none of the response media types."""

    def __init__(self, accept: str) -> None:
        super().__init__(f"No acceptable response media type for: {accept}")
        self.accept = accept


class ConfigurationError(GraphqlHttpError):
    """Raised when the application cannot be wired from its settings."""


class OperationNotAllowedError(GraphqlHttpError):
    """Raised when the selected operation may not run over this HTTP method."""

    def __init__(self, operation: str, method: str) -> None:
        super().__init__(f"Can only perform a {operation} operation from a POST request")
        self.operation = operation
        self.method = method
