"""
Pydantic schemas for GraphQL HTTP request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class GraphqlRequest(BaseModel):
    """Request schema for a GraphQL operation.

    Attributes:
        query: GraphQL document text.
        operation_name: Operation to run (``operationName`` on the wire).
        variables: Variable values for the operation.
    """

    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., min_length=1, description="GraphQL document")
    operation_name: Optional[str] = Field(
        None, alias="operationName", description="Operation to execute"
    )
    variables: Optional[dict[str, Any]] = Field(
        None, description="Variable values for the operation"
    )


class GraphqlErrorItem(BaseModel):
    """A single entry of the ``errors`` array."""

    message: str
    locations: Optional[list[dict[str, int]]] = None
    path: Optional[list[Any]] = None
    extensions: Optional[dict[str, Any]] = None


class GraphqlResponse(BaseModel):
    """Response schema for a GraphQL operation.

    ``errors`` is omitted when empty and ``data`` when execution never
    started.
    """

    data: Optional[Any] = None
    errors: Optional[list[GraphqlErrorItem]] = None


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
