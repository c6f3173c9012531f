"""
Conversion of response envelopes into Starlette responses.

The envelope's content type is written as-is; serialization is JSON.
"""

from typing import Optional

from fastapi.responses import JSONResponse

from graphql_http.domain.graphql.entities import ResponseEnvelope
from graphql_http.interfaces.graphql.negotiation import APPLICATION_JSON

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(
    status_code: int,
    message: str,
    media_type: str = APPLICATION_JSON,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build a GraphQL-shaped error response with a single message."""
    return JSONResponse(
        status_code=status_code,
        content={"errors": [{"message": message}]},
        media_type=media_type,
        headers=headers,
    )


def to_json_response(envelope: ResponseEnvelope) -> JSONResponse:
    """Serialize an envelope into a JSON response."""
    return JSONResponse(
        status_code=envelope.status_code,
        content=envelope.to_dict(),
        media_type=envelope.content_type,
    )
