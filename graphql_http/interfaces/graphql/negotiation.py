"""
Response media-type negotiation for GraphQL over HTTP.

Picks the response media type from the request's Accept header.
Only JSON media types are produced.
"""

from typing import Optional

from graphql_http.domain.graphql.errors import NotAcceptableError

GRAPHQL_RESPONSE_JSON = "application/graphql-response+json"
APPLICATION_JSON = "application/json"
APPLICATION_GRAPHQL = "application/graphql"

SUPPORTED_MEDIA_TYPES = (GRAPHQL_RESPONSE_JSON, APPLICATION_JSON)
WILDCARDS = ("*/*", "application/*")


def _parse_accept(accept: str) -> list[tuple[str, float]]:
    """Split an Accept header into ``(media_type, quality)`` pairs."""
    ranges: list[tuple[str, float]] = []
    for part in accept.split(","):
        media_type, *params = [p.strip() for p in part.split(";")]
        if not media_type:
            continue
        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        ranges.append((media_type.lower(), quality))
    # Stable sort keeps header order among equal qualities.
    return sorted(ranges, key=lambda item: item[1], reverse=True)


def negotiate_media_type(accept: Optional[str], default: str = GRAPHQL_RESPONSE_JSON) -> str:
    """Return the response media type for an Accept header.

    A missing or empty header yields ``default``. A wildcard range yields
    ``default`` unless the client refused it with ``q=0``, in which case
    the next supported type that was not refused is used.

    Raises:
        NotAcceptableError: If no supported media type is acceptable.
    """
    if not accept or not accept.strip():
        return default

    ranges = _parse_accept(accept)
    refused = {media_type for media_type, quality in ranges if quality <= 0}
    fallbacks = [default] + [t for t in SUPPORTED_MEDIA_TYPES if t != default]

    for media_type, quality in ranges:
        if quality <= 0:
            continue
        if media_type in SUPPORTED_MEDIA_TYPES and media_type not in refused:
            return media_type
        if media_type in WILDCARDS:
            for candidate in fallbacks:
                if candidate not in refused:
                    return candidate
    raise NotAcceptableError(accept)
