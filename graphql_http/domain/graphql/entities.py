"""
Domain entities for the GraphQL response-mapping context.

Entities are immutable values describing an execution outcome and the
HTTP response envelope built from it.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

HTTP_200 = 200
HTTP_400 = 400
HTTP_500 = 500


class _Absent:
    """Marker for a result payload that was never produced."""

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Any = _Absent()


def _freeze(value: Any) -> Any:
    """Return a read-only deep copy: mappings become proxies, lists tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


class ErrorKind(Enum):
    """Origin of a GraphQL error."""

    VALIDATION = "validation"
    EXECUTION = "execution"
    OTHER = "other"


class Category(Enum):
    """Outcome category that selects the response status."""

    FATAL = "fatal"
    CLIENT_VALIDATION = "client_validation"
    NORMAL = "normal"


@dataclass(frozen=True)
class GraphError:
    """A single error reported by the execution engine.

    ``locations``, ``path`` and ``extensions`` are passed through to the
    response body untouched.
    """

    message: str
    kind: ErrorKind = ErrorKind.EXECUTION
    locations: Optional[list[dict[str, int]]] = None
    path: Optional[list[Any]] = None
    extensions: Optional[dict[str, Any]] = None

    def to_specification(self) -> dict[str, Any]:
        """Return the JSON-serializable error map."""
        spec: dict[str, Any] = {"message": self.message}
        if self.locations:
            spec["locations"] = list(self.locations)
        if self.path:
            spec["path"] = list(self.path)
        if self.extensions:
            spec["extensions"] = dict(self.extensions)
        return spec


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of running one query, created once per request.

    Attributes:
        data: Result payload, or ``ABSENT`` when execution never started.
            ``None`` means the payload is present and null.
        errors: Errors reported by the engine, in order.
        cause: Exception that aborted execution, if any.
    """

    data: Any = ABSENT
    errors: tuple[GraphError, ...] = ()
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def has_data(self) -> bool:
        return self.data is not ABSENT

    def to_specification(self) -> dict[str, Any]:
        """Return the standard ``{"data", "errors"}`` body for this outcome."""
        spec: dict[str, Any] = {}
        if self.errors:
            spec["errors"] = [error.to_specification() for error in self.errors]
        if self.has_data:
            spec["data"] = self.data
        return spec


@dataclass(frozen=True)
class ResponseEnvelope:
    """Transport-agnostic HTTP response built from an outcome.

    The transport layer serializes ``body`` using ``content_type`` and
    writes ``status_code``. ``body`` is exposed read-only.
    """

    status_code: int
    content_type: str
    body: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", _freeze(self.body))

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable deep copy of the body for serialization."""
        return _thaw(self.body)
