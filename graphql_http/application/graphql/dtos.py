"""
Data Transfer Objects for the GraphQL application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ExecuteQueryCommand:
    """Input DTO for running a GraphQL operation.

    Attributes:
        query: GraphQL document text.
        operation_name: Operation to run when the document has several.
        variables: Variable values for the operation.
        allow_mutations: False for requests that must not change state,
            such as GET.
    """

    query: str
    operation_name: Optional[str] = None
    variables: Optional[dict[str, Any]] = None
    allow_mutations: bool = True
