"""
graphql-http: maps GraphQL execution results to HTTP responses.

Application package root. A small service built with hexagonal
architecture (ports & adapters).

Bounded contexts:
    - graphql: Outcome classification, response policies, query execution.

Layers:
    - domain: Entities, classifier, response policies, ports, errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: graphql-core adapter implementing the execution port.
    - interfaces: FastAPI routers, Pydantic schemas, negotiation.
    - shared: Cross-cutting concerns (errors, security, logging).
"""

__version__ = "0.1.0"
