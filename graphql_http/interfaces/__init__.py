"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
media-type negotiation and envelope-to-response conversion.
No business logic belongs here. Routes call use cases and
return responses.
"""
