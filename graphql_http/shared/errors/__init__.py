"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that transport and wiring errors
are translated into GraphQL-shaped API responses.
"""
