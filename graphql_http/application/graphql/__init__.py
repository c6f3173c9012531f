"""
Application layer for the GraphQL bounded context.

Use cases run queries through the execution port and resolve the
outcome into a response envelope. No framework or infrastructure
imports allowed.
"""
