"""
HTTP interface for the GraphQL bounded context.
"""
