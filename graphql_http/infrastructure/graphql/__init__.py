"""
Infrastructure adapters for the GraphQL bounded context.
"""
