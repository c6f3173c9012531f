"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. The GraphQL execution engine
integration lives here.
"""
