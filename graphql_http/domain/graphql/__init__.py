"""
GraphQL bounded context: domain layer.

This module contains the response-mapping logic:
- Execution outcome and response envelope entities
- Outcome classification (fatal, client validation, normal)
- Composable response policies and the default terminal policy
"""
