"""
Domain layer package.

Contains pure response-mapping logic: entities, the outcome classifier,
response policies, and port interfaces. This layer has ZERO external
dependencies. No framework imports, no IO, no side effects.
"""
