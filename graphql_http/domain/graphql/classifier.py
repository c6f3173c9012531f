"""
Outcome classification.

Decides which response category an execution outcome belongs to.
Pure function of the outcome; never performs IO.
"""

from graphql_http.domain.graphql.entities import Category, ErrorKind, ExecutionOutcome


def classify(outcome: ExecutionOutcome) -> Category:
    """Return the category of an execution outcome.

    First match wins:

    1. A fatal ``cause`` is present -> ``FATAL``.
    2. Any error is a validation error -> ``CLIENT_VALIDATION``.
    3. Otherwise -> ``NORMAL``, including outcomes carrying inline
       execution errors.
    """
    if outcome.cause is not None:
        return Category.FATAL
    if any(error.kind is ErrorKind.VALIDATION for error in outcome.errors):
        return Category.CLIENT_VALIDATION
    return Category.NORMAL
