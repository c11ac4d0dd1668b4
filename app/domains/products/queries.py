"""Product queries."""

from ...shared.cqrs.queries import Query


class GetProductsQuery(Query):
    """Query to list every product in insertion order."""
    pass
