"""
Pydantic record definitions for the catalog.

Records are immutable once built; the GraphQL layer wraps them in its
own output types so the transport representation stays decoupled from
the data layer.
"""
