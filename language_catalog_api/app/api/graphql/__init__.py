"""
GraphQL transport for the catalog.

Strawberry types mirroring the catalog records, the ``Query`` root and
the FastAPI router that serves them.
"""

from .schema import schema

__all__ = ["schema"]
