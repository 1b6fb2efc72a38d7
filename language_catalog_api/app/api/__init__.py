"""
API package containing the transport layer.

The catalog is exposed through a single GraphQL endpoint defined in
the ``graphql`` subpackage and mounted by ``router.py``.
"""
