"""Query layer over loaded transaction records."""

from txn_query.engine.query import QueryEngine

__all__ = ["QueryEngine"]
