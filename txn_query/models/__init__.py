"""Domain models for transaction queries."""

from txn_query.models.transaction import Transaction

__all__ = ["Transaction"]
