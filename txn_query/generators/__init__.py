"""Synthetic transaction dataset generators."""

from txn_query.generators.transaction import TransactionGenerator

__all__ = ["TransactionGenerator"]
