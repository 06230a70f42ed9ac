"""Analytical queries over financial transaction datasets."""

from txn_query.engine import QueryEngine
from txn_query.loader import load_transactions
from txn_query.models import Transaction

__all__ = ["QueryEngine", "Transaction", "load_transactions"]
