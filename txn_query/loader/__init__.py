"""Loaders that turn dataset files into transaction records."""

from txn_query.loader.json_file import load_transactions, parse_transaction

__all__ = ["load_transactions", "parse_transaction"]
