"""Output sinks for datasets and query results."""

from txn_query.sinks.console import ConsoleSink
from txn_query.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
