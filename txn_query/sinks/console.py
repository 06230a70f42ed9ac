"""Console sink for query results."""

import json
from typing import Any

from txn_query.sinks.serialization import serialize_value


class ConsoleSink:
    """Print query results to stdout as JSON."""

    def __init__(self, pretty: bool = True) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        """
        self.pretty = pretty

    def write_result(self, result: Any) -> None:
        """Print a single query result."""
        data = serialize_value(result)
        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            print(json.dumps(data, ensure_ascii=False))
