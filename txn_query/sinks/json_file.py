"""JSON file sink for writing transaction datasets."""

import json
from pathlib import Path
from typing import Iterable

from txn_query.exceptions import SinkError
from txn_query.logging import get_logger
from txn_query.models import Transaction
from txn_query.sinks.serialization import record_to_dict

logger = get_logger(__name__)


class JsonFileSink:
    """Write transactions to JSON dataset files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write(self, transactions: Iterable[Transaction], filename: str = "transactions.json") -> Path:
        """Write transactions to a JSON array file in dataset format.

        Returns
        -------
        Path
            Path of the written file.
        """
        file_path = self.output_dir / filename
        data = [record_to_dict(tx) for tx in transactions]

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Cannot write {file_path}: {exc}") from exc

        self._counts[filename] = len(data)
        logger.info("Wrote %d transactions to %s", len(data), file_path)
        return file_path

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for filename, count in self._counts.items():
            print(f"  {filename}: {count} records")
