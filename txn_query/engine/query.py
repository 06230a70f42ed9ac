"""Analytical queries over an immutable set of transactions."""

from __future__ import annotations

from collections import Counter
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Iterator

from txn_query.exceptions import InvalidArgumentError
from txn_query.loader import load_transactions
from txn_query.logging import get_logger
from txn_query.models import Transaction

logger = get_logger(__name__)


class QueryEngine:
    """Read-only queries over transactions loaded once.

    Records are frozen into a tuple at construction and never reloaded or
    modified, so every query is a pure function of that tuple and an
    engine can be shared between readers.

    Parameters
    ----------
    records : Iterable[Transaction]
        Transactions in dataset order.
    """

    def __init__(self, records: Iterable[Transaction]) -> None:
        self._records: tuple[Transaction, ...] = tuple(records)
        logger.debug("Query engine ready with %d transactions", len(self._records))

    @classmethod
    def from_file(cls, path: str | Path) -> QueryEngine:
        """Load a dataset file and build an engine over it."""
        return cls(load_transactions(path))

    @property
    def records(self) -> tuple[Transaction, ...]:
        """Transactions in dataset order."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._records)

    # Aggregates
    def total_amount(self) -> Decimal:
        """Sum of the amounts of all transactions."""
        return sum((tx.amount for tx in self._records), Decimal(0))

    def total_amount_sent_by(self, sender_full_name: str) -> Decimal:
        """Sum of the amounts of all transactions sent by a client.

        Names are compared exactly, including case.
        """
        _require_name("sender_full_name", sender_full_name)
        return sum(
            (tx.amount for tx in self._records if tx.sender_full_name == sender_full_name),
            Decimal(0),
        )

    def total_amount_received_by(self, beneficiary_full_name: str) -> Decimal:
        """Sum of the amounts of all transactions received by a client."""
        _require_name("beneficiary_full_name", beneficiary_full_name)
        return sum(
            (tx.amount for tx in self._records if tx.beneficiary_full_name == beneficiary_full_name),
            Decimal(0),
        )

    def max_amount(self) -> Decimal | None:
        """Highest transaction amount, or ``None`` when there are no records."""
        return max((tx.amount for tx in self._records), default=None)

    # Clients
    def count_unique_clients(self) -> int:
        """Number of distinct clients that sent or received a transaction."""
        clients = {tx.sender_full_name for tx in self._records}
        clients.update(tx.beneficiary_full_name for tx in self._records)
        return len(clients)

    def count_unique_senders(self) -> int:
        """Number of distinct clients that sent a transaction."""
        return len({tx.sender_full_name for tx in self._records})

    # Compliance
    def has_open_compliance_issue(self, client_full_name: str) -> bool:
        """Whether a client has at least one transaction with an unsolved issue.

        The client may appear as sender or beneficiary.
        """
        _require_name("client_full_name", client_full_name)
        return any(
            tx.has_open_issue and tx.involves(client_full_name) for tx in self._records
        )

    def unsolved_issue_ids(self) -> set[int]:
        """Identifiers of all open compliance issues."""
        return {tx.issue_id for tx in self._records if tx.has_open_issue}

    def solved_issue_messages(self) -> list[str | None]:
        """Messages of every solved compliance issue, in dataset order.

        A solved issue without a message contributes ``None``.
        """
        return [tx.issue_message for tx in self._records if tx.has_solved_issue]

    # Indexes
    def transactions_by_beneficiary(self) -> dict[str, Transaction]:
        """Transactions indexed by beneficiary name.

        Only one transaction is kept per beneficiary: the last one in
        dataset order. Use :meth:`transactions_grouped_by_beneficiary` to
        keep all of them.
        """
        return {tx.beneficiary_full_name: tx for tx in self._records}

    def transactions_grouped_by_beneficiary(self) -> dict[str, list[Transaction]]:
        """All transactions grouped by beneficiary name, in dataset order."""
        groups: dict[str, list[Transaction]] = {}
        for tx in self._records:
            groups.setdefault(tx.beneficiary_full_name, []).append(tx)
        return groups

    # Rankings
    def top_n_by_amount(self, n: int) -> list[Transaction]:
        """The ``n`` transactions with the highest amount, highest first.

        Equal amounts keep dataset order.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidArgumentError(f"n must be a non-negative integer, got {n!r}")
        # sorted() is stable under reverse=True
        return sorted(self._records, key=lambda tx: tx.amount, reverse=True)[:n]

    def top3_by_amount(self) -> list[Transaction]:
        """The 3 transactions with the highest amount, highest first."""
        return self.top_n_by_amount(3)

    def top_sender_by_frequency(self) -> str | None:
        """Sender appearing in the most transactions.

        Ties go to the sender seen first. ``None`` when there are no records.
        """
        counts = Counter(tx.sender_full_name for tx in self._records)
        if not counts:
            return None
        # most_common keeps first-seen order among equal counts
        return counts.most_common(1)[0][0]

    def top_sender_by_total_amount(self) -> str | None:
        """Sender with the largest total amount sent.

        Ties go to the sender seen first. ``None`` when there are no records.
        """
        totals: dict[str, Decimal] = {}
        for tx in self._records:
            totals[tx.sender_full_name] = totals.get(tx.sender_full_name, Decimal(0)) + tx.amount
        if not totals:
            return None
        return max(totals.items(), key=lambda item: item[1])[0]

    def summary(self) -> dict[str, int]:
        """Return summary counts over the dataset."""
        return {
            "transactions": len(self._records),
            "unique_clients": self.count_unique_clients(),
            "unique_senders": self.count_unique_senders(),
            "open_issues": len(self.unsolved_issue_ids()),
            "solved_issues": sum(1 for tx in self._records if tx.has_solved_issue),
        }


def _require_name(argument: str, value: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{argument} is required")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{argument} must be a string, got {type(value).__name__}")
