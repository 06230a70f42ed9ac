"""Shared serialization utilities for sinks."""

from decimal import Decimal
from typing import Any

from txn_query.models import Transaction

# Attribute name -> dataset file key
FIELD_KEYS = {
    "mtn": "mtn",
    "amount": "amount",
    "sender_full_name": "senderFullName",
    "beneficiary_full_name": "beneficiaryFullName",
    "beneficiary_age": "beneficiaryAge",
    "issue_id": "issueId",
    "issue_solved": "issueSolved",
    "issue_message": "issueMessage",
}


def record_to_dict(transaction: Transaction) -> dict[str, Any]:
    """Convert a transaction to a dataset file entry.

    The result uses the same keys the loader reads. Amounts are written as
    decimal strings so a written dataset loads back into equal transactions.
    """
    return {
        key: serialize_value(getattr(transaction, attr))
        for attr, key in FIELD_KEYS.items()
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Transaction):
        return record_to_dict(value)
    elif isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (set, frozenset)):
        return [serialize_value(v) for v in sorted(value)]
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
