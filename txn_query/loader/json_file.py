"""JSON file loader for transaction datasets."""

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from txn_query.exceptions import LoadError
from txn_query.logging import get_logger
from txn_query.models import Transaction

logger = get_logger(__name__)

REQUIRED_KEYS = ("mtn", "amount", "senderFullName", "beneficiaryFullName", "beneficiaryAge")


def load_transactions(path: str | Path) -> tuple[Transaction, ...]:
    """Load every transaction from a JSON dataset file.

    The file must hold a JSON array of objects. Records keep their file
    order. Loading is all-or-nothing: one bad entry fails the whole file.

    Parameters
    ----------
    path : str | Path
        Path to the dataset file.

    Returns
    -------
    tuple[Transaction, ...]
        Parsed transactions in file order.

    Raises
    ------
    LoadError
        If the file is missing, unreadable or malformed.
    """
    file_path = Path(path)
    logger.debug("Reading transactions from %s", file_path)

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f, parse_float=Decimal)
    except FileNotFoundError as exc:
        raise LoadError(f"Dataset file not found: {file_path}") from exc
    except OSError as exc:
        raise LoadError(f"Cannot read dataset file {file_path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise LoadError(f"Dataset file {file_path} is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise LoadError(f"Dataset file {file_path} must contain a JSON array")

    transactions = []
    for index, entry in enumerate(data):
        try:
            transactions.append(parse_transaction(entry))
        except LoadError as exc:
            raise LoadError(f"{file_path}: entry {index}: {exc}") from exc

    logger.info(
        "Loaded %d transactions from %s",
        len(transactions),
        file_path,
        extra={"extra": {"path": str(file_path), "transactions": len(transactions)}},
    )
    return tuple(transactions)


def parse_transaction(entry: Any) -> Transaction:
    """Build a transaction from one decoded dataset entry.

    Parameters
    ----------
    entry : Any
        Decoded JSON object.

    Returns
    -------
    Transaction
        Parsed transaction.
    """
    if not isinstance(entry, dict):
        raise LoadError(f"expected an object, got {type(entry).__name__}")

    missing = [key for key in REQUIRED_KEYS if entry.get(key) is None]
    if missing:
        raise LoadError(f"missing required fields: {', '.join(missing)}")

    issue_id = entry.get("issueId")
    issue_solved = entry.get("issueSolved")
    issue_message = entry.get("issueMessage")

    if issue_solved is not None and not isinstance(issue_solved, bool):
        raise LoadError(f"issueSolved must be a boolean, got {issue_solved!r}")
    if issue_message is not None and not isinstance(issue_message, str):
        raise LoadError(f"issueMessage must be a string, got {issue_message!r}")

    return Transaction(
        mtn=_to_int("mtn", entry["mtn"]),
        amount=_to_decimal("amount", entry["amount"]),
        sender_full_name=_to_str("senderFullName", entry["senderFullName"]),
        beneficiary_full_name=_to_str("beneficiaryFullName", entry["beneficiaryFullName"]),
        beneficiary_age=_to_int("beneficiaryAge", entry["beneficiaryAge"]),
        issue_id=_to_int("issueId", issue_id) if issue_id is not None else None,
        issue_solved=bool(issue_solved),
        issue_message=issue_message,
    )


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise LoadError(f"{key} must be an integer, got {value!r}")
    return value


def _to_decimal(key: str, value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, Decimal, str)):
        raise LoadError(f"{key} must be a number, got {value!r}")
    try:
        amount = Decimal(value)
    except InvalidOperation as exc:
        raise LoadError(f"{key} must be a number, got {value!r}") from exc
    if not amount.is_finite():
        raise LoadError(f"{key} must be a finite number, got {value!r}")
    return amount


def _to_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise LoadError(f"{key} must be a string, got {value!r}")
    return value
