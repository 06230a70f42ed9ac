"""Pytest configuration and fixtures."""

import json
from decimal import Decimal
from pathlib import Path

import pytest

from txn_query.engine import QueryEngine
from txn_query.models import Transaction


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Three transactions: no issue, open issue, solved issue."""
    return [
        Transaction(
            mtn=1,
            amount=Decimal("100"),
            sender_full_name="A",
            beneficiary_full_name="B",
            beneficiary_age=30,
        ),
        Transaction(
            mtn=2,
            amount=Decimal("500"),
            sender_full_name="A",
            beneficiary_full_name="C",
            beneficiary_age=40,
            issue_id=1,
            issue_solved=False,
        ),
        Transaction(
            mtn=3,
            amount=Decimal("300"),
            sender_full_name="B",
            beneficiary_full_name="A",
            beneficiary_age=50,
            issue_id=2,
            issue_solved=True,
            issue_message="fixed",
        ),
    ]


@pytest.fixture
def engine(sample_transactions: list[Transaction]) -> QueryEngine:
    """Engine over the three sample transactions."""
    return QueryEngine(sample_transactions)


@pytest.fixture
def empty_engine() -> QueryEngine:
    """Engine with no transactions."""
    return QueryEngine([])


@pytest.fixture
def sample_entries() -> list[dict]:
    """Dataset file entries matching ``sample_transactions``."""
    return [
        {
            "mtn": 1,
            "amount": 100,
            "senderFullName": "A",
            "beneficiaryFullName": "B",
            "beneficiaryAge": 30,
            "issueId": None,
            "issueSolved": None,
            "issueMessage": None,
        },
        {
            "mtn": 2,
            "amount": 500.0,
            "senderFullName": "A",
            "beneficiaryFullName": "C",
            "beneficiaryAge": 40,
            "issueId": 1,
            "issueSolved": False,
        },
        {
            "mtn": 3,
            "amount": 300.0,
            "senderFullName": "B",
            "beneficiaryFullName": "A",
            "beneficiaryAge": 50,
            "issueId": 2,
            "issueSolved": True,
            "issueMessage": "fixed",
        },
    ]


@pytest.fixture
def dataset_file(tmp_path: Path, sample_entries: list[dict]) -> Path:
    """Dataset file holding ``sample_entries``."""
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps(sample_entries), encoding="utf-8")
    return path
