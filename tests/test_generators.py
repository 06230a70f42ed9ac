"""Tests for the synthetic transaction generator."""

from decimal import Decimal

import pytest

from txn_query.generators import TransactionGenerator


class TestTransactionGenerator:
    """Tests for TransactionGenerator."""

    def test_generate_transaction(self, seed: int) -> None:
        gen = TransactionGenerator(seed=seed)
        tx = gen.generate()

        assert isinstance(tx.amount, Decimal)
        assert 0 < tx.amount <= TransactionGenerator.MAX_AMOUNT
        assert tx.sender_full_name in gen.clients
        assert tx.beneficiary_full_name in gen.clients
        assert tx.sender_full_name != tx.beneficiary_full_name
        assert TransactionGenerator.MIN_AGE <= tx.beneficiary_age <= TransactionGenerator.MAX_AGE

    def test_generate_batch(self, seed: int) -> None:
        gen = TransactionGenerator(seed=seed)
        transactions = list(gen.generate_batch(25))

        assert len(transactions) == 25
        mtns = [tx.mtn for tx in transactions]
        assert mtns == sorted(mtns)
        assert len(set(mtns)) == 25

    def test_client_pool(self, seed: int) -> None:
        gen = TransactionGenerator(seed=seed, num_clients=5)

        assert len(gen.clients) == 5
        assert len(set(gen.clients)) == 5

    def test_beneficiary_age_is_stable_per_client(self, seed: int) -> None:
        gen = TransactionGenerator(seed=seed, num_clients=3)
        ages: dict[str, int] = {}

        for tx in gen.generate_batch(50):
            assert ages.setdefault(tx.beneficiary_full_name, tx.beneficiary_age) == tx.beneficiary_age

    def test_no_issues(self, seed: int) -> None:
        gen = TransactionGenerator(seed=seed, issue_rate=0.0)

        assert not any(tx.has_issue for tx in gen.generate_batch(50))

    def test_all_issues_open(self, seed: int) -> None:
        gen = TransactionGenerator(seed=seed, issue_rate=1.0, solved_rate=0.0)
        transactions = list(gen.generate_batch(20))

        assert all(tx.has_open_issue for tx in transactions)
        assert [tx.issue_id for tx in transactions] == list(range(1, 21))
        assert all(tx.issue_message in TransactionGenerator.ISSUE_MESSAGES for tx in transactions)

    def test_all_issues_solved(self, seed: int) -> None:
        gen = TransactionGenerator(seed=seed, issue_rate=1.0, solved_rate=1.0)

        assert all(tx.has_solved_issue for tx in gen.generate_batch(20))

    def test_reproducible_with_seed(self, seed: int) -> None:
        first = list(TransactionGenerator(seed=seed).generate_batch(10))
        second = list(TransactionGenerator(seed=seed).generate_batch(10))

        assert first == second

    def test_needs_two_clients(self) -> None:
        with pytest.raises(ValueError):
            TransactionGenerator(num_clients=1)
