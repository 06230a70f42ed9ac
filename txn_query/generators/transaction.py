"""Transaction generator for synthetic datasets."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator

from txn_query.generators.base import BaseGenerator
from txn_query.models import Transaction


class TransactionGenerator(BaseGenerator):
    """Generate synthetic money transfers between a fixed set of clients.

    Clients are drawn from a pool of ``num_clients`` names so that senders
    and beneficiaries repeat across the dataset, which is what makes the
    grouping and ranking queries interesting.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    num_clients : int
        Size of the client name pool (at least 2).
    issue_rate : float
        Probability that a transaction carries a compliance issue.
    solved_rate : float
        Probability that a raised issue is already solved.
    locale : str
        Faker locale.
    """

    ISSUE_MESSAGES = [
        "Looks like money laundering",
        "Never gonna give you up",
        "Don't let this transaction happen",
        "Beneficiary name does not match account holder",
        "Amount above reporting threshold",
        "Sender flagged on sanctions list",
    ]

    MIN_AGE = 18
    MAX_AGE = 90
    MAX_AMOUNT = 50000

    def __init__(
        self,
        seed: int | None = None,
        num_clients: int = 20,
        issue_rate: float = 0.3,
        solved_rate: float = 0.5,
        locale: str = "en_US",
    ) -> None:
        super().__init__(seed, locale=locale)
        if num_clients < 2:
            raise ValueError("num_clients must be at least 2")
        self.issue_rate = issue_rate
        self.solved_rate = solved_rate
        self.clients = self._generate_clients(num_clients)
        self._ages = {name: random.randint(self.MIN_AGE, self.MAX_AGE) for name in self.clients}
        self._next_mtn = random.randint(600000, 699999)
        self._next_issue_id = 1

    def generate(self) -> Transaction:
        """Generate a single transaction.

        Returns
        -------
        Transaction
            Generated transaction.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Transaction]:
        """Generate multiple transactions.

        Parameters
        ----------
        count : int
            Number of transactions to generate.

        Yields
        ------
        Transaction
            Generated transactions.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Transaction:
        sender, beneficiary = random.sample(self.clients, 2)

        # Pareto-distributed amounts: many small transfers, few large ones
        amount = min(random.paretovariate(1.5) * 50, self.MAX_AMOUNT)

        issue_id = None
        issue_solved = False
        issue_message = None
        if random.random() < self.issue_rate:
            issue_id = self._next_issue_id
            self._next_issue_id += 1
            issue_solved = random.random() < self.solved_rate
            issue_message = random.choice(self.ISSUE_MESSAGES)

        mtn = self._next_mtn
        self._next_mtn += 1

        return Transaction(
            mtn=mtn,
            amount=Decimal(str(round(amount, 2))),
            sender_full_name=sender,
            beneficiary_full_name=beneficiary,
            beneficiary_age=self._ages[beneficiary],
            issue_id=issue_id,
            issue_solved=issue_solved,
            issue_message=issue_message,
        )

    def _generate_clients(self, count: int) -> list[str]:
        """Generate ``count`` distinct client names."""
        names: list[str] = []
        seen: set[str] = set()
        while len(names) < count:
            name = self.fake.name()
            if name not in seen:
                seen.add(name)
                names.append(name)
        return names
