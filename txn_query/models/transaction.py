"""Transaction model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """Money transfer record with an optional compliance issue.

    A transaction either carries no issue (``issue_id`` is ``None``) or an
    issue whose status is given by ``issue_solved``.
    """

    mtn: int  # Money transfer number, not unique across records
    amount: Decimal
    sender_full_name: str
    beneficiary_full_name: str
    beneficiary_age: int
    issue_id: int | None = None
    issue_solved: bool = False
    issue_message: str | None = None

    @property
    def has_issue(self) -> bool:
        """Whether a compliance issue was raised on this transaction."""
        return self.issue_id is not None

    @property
    def has_open_issue(self) -> bool:
        """Whether the compliance issue exists and is not solved."""
        return self.issue_id is not None and not self.issue_solved

    @property
    def has_solved_issue(self) -> bool:
        """Whether the compliance issue exists and is solved."""
        return self.issue_id is not None and self.issue_solved

    def involves(self, full_name: str) -> bool:
        """Whether ``full_name`` is the sender or the beneficiary."""
        return full_name in (self.sender_full_name, self.beneficiary_full_name)
