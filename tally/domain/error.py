"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class VotingError(DomainError):
    """Base error for vote operations."""

    pass


class InvalidVoteableError(VotingError):
    """Raised when the target does not declare voting eligibility."""

    def __init__(self, voteable_type: str):
        self.voteable_type = voteable_type
        super().__init__(f"{voteable_type} is not voteable")


class AlreadyVotedError(VotingError):
    """Raised when the voter already voted in the requested direction."""

    def __init__(self, up: bool):
        self.up = up
        super().__init__(f"Already {'up' if up else 'down'} voted")

    @property
    def direction(self) -> str:
        return "up" if self.up else "down"


class NotVotedError(VotingError):
    """Raised when unvoting a voteable the voter never voted on."""

    def __init__(self) -> None:
        super().__init__("Not voted")


class DuplicateEntryError(VotingError):
    """Raised when a second ledger entry is written for the same pair.

    Signals a lost race between two transitions on one pair; the whole
    transition can be retried.
    """

    def __init__(self, voter: str, voteable: str):
        self.voter = voter
        self.voteable = voteable
        super().__init__(f"Voting already exists for {voter} on {voteable}")


class TransactionError(VotingError):
    """Raised when the storage transaction fails and is rolled back."""

    pass
