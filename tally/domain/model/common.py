"""Base model for domain entities and host participants."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for ledger entities and the host models that vote.

    Instances are frozen: a vote never mutates the participants passed in,
    it returns copies carrying the stored counts.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
