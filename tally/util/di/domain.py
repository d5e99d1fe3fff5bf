"""Domain layer DI providers."""

from dishka import Scope, provide

from tally.config import VotingSettings
from tally.domain.repository import UnitOfWork
from tally.domain.service import VoteService
from tally.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; each vote operation still opens and
    closes its own transaction through the unit of work.
    """

    scope = Scope.REQUEST

    @provide
    def get_vote_service(
        self, unit_of_work: UnitOfWork, voting_settings: VotingSettings
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(unit_of_work=unit_of_work, settings=voting_settings)
