"""Unit tests for the production container."""

from dishka import Provider, Scope, provide
import pytest
from sqlalchemy import Column, Integer, MetaData, Table

from tally.domain.service import VoteService
from tally.persistence.counters import CounterTables
from tally.persistence.repository import PostgresUnitOfWork
from tally.util.di.container import create_container

users_table = Table(
    "users",
    MetaData(),
    Column("id", Integer, primary_key=True),
    Column("up_votes", Integer, nullable=False),
    Column("down_votes", Integer, nullable=False),
)


class HostCounterTablesProvider(Provider):
    """Host provider registering its own counter table."""

    @provide(scope=Scope.APP)
    def get_counter_tables(self) -> CounterTables:
        counter_tables = CounterTables()
        counter_tables.register("User", users_table)
        return counter_tables


class TestCreateContainer:
    """Wiring of production providers (no database connection is opened)."""

    @pytest.fixture(autouse=True)
    def _offline(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "test")
        monkeypatch.setenv("OBSERVABILITY__SEND_TO_LOGFIRE", "false")

    @pytest.mark.asyncio
    async def test_provides_vote_service_over_postgres(self):
        # Arrange
        container = create_container()

        # Act
        try:
            async with container() as request_container:
                vote_service = await request_container.get(VoteService)
        finally:
            await container.close()

        # Assert
        assert isinstance(vote_service.unit_of_work, PostgresUnitOfWork)
        assert vote_service.settings.conflict_retries >= 0

    @pytest.mark.asyncio
    async def test_host_provider_overrides_counter_tables(self):
        # Arrange
        container = create_container(HostCounterTablesProvider())

        # Act
        try:
            counter_tables = await container.get(CounterTables)
        finally:
            await container.close()

        # Assert
        assert "User" in counter_tables
