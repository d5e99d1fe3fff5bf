"""Test configuration and fixtures."""

import logfire
import pytest

from tests.fixtures import Bot, Post, User, make_post, make_user


@pytest.fixture(scope="session", autouse=True)
def local_logfire():
    """Configure Logfire once, keeping spans local and off the console."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def user() -> User:
    """Voter with counters."""
    return make_user()


@pytest.fixture
def bot() -> Bot:
    """Voter without counters."""
    return Bot(id=42)


@pytest.fixture
def post() -> Post:
    """Fresh voteable post."""
    return make_post()
