"""Host models used across tests."""

from typing import ClassVar
from uuid import uuid4

from tally.domain.model import VoteCounters, Voteable, Voter
from tally.domain.model.common import DomainModel


class Post(Voteable):
    """Voteable post."""

    title: str = "Test Post"


class Comment(Voteable):
    """Voteable comment stored under a custom type tag."""

    __participant_type__ = "comment"

    text: str = "Test comment"


class Draft(Voteable):
    """Post subclass that withdrew voting eligibility."""

    __voteable__: ClassVar[bool] = False


class Tag(DomainModel):
    """Entity with an id but no voting marker."""

    id: int
    name: str = "science"


class User(Voter, VoteCounters):
    """Voter carrying its own up/down counters."""

    handle: str = "author.bsky.social"


class Bot(Voter):
    """Voter without counters."""

    name: str = "bot"


class Member(Voter, Voteable):
    """Participant that votes and is voted on (members rating members)."""

    name: str = "member"


def make_post(**kwargs) -> Post:
    return Post(id=uuid4(), **kwargs)


def make_user(**kwargs) -> User:
    return User(id=uuid4(), **kwargs)
