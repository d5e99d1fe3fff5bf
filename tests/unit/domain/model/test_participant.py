"""Unit tests for participant models and references."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from tally.domain.model import Voting, has_voter_counters, is_voteable, is_voter
from tally.domain.value import (
    ParticipantRef,
    VoteCounts,
    VoteDirection,
    VoteState,
    VotingId,
)
from tests.fixtures import Bot, Comment, Draft, Post, Tag, User


class TestParticipantRef:
    """Tests for ParticipantRef."""

    def test_ref_uses_class_name(self):
        post_id = uuid4()
        post = Post(id=post_id)

        assert post.ref == ParticipantRef(type="Post", id=str(post_id))

    def test_ref_uses_custom_participant_type(self):
        comment = Comment(id=5)

        assert comment.ref.type == "comment"
        assert comment.ref.id == "5"

    def test_of_plain_model_uses_class_name(self):
        ref = ParticipantRef.of(Tag(id=9))

        assert ref == ParticipantRef(type="Tag", id="9")
        assert str(ref) == "Tag:9"

    def test_integer_and_string_ids_share_a_key(self):
        """Opaque ids are compared by their string form."""
        assert ParticipantRef(type="Bot", id=42) == ParticipantRef(type="Bot", id="42")

    def test_empty_type_is_rejected(self):
        with pytest.raises(ValidationError):
            ParticipantRef(type="", id="1")

    def test_missing_id_is_rejected(self):
        with pytest.raises(ValidationError):
            ParticipantRef(type="Post", id=None)

    def test_refs_are_hashable(self):
        first = ParticipantRef(type="Post", id="1")
        second = ParticipantRef(type="Post", id="1")

        assert {first: "a"}[second] == "a"


class TestCapabilities:
    """Tests for voteable and voter markers."""

    def test_voteable_marker(self):
        assert is_voteable(Post(id=uuid4())) is True
        assert is_voteable(Comment(id=1)) is True

    def test_withdrawn_or_missing_marker(self):
        assert is_voteable(Draft(id=1)) is False
        assert is_voteable(Tag(id=1)) is False
        assert is_voteable(object()) is False

    def test_voter_marker(self):
        assert is_voter(User(id=uuid4())) is True
        assert is_voter(Post(id=uuid4())) is False

    def test_voter_counters_detected_per_class(self):
        assert has_voter_counters(User) is True
        assert has_voter_counters(Bot) is False
        assert has_voter_counters(object) is False


class TestVoteCounters:
    """Tests for counter-carrying models."""

    def test_score_and_total(self):
        post = Post(id=1, up_votes=7, down_votes=3)

        assert post.score == 4
        assert post.total_votes == 10

    def test_with_counts_returns_updated_copy(self):
        post = Post(id=1)

        updated = post.with_counts(VoteCounts(up_votes=2, down_votes=1))

        assert updated.up_votes == 2
        assert updated.down_votes == 1
        assert post.up_votes == 0


class TestVoteState:
    """Tests for VoteState resolution."""

    def test_no_voting_is_none(self):
        assert VoteState.of(None) == VoteState.NONE

    @pytest.mark.parametrize(
        "direction,expected",
        [(VoteDirection.UP, VoteState.UP), (VoteDirection.DOWN, VoteState.DOWN)],
    )
    def test_voting_direction_resolves_state(self, direction, expected):
        voting = Voting(
            id=VotingId(uuid4()),
            voter=ParticipantRef(type="User", id="u1"),
            voteable=ParticipantRef(type="Post", id="p1"),
            direction=direction,
        )

        assert voting.up_vote is (direction is VoteDirection.UP)
        assert VoteState.of(voting) == expected
