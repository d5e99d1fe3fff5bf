"""Domain services."""

from .base import Service
from .transition import plan_transition
from .vote_service import VoteService

__all__ = [
    "Service",
    "VoteService",
    "plan_transition",
]
