"""Vote state machine.

Pure planning: given the action requested and the pair's current state,
decide the target state, the ledger write and the counter delta. Nothing
here touches storage.

    action     NONE            UP              DOWN
    up_vote    create, +up     AlreadyVoted    update, -down +up
    down_vote  create, +down   update, -up +down  AlreadyVoted
    unvote     NotVoted        delete, -up     delete, -down
"""

from tally.domain.error import AlreadyVotedError, NotVotedError
from tally.domain.value import (
    CounterDelta,
    LedgerAction,
    Transition,
    VoteAction,
    VoteState,
)

_TARGETS = {
    VoteAction.UP_VOTE: VoteState.UP,
    VoteAction.DOWN_VOTE: VoteState.DOWN,
    VoteAction.UNVOTE: VoteState.NONE,
}


def _delta(previous: VoteState, target: VoteState) -> CounterDelta:
    up = int(target is VoteState.UP) - int(previous is VoteState.UP)
    down = int(target is VoteState.DOWN) - int(previous is VoteState.DOWN)
    return CounterDelta(up=up, down=down)


def plan_transition(action: VoteAction, current: VoteState) -> Transition:
    """Plan the transition of a pair from its current state.

    Args:
        action: Requested operation
        current: Current state of the (voter, voteable) pair

    Returns:
        The planned transition

    Raises:
        AlreadyVotedError: If the pair already is in the requested vote state
        NotVotedError: If unvoting a pair that has no vote
    """
    target = _TARGETS[action]

    if current is target:
        if target is VoteState.NONE:
            raise NotVotedError()
        raise AlreadyVotedError(up=target is VoteState.UP)

    if current is VoteState.NONE:
        ledger_action = LedgerAction.CREATE
    elif target is VoteState.NONE:
        ledger_action = LedgerAction.DELETE
    else:
        ledger_action = LedgerAction.UPDATE

    return Transition(
        action=action,
        previous=current,
        target=target,
        ledger_action=ledger_action,
        delta=_delta(current, target),
    )
