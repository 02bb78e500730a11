"""States of an augmented transition network."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional

from atnrt.transitions import CodeSet, Transition

INVALID_STATE_NUMBER = -1


class ATNStateKind(IntEnum):
    """Serialized identifiers of ATN state kinds."""

    INVALID = 0
    BASIC = 1
    RULE_START = 2
    BLOCK_START = 3
    PLUS_BLOCK_START = 4
    STAR_BLOCK_START = 5
    TOKEN_START = 6
    RULE_STOP = 7
    BLOCK_END = 8
    STAR_LOOP_BACK = 9
    STAR_LOOP_ENTRY = 10
    PLUS_LOOP_BACK = 11
    LOOP_END = 12


class BlockStartKind(Enum):
    """Flavour of a block start state."""

    BASIC = "basic"
    STAR = "star"
    PLUS = "plus"


_DECISION_KINDS = frozenset(
    {
        ATNStateKind.BLOCK_START,
        ATNStateKind.PLUS_BLOCK_START,
        ATNStateKind.STAR_BLOCK_START,
        ATNStateKind.TOKEN_START,
        ATNStateKind.STAR_LOOP_ENTRY,
        ATNStateKind.PLUS_LOOP_BACK,
    }
)

_BLOCK_START_KINDS = {
    ATNStateKind.BLOCK_START: BlockStartKind.BASIC,
    ATNStateKind.STAR_BLOCK_START: BlockStartKind.STAR,
    ATNStateKind.PLUS_BLOCK_START: BlockStartKind.PLUS,
}


@dataclass
class ATNState:
    """One node of the ATN with its outgoing transitions.

    Attributes that only make sense for some kinds keep their defaults
    for the others: ``decision`` and ``nongreedy`` for decision states,
    ``end_state`` for block starts, ``loop_back_state`` for loop ends,
    plus-block starts and star-loop entries, ``is_precedence`` for
    star-loop entries, ``stop_state`` and ``is_left_recursive`` for rule
    starts.
    """

    state_number: int = 0
    rule_index: int = 0
    kind: ATNStateKind = ATNStateKind.INVALID
    transitions: list[Transition] = field(default_factory=list)
    epsilon_only_transitions: bool = False
    decision: int = -1
    nongreedy: bool = False
    end_state: int = 0
    loop_back_state: int = 0
    is_precedence: bool = False
    stop_state: int = 0
    is_left_recursive: bool = False
    next_tokens_within_rule: Optional[CodeSet] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        self.kind = ATNStateKind(self.kind)

    @property
    def block_start(self) -> Optional[BlockStartKind]:
        """Flavour of block start, or None when this is not a block start."""
        return _BLOCK_START_KINDS.get(self.kind)

    def is_decision(self) -> bool:
        return self.kind in _DECISION_KINDS

    def add_transition(self, transition: Transition) -> None:
        """Append a transition unless an equivalent one to the same target exists."""
        if self.transitions:
            self.epsilon_only_transitions = (
                self.epsilon_only_transitions and transition.is_epsilon()
            )
        else:
            self.epsilon_only_transitions = transition.is_epsilon()

        new_label = transition.label()
        for existing in self.transitions:
            if existing.target != transition.target:
                continue
            old_label = existing.label()
            if old_label is not None and new_label is not None and old_label == new_label:
                return
            if existing.is_epsilon() and transition.is_epsilon():
                return
        self.transitions.append(transition)