"""Augmented transition network: the graph behind a lexer or parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from atnrt.atn_state import ATNState
from atnrt.atn_type import ATNType
from atnrt.transitions import LexerAction

INVALID_ALT = 0


@dataclass(repr=False)
class ATN:
    """States and transitions of a grammar, with lookup tables by rule, mode and decision."""

    grammar_type: ATNType
    max_token_type: int
    decision_to_state: list[int] = field(default_factory=list)
    lexer_actions: list[LexerAction] = field(default_factory=list)
    mode_name_to_start_state: dict[str, int] = field(default_factory=dict)
    mode_to_start_state: list[int] = field(default_factory=list)
    rule_to_start_state: list[int] = field(default_factory=list)
    rule_to_stop_state: list[int] = field(default_factory=list)
    rule_to_token_type: list[int] = field(default_factory=list)
    states: list[ATNState] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.grammar_type = ATNType(self.grammar_type)

    def add_state(self, state: ATNState) -> None:
        """Append a state; its number must equal its position in the list."""
        if state.state_number != len(self.states):
            raise ValueError(
                f"state number {state.state_number} does not match "
                f"position {len(self.states)}"
            )
        self.states.append(state)

    def get_decision_state(self, decision: int) -> int:
        """Number of the state that starts the given decision."""
        return self.decision_to_state[decision]

    def __repr__(self) -> str:
        return (
            f"ATN(grammar_type={self.grammar_type.name}, "
            f"max_token_type={self.max_token_type}, states={len(self.states)})"
        )