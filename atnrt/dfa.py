"""DFA cached for one prediction decision."""

from __future__ import annotations

from typing import Any, Optional

from atnrt.atn import ATN
from atnrt.atn_state import ATNStateKind
from atnrt.dfa_serializer import DFASerializer
from atnrt.dfa_state import ERROR_DFA_STATE_REF, DFAState


class DFA:
    """States built so far for one decision; index 0 is a placeholder for 'none'."""

    def __init__(self, atn: ATN, atn_start_state: int, decision: int) -> None:
        self.atn_start_state = atn_start_state
        self.decision = decision
        self.states: list[DFAState] = [DFAState(ERROR_DFA_STATE_REF)]
        self.states_map: dict[int, list[int]] = {}
        self.s0: Optional[int] = None
        self._is_precedence_dfa = False

        start = atn.states[atn_start_state]
        if start.kind is ATNStateKind.STAR_LOOP_ENTRY and start.is_precedence:
            self._is_precedence_dfa = True
            precedence_state = DFAState(len(self.states))
            self.s0 = precedence_state.state_number
            self.states.append(precedence_state)

    def is_precedence_dfa(self) -> bool:
        return self._is_precedence_dfa

    def set_precedence_dfa(self, precedence_dfa: bool) -> None:
        self._is_precedence_dfa = precedence_dfa

    def get_precedence_start_state(self, precedence: int) -> Optional[int]:
        """Start state for a precedence level, or None if not computed yet."""
        if not self._is_precedence_dfa:
            raise RuntimeError("dfa is supposed to be precedence here")
        if self.s0 is None or precedence < 0:
            return None
        edges = self.states[self.s0].edges
        if precedence >= len(edges) or edges[precedence] == 0:
            return None
        return edges[precedence]

    def set_precedence_start_state(self, precedence: int, start_state: int) -> None:
        if not self._is_precedence_dfa:
            raise RuntimeError("set_precedence_start_state called for not precedence dfa")
        if precedence < 0 or self.s0 is None:
            return
        edges = self.states[self.s0].edges
        if len(edges) <= precedence:
            edges.extend([0] * (precedence + 1 - len(edges)))
        edges[precedence] = start_state

    def to_string(self, vocabulary: Any) -> str:
        if self.s0 is None:
            return ""
        return str(DFASerializer(self, lambda x: str(vocabulary.get_display_name(x - 1))))

    def to_lexer_string(self) -> str:
        if self.s0 is None:
            return ""
        return str(DFASerializer(self, lambda x: f"'{chr(x)}'"))