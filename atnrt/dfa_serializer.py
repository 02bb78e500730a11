"""Text rendering of a DFA for debugging and tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from atnrt.dfa_state import ERROR_DFA_STATE_REF, DFAState

if TYPE_CHECKING:
    from atnrt.dfa import DFA


class DFASerializer:
    """Renders every edge of a DFA as ``source-label->target`` lines."""

    def __init__(self, dfa: "DFA", get_edge_label: Callable[[int], str]) -> None:
        self.dfa = dfa
        self.get_edge_label = get_edge_label

    def __str__(self) -> str:
        states = self.dfa.states
        lines = []
        for source in states:
            for symbol, edge in enumerate(source.edges):
                if edge != 0 and edge != ERROR_DFA_STATE_REF:
                    lines.append(
                        f"{self._state_string(source)}-{self.get_edge_label(symbol)}"
                        f"->{self._state_string(states[edge])}\n"
                    )
        return "".join(lines)

    @staticmethod
    def _state_string(state: DFAState) -> str:
        text = (
            f"{':' if state.is_accept_state else ''}s{state.state_number - 1}"
            f"{'^' if state.requires_full_context else ''}"
        )
        if state.is_accept_state:
            if state.predicates:
                text += "=>[" + ", ".join(str(p) for p in state.predicates) + "]"
            else:
                text += f"=>{state.prediction}"
        return text