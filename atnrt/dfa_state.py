"""States of a prediction DFA."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

# edge value marking an error target; 0 means "no edge"
ERROR_DFA_STATE_REF = 2**64 - 1


@dataclass(frozen=True)
class PredPrediction:
    """Alternative predicted when a semantic predicate holds."""

    alt: int
    pred: Any

    def __str__(self) -> str:
        return f"({self.alt},{self.pred!r})"


@dataclass(eq=False)
class DFAState:
    """State of a DFA; two states are equal when their configuration sets are."""

    state_number: int
    configs: Any = None
    edges: list[int] = field(default_factory=list)
    is_accept_state: bool = False
    prediction: int = 0
    lexer_action_executor: Optional[Any] = None
    requires_full_context: bool = False
    predicates: list[PredPrediction] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DFAState):
            return NotImplemented
        return self.configs == other.configs

    def __hash__(self) -> int:
        return hash(self.configs)