"""Symbol sets, ATN transitions and lexer actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Iterable, Iterator, Optional

EOF = -1


class TransitionType(IntEnum):
    """Serialized identifiers of transition kinds."""

    EPSILON = 1
    RANGE = 2
    RULE = 3
    PREDICATE = 4
    ATOM = 5
    ACTION = 6
    SET = 7
    NOT_SET = 8
    WILDCARD = 9
    PRECEDENCE = 10


class CodeSet:
    """Set of integer symbols stored as sorted, disjoint, inclusive ranges."""

    def __init__(self, intervals: Iterable[tuple[int, int]] = ()) -> None:
        self._intervals: list[tuple[int, int]] = []
        for start, stop in intervals:
            self.add_range(start, stop)

    @property
    def intervals(self) -> tuple[tuple[int, int], ...]:
        return tuple(self._intervals)

    def add_one(self, value: int) -> None:
        self.add_range(value, value)

    def add_range(self, start: int, stop: int) -> None:
        """Add every symbol from start to stop inclusive; an empty range is ignored."""
        if stop < start:
            return
        merged: list[tuple[int, int]] = []
        placed = False
        for low, high in self._intervals:
            if high < start - 1:
                merged.append((low, high))
            elif low > stop + 1:
                if not placed:
                    merged.append((start, stop))
                    placed = True
                merged.append((low, high))
            else:
                start = min(start, low)
                stop = max(stop, high)
        if not placed:
            merged.append((start, stop))
        self._intervals = merged

    def contains(self, value: int) -> bool:
        return any(low <= value <= high for low, high in self._intervals)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._intervals)

    def __bool__(self) -> bool:
        return bool(self._intervals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeSet):
            return NotImplemented
        return self._intervals == other._intervals

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = (str(a) if a == b else f"{a}..{b}" for a, b in self._intervals)
        return "{" + ", ".join(parts) + "}"


@dataclass
class Transition:
    """Edge of the ATN leading to the state numbered ``target``."""

    target: int
    serialization_type: ClassVar[TransitionType]
    epsilon: ClassVar[bool] = False

    def is_epsilon(self) -> bool:
        return self.epsilon

    def label(self) -> Optional[CodeSet]:
        """Symbols matched by this transition, or None when it has no label."""
        return None


@dataclass
class EpsilonTransition(Transition):
    outermost_precedence_return: int = -1
    serialization_type = TransitionType.EPSILON
    epsilon = True


@dataclass
class RangeTransition(Transition):
    start: int = 0
    stop: int = 0
    serialization_type = TransitionType.RANGE

    def label(self) -> CodeSet:
        return CodeSet([(self.start, self.stop)])


@dataclass
class RuleTransition(Transition):
    follow_state: int = 0
    rule_index: int = 0
    precedence: int = 0
    serialization_type = TransitionType.RULE
    epsilon = True


@dataclass
class PredicateTransition(Transition):
    rule_index: int = 0
    pred_index: int = 0
    is_ctx_dependent: bool = False
    serialization_type = TransitionType.PREDICATE
    epsilon = True


@dataclass
class AtomTransition(Transition):
    symbol: int = 0
    serialization_type = TransitionType.ATOM

    def label(self) -> CodeSet:
        return CodeSet([(self.symbol, self.symbol)])


@dataclass
class ActionTransition(Transition):
    rule_index: int = 0
    action_index: int = 0
    is_ctx_dependent: bool = False
    serialization_type = TransitionType.ACTION
    epsilon = True


@dataclass
class SetTransition(Transition):
    symbols: CodeSet = field(default_factory=CodeSet)
    serialization_type = TransitionType.SET

    def label(self) -> CodeSet:
        return self.symbols


@dataclass
class NotSetTransition(SetTransition):
    serialization_type = TransitionType.NOT_SET


@dataclass
class WildcardTransition(Transition):
    serialization_type = TransitionType.WILDCARD


@dataclass
class PrecedencePredicateTransition(Transition):
    precedence: int = 0
    serialization_type = TransitionType.PRECEDENCE
    epsilon = True


class LexerActionType(IntEnum):
    """Serialized identifiers of lexer action kinds."""

    CHANNEL = 0
    CUSTOM = 1
    MODE = 2
    MORE = 3
    POP_MODE = 4
    PUSH_MODE = 5
    SKIP = 6
    TYPE = 7


_NO_ARGUMENT = {LexerActionType.MORE, LexerActionType.POP_MODE, LexerActionType.SKIP}


@dataclass(frozen=True)
class LexerAction:
    """Action run by a lexer when a rule matches.

    ``value`` is the channel, mode or token type, or the rule index of a
    custom action; ``action_index`` is only kept for custom actions.
    """

    action_type: LexerActionType
    value: Optional[int] = None
    action_index: Optional[int] = None

    def __post_init__(self) -> None:
        kind = LexerActionType(self.action_type)
        object.__setattr__(self, "action_type", kind)
        if kind in _NO_ARGUMENT:
            object.__setattr__(self, "value", None)
        if kind is not LexerActionType.CUSTOM:
            object.__setattr__(self, "action_index", None)