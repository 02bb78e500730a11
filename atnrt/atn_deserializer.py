"""Reads the serialized form of an ATN embedded in generated recognizers."""

from __future__ import annotations

import uuid
from typing import Callable, Iterator, Optional

from atnrt.atn import ATN
from atnrt.atn_deserialization_options import ATNDeserializationOptions
from atnrt.atn_state import INVALID_STATE_NUMBER, ATNState, ATNStateKind
from atnrt.atn_type import ATNType
from atnrt.transitions import (
    EOF,
    ActionTransition,
    AtomTransition,
    CodeSet,
    EpsilonTransition,
    LexerAction,
    LexerActionType,
    NotSetTransition,
    PrecedencePredicateTransition,
    PredicateTransition,
    RangeTransition,
    RuleTransition,
    SetTransition,
    Transition,
    TransitionType,
    WildcardTransition,
)

SERIALIZED_VERSION = 3

BASE_SERIALIZED_UUID = uuid.UUID("33761B2D-78BB-4A43-8B0B-4F5BEE8AACF3")
ADDED_PRECEDENCE_TRANSITIONS = uuid.UUID("1DA0C57D-6C06-438A-9B27-10BCB3CE0F61")
ADDED_LEXER_ACTIONS = uuid.UUID("AADB8D7E-AEEF-4415-AD2B-8204D6CF042E")
ADDED_UNICODE_SMP = uuid.UUID("59627784-3BE5-417A-B9EB-8131A7286089")
SUPPORTED_UUIDS = (
    BASE_SERIALIZED_UUID,
    ADDED_PRECEDENCE_TRANSITIONS,
    ADDED_LEXER_ACTIONS,
    ADDED_UNICODE_SMP,
)

_BLOCK_STARTS = {
    ATNStateKind.BLOCK_START,
    ATNStateKind.PLUS_BLOCK_START,
    ATNStateKind.STAR_BLOCK_START,
}


class ATNDeserializationError(ValueError):
    """The serialized ATN is malformed or of an unsupported version."""


class _Reader:
    def __init__(self, data: str) -> None:
        self._values: Iterator[int] = map(self._decode, data)

    @staticmethod
    def _decode(ch: str) -> int:
        code = ord(ch)
        if code > 0xFFFF:
            code -= 0x3000
        return code - 2

    def next(self) -> int:
        try:
            return next(self._values)
        except StopIteration:
            raise ATNDeserializationError("unexpected end of serialized ATN") from None

    def next_or_minus_one(self) -> int:
        value = self.next()
        return -1 if value == 0xFFFF else value


class ATNDeserializer:
    """Builds an :class:`ATN` from its serialized string form."""

    def __init__(self, options: Optional[ATNDeserializationOptions] = None) -> None:
        self.options = options if options is not None else ATNDeserializationOptions()

    def deserialize(self, data: str) -> ATN:
        reader = _Reader(data)
        self._check_version(reader.next() + 2)
        self._check_uuid(reader)
        atn = self._read_atn(reader)
        self._read_states(atn, reader)
        self._read_rules(atn, reader)
        self._read_modes(atn, reader)
        sets = self._read_sets(reader, lambda r: r.next() & 0xFFFF)
        sets.extend(
            self._read_sets(reader, lambda r: (r.next() & 0xFFFF) | (r.next() << 16))
        )
        self._read_edges(atn, reader, sets)
        self._read_decisions(atn, reader)
        if atn.grammar_type is ATNType.LEXER:
            self._read_lexer_actions(atn, reader)
        self._mark_precedence_decisions(atn)
        return atn

    @staticmethod
    def _check_version(version: int) -> None:
        if version != SERIALIZED_VERSION:
            raise ATNDeserializationError(
                f"Could not deserialize ATN with version {version} "
                f"(expected {SERIALIZED_VERSION})"
            )

    @staticmethod
    def _check_uuid(reader: _Reader) -> uuid.UUID:
        raw = bytearray()
        for _ in range(8):
            raw += (reader.next() & 0xFFFF).to_bytes(2, "little")
        raw.reverse()
        found = uuid.UUID(bytes=bytes(raw))
        if found not in SUPPORTED_UUIDS:
            raise ATNDeserializationError(f"Could not deserialize ATN with UUID {found}")
        return found

    @staticmethod
    def _read_atn(reader: _Reader) -> ATN:
        kind = reader.next()
        if kind not in (ATNType.LEXER, ATNType.PARSER):
            raise ATNDeserializationError("invalid ATN type")
        return ATN(ATNType(kind), reader.next())

    def _read_states(self, atn: ATN, reader: _Reader) -> None:
        for number in range(reader.next()):
            state_type = reader.next()
            if state_type == INVALID_STATE_NUMBER:
                raise ATNDeserializationError("invalid state serialized")
            rule_index = reader.next_or_minus_one()
            state = self._state_factory(state_type, rule_index, number)
            if state.kind in _BLOCK_STARTS:
                state.end_state = reader.next()
            elif state.kind is ATNStateKind.LOOP_END:
                state.loop_back_state = reader.next()
            atn.add_state(state)

        for _ in range(reader.next()):
            state = self._state_at(atn, reader.next())
            if state.is_decision():
                state.nongreedy = True

        for _ in range(reader.next()):
            state = self._state_at(atn, reader.next())
            if state.kind is ATNStateKind.RULE_START:
                state.is_left_recursive = True

    @staticmethod
    def _state_at(atn: ATN, number: int) -> ATNState:
        if not 0 <= number < len(atn.states):
            raise ATNDeserializationError(f"invalid state number {number}")
        return atn.states[number]

    def _read_rules(self, atn: ATN, reader: _Reader) -> None:
        nrules = reader.next()
        for _ in range(nrules):
            atn.rule_to_start_state.append(reader.next())
            if atn.grammar_type is ATNType.LEXER:
                atn.rule_to_token_type.append(reader.next())

        atn.rule_to_stop_state = [0] * nrules
        for state in atn.states:
            if state.kind is not ATNStateKind.RULE_STOP:
                continue
            atn.rule_to_stop_state[state.rule_index] = state.state_number
            start = self._state_at(atn, atn.rule_to_start_state[state.rule_index])
            if start.kind is ATNStateKind.RULE_START:
                start.stop_state = state.state_number

    @staticmethod
    def _read_modes(atn: ATN, reader: _Reader) -> None:
        for _ in range(reader.next()):
            atn.mode_to_start_state.append(reader.next())

    @staticmethod
    def _read_sets(reader: _Reader, read_symbol: Callable[[_Reader], int]) -> list[CodeSet]:
        sets = []
        for _ in range(reader.next()):
            intervals = reader.next()
            symbols = CodeSet()
            if reader.next() != 0:
                symbols.add_one(-1)
            for _ in range(intervals):
                start = read_symbol(reader)
                stop = read_symbol(reader)
                symbols.add_range(start, stop)
            sets.append(symbols)
        return sets

    def _read_edges(self, atn: ATN, reader: _Reader, sets: list[CodeSet]) -> None:
        for _ in range(reader.next()):
            src, trg, ttype, arg1, arg2, arg3 = (reader.next() for _ in range(6))
            transition = self._edge_factory(ttype, trg, arg1, arg2, arg3, sets)
            self._state_at(atn, src).add_transition(transition)

        returns = []
        for state in atn.states:
            for tr in state.transitions:
                if not isinstance(tr, RuleTransition):
                    continue
                target = self._state_at(atn, tr.target)
                rule_start = self._state_at(atn, atn.rule_to_start_state[target.rule_index])
                outermost = -1
                if rule_start.is_left_recursive and tr.precedence == 0:
                    outermost = target.rule_index
                returns.append(
                    (
                        atn.rule_to_stop_state[target.rule_index],
                        EpsilonTransition(tr.follow_state, outermost),
                    )
                )
        for number, tr in returns:
            atn.states[number].add_transition(tr)

    @staticmethod
    def _edge_factory(
        type_index: int, target: int, arg1: int, arg2: int, arg3: int, sets: list[CodeSet]
    ) -> Transition:
        def symbol_set() -> CodeSet:
            if not 0 <= arg1 < len(sets):
                raise ATNDeserializationError(f"invalid set index {arg1}")
            return CodeSet(sets[arg1].intervals)

        if type_index == TransitionType.EPSILON:
            return EpsilonTransition(target, 0)
        if type_index == TransitionType.RANGE:
            return RangeTransition(target, EOF if arg3 != 0 else arg1, arg2)
        if type_index == TransitionType.RULE:
            return RuleTransition(arg1, target, arg2, arg3)
        if type_index == TransitionType.PREDICATE:
            return PredicateTransition(target, arg1, arg2, arg3 != 0)
        if type_index == TransitionType.ATOM:
            return AtomTransition(target, EOF if arg3 != 0 else arg1)
        if type_index == TransitionType.ACTION:
            return ActionTransition(target, arg1, arg2, arg3 != 0)
        if type_index == TransitionType.SET:
            return SetTransition(target, symbol_set())
        if type_index == TransitionType.NOT_SET:
            return NotSetTransition(target, symbol_set())
        if type_index == TransitionType.WILDCARD:
            return WildcardTransition(target)
        if type_index == TransitionType.PRECEDENCE:
            return PrecedencePredicateTransition(target, arg1)
        raise ATNDeserializationError("invalid transition type")

    def _read_decisions(self, atn: ATN, reader: _Reader) -> None:
        for decision in range(reader.next()):
            number = reader.next()
            state = self._state_at(atn, number)
            atn.decision_to_state.append(number)
            if state.is_decision():
                state.decision = decision

    @staticmethod
    def _read_lexer_actions(atn: ATN, reader: _Reader) -> None:
        for _ in range(reader.next()):
            action_type = reader.next()
            data1 = reader.next_or_minus_one()
            data2 = reader.next_or_minus_one()
            try:
                kind = LexerActionType(action_type)
            except ValueError:
                raise ATNDeserializationError(
                    f"invalid action type {action_type}"
                ) from None
            atn.lexer_actions.append(LexerAction(kind, data1, data2))

    @staticmethod
    def _mark_precedence_decisions(atn: ATN) -> None:
        for state in atn.states:
            if state.kind is not ATNStateKind.STAR_LOOP_ENTRY or not state.transitions:
                continue
            rule_start = atn.states[atn.rule_to_start_state[state.rule_index]]
            if not rule_start.is_left_recursive:
                continue
            loop_end = atn.states[state.transitions[-1].target]
            if (
                loop_end.kind is ATNStateKind.LOOP_END
                and loop_end.epsilon_only_transitions
                and atn.states[loop_end.transitions[0].target].kind
                is ATNStateKind.RULE_STOP
            ):
                state.is_precedence = True

    @staticmethod
    def _state_factory(type_index: int, rule_index: int, number: int) -> ATNState:
        try:
            kind = ATNStateKind(type_index)
        except ValueError:
            raise ATNDeserializationError("invalid ATN state type") from None
        return ATNState(state_number=number, rule_index=rule_index, kind=kind)