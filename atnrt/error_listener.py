"""Listeners notified of syntax errors and prediction diagnostics."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Optional, Protocol, Sequence

from atnrt.atn import ATN
from atnrt.dfa import DFA


class _TextSource(Protocol):
    def get_text_from_interval(self, start: int, stop: int) -> str: ...


class ParserLike(Protocol):
    """What the diagnostic listener needs from a parser."""

    atn: ATN
    rule_names: Sequence[str]
    input_stream: _TextSource

    def notify_error_listeners(
        self, msg: str, offending_token: Optional[int], error: Optional[BaseException]
    ) -> None: ...


def _format_alts(alts: Iterable[int]) -> str:
    return "{" + ", ".join(str(alt) for alt in sorted(alts)) + "}"


class ErrorListener:
    """Receives reports of errors and ambiguities; every hook does nothing by default."""

    def syntax_error(
        self,
        recognizer: Any,
        offending_symbol: Any,
        line: int,
        column: int,
        msg: str,
        error: Optional[BaseException],
    ) -> None:
        """Called when the parser or lexer meets input it cannot match."""

    def report_ambiguity(
        self,
        recognizer: Any,
        dfa: DFA,
        start_index: int,
        stop_index: int,
        exact: bool,
        ambig_alts: Optional[set[int]],
        configs: Any,
    ) -> None:
        """Called when a full-context prediction finds an ambiguity."""

    def report_attempting_full_context(
        self,
        recognizer: Any,
        dfa: DFA,
        start_index: int,
        stop_index: int,
        conflicting_alts: Optional[set[int]],
        configs: Any,
    ) -> None:
        """Called when an SLL conflict makes the parser retry with full context."""

    def report_context_sensitivity(
        self,
        recognizer: Any,
        dfa: DFA,
        start_index: int,
        stop_index: int,
        prediction: int,
        configs: Any,
    ) -> None:
        """Called when a full-context prediction has a unique result."""


class ConsoleErrorListener(ErrorListener):
    """Writes syntax errors to standard error."""

    def syntax_error(self, recognizer, offending_symbol, line, column, msg, error):
        print(f"line {line}:{column} {msg}", file=sys.stderr)


class ProxyErrorListener(ErrorListener):
    """Forwards every report to each of its delegates in order."""

    def __init__(self, delegates: Iterable[ErrorListener]) -> None:
        self.delegates = list(delegates)

    def syntax_error(self, recognizer, offending_symbol, line, column, msg, error):
        for listener in self.delegates:
            listener.syntax_error(recognizer, offending_symbol, line, column, msg, error)

    def report_ambiguity(
        self, recognizer, dfa, start_index, stop_index, exact, ambig_alts, configs
    ):
        for listener in self.delegates:
            listener.report_ambiguity(
                recognizer, dfa, start_index, stop_index, exact, ambig_alts, configs
            )

    def report_attempting_full_context(
        self, recognizer, dfa, start_index, stop_index, conflicting_alts, configs
    ):
        for listener in self.delegates:
            listener.report_attempting_full_context(
                recognizer, dfa, start_index, stop_index, conflicting_alts, configs
            )

    def report_context_sensitivity(
        self, recognizer, dfa, start_index, stop_index, prediction, configs
    ):
        for listener in self.delegates:
            listener.report_context_sensitivity(
                recognizer, dfa, start_index, stop_index, prediction, configs
            )


class DiagnosticErrorListener(ErrorListener):
    """Reports ambiguities and context sensitivity through the parser's listeners.

    With ``exact_only`` set, only exactly known ambiguities are reported.
    """

    def __init__(self, exact_only: bool = True) -> None:
        self.exact_only = exact_only

    @staticmethod
    def _decision_description(recognizer: ParserLike, dfa: DFA) -> str:
        rule_index = recognizer.atn.states[dfa.atn_start_state].rule_index
        rule_names = recognizer.rule_names
        if 0 <= rule_index < len(rule_names):
            return f"{dfa.decision} ({rule_names[rule_index]})"
        return str(dfa.decision)

    def get_conflicting_alts(self, alts: Optional[set[int]], configs: Any) -> set[int]:
        """The given alternatives, or the alternatives of every configuration."""
        if alts is not None:
            return alts
        items = getattr(configs, "configs", configs)
        return {config.alt for config in items}

    def report_ambiguity(
        self, recognizer, dfa, start_index, stop_index, exact, ambig_alts, configs
    ):
        if self.exact_only and not exact:
            return
        alts = self.get_conflicting_alts(ambig_alts, configs)
        text = recognizer.input_stream.get_text_from_interval(start_index, stop_index)
        msg = (
            f"reportAmbiguity d={self._decision_description(recognizer, dfa)}: "
            f"ambigAlts={_format_alts(alts)}, input='{text}'"
        )
        recognizer.notify_error_listeners(msg, None, None)

    def report_attempting_full_context(
        self, recognizer, dfa, start_index, stop_index, conflicting_alts, configs
    ):
        text = recognizer.input_stream.get_text_from_interval(start_index, stop_index)
        msg = (
            f"reportAttemptingFullContext d={self._decision_description(recognizer, dfa)}, "
            f"input='{text}'"
        )
        recognizer.notify_error_listeners(msg, None, None)

    def report_context_sensitivity(
        self, recognizer, dfa, start_index, stop_index, prediction, configs
    ):
        text = recognizer.input_stream.get_text_from_interval(start_index, stop_index)
        msg = (
            f"reportContextSensitivity d={self._decision_description(recognizer, dfa)}, "
            f"input='{text}'"
        )
        recognizer.notify_error_listeners(msg, None, None)