from dataclasses import dataclass, field

import pytest

from atnrt.atn import ATN
from atnrt.atn_state import ATNState, ATNStateKind
from atnrt.atn_type import ATNType
from atnrt.dfa import DFA
from atnrt.error_listener import (
    ConsoleErrorListener,
    DiagnosticErrorListener,
    ErrorListener,
    ProxyErrorListener,
)


class _Input:
    def __init__(self, words):
        self.words = words

    def get_text_from_interval(self, start, stop):
        return " ".join(self.words[start : stop + 1])


@dataclass
class _Parser:
    atn: ATN
    rule_names: list
    input_stream: _Input
    messages: list = field(default_factory=list)

    def notify_error_listeners(self, msg, offending_token, error):
        self.messages.append((msg, offending_token, error))


@dataclass
class _Config:
    alt: int


@dataclass
class _ConfigSet:
    configs: list


def _make(rule_index=1, rule_names=("s", "expr")):
    atn = ATN(ATNType.PARSER, 3)
    atn.add_state(ATNState(state_number=0, rule_index=rule_index, kind=ATNStateKind.BASIC))
    dfa = DFA(atn, 0, 0)
    parser = _Parser(atn, list(rule_names), _Input(["a", "b", "c"]))
    return parser, dfa


class _Recorder(ErrorListener):
    def __init__(self):
        self.calls = []

    def syntax_error(self, recognizer, offending_symbol, line, column, msg, error):
        self.calls.append(("syntax", line, column, msg))

    def report_ambiguity(self, recognizer, dfa, start_index, stop_index, exact, ambig_alts, configs):
        self.calls.append(("ambiguity", start_index, stop_index, exact))

    def report_attempting_full_context(
        self, recognizer, dfa, start_index, stop_index, conflicting_alts, configs
    ):
        self.calls.append(("full", start_index, stop_index))

    def report_context_sensitivity(
        self, recognizer, dfa, start_index, stop_index, prediction, configs
    ):
        self.calls.append(("sensitivity", prediction))


def test_console_listener_writes_line_and_column(capsys):
    ConsoleErrorListener().syntax_error(None, None, 3, 7, "oops", None)
    assert capsys.readouterr().err == "line 3:7 oops\n"


def test_proxy_forwards_to_all_delegates_in_order():
    first, second = _Recorder(), _Recorder()
    proxy = ProxyErrorListener([first, second])
    _, dfa = _make()
    proxy.syntax_error(None, None, 1, 2, "m", None)
    proxy.report_ambiguity(None, dfa, 0, 1, True, {1, 2}, None)
    proxy.report_attempting_full_context(None, dfa, 0, 2, None, None)
    proxy.report_context_sensitivity(None, dfa, 0, 2, 5, None)
    expected = [
        ("syntax", 1, 2, "m"),
        ("ambiguity", 0, 1, True),
        ("full", 0, 2),
        ("sensitivity", 5),
    ]
    assert first.calls == expected
    assert second.calls == expected


def test_ambiguity_message():
    parser, dfa = _make()
    DiagnosticErrorListener(False).report_ambiguity(parser, dfa, 0, 1, True, {2, 1}, None)
    assert parser.messages == [
        ("reportAmbiguity d=0 (expr): ambigAlts={1, 2}, input='a b'", None, None)
    ]


def test_inexact_ambiguity_skipped_when_exact_only():
    parser, dfa = _make()
    DiagnosticErrorListener(True).report_ambiguity(parser, dfa, 0, 1, False, {1, 2}, None)
    assert parser.messages == []


def test_ambiguity_uses_config_alts_when_none_given():
    parser, dfa = _make()
    configs = _ConfigSet([_Config(3), _Config(1), _Config(3)])
    DiagnosticErrorListener(True).report_ambiguity(parser, dfa, 1, 2, True, None, configs)
    assert parser.messages[0][0] == "reportAmbiguity d=0 (expr): ambigAlts={1, 3}, input='b c'"


def test_full_context_message():
    parser, dfa = _make()
    DiagnosticErrorListener().report_attempting_full_context(parser, dfa, 0, 2, None, None)
    assert parser.messages[0][0] == "reportAttemptingFullContext d=0 (expr), input='a b c'"


def test_context_sensitivity_without_rule_name():
    parser, dfa = _make(rule_index=5)
    DiagnosticErrorListener().report_context_sensitivity(parser, dfa, 2, 2, 1, None)
    assert parser.messages[0][0] == "reportContextSensitivity d=0, input='c'"


@pytest.mark.parametrize("alts", [{1}, {2, 4}, set()])
def test_get_conflicting_alts_returns_given(alts):
    assert DiagnosticErrorListener().get_conflicting_alts(alts, None) is alts


def test_get_conflicting_alts_from_configs():
    configs = _ConfigSet([_Config(2), _Config(4), _Config(2)])
    assert DiagnosticErrorListener().get_conflicting_alts(None, configs) == {2, 4}


def test_base_listener_ignores_reports():
    parser, dfa = _make()
    listener = ErrorListener()
    listener.report_ambiguity(parser, dfa, 0, 1, True, {1}, None)
    assert listener.syntax_error(parser, None, 1, 1, "x", None) is None
    assert parser.messages == []