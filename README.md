# atnrt

Building blocks for recognizers driven by an augmented transition network
(ATN): a deserializer for serialized ATNs, the ATN state and transition
model, DFA states with a textual dump, character-input helpers, error
listeners, and a small command that runs the grammar tool.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Deserializing an ATN

A serialized ATN, as emitted by the grammar tool into generated code, is a
string of code points. `ATNDeserializer.deserialize` (in
`atnrt.atn_deserializer`) turns it into an `ATN`:

```python
from atnrt.atn_deserializer import ATNDeserializer, ATNDeserializationError

try:
    atn = ATNDeserializer().deserialize(serialized_atn)
except ATNDeserializationError as exc:
    print("bad ATN:", exc)
else:
    print(atn.grammar_type, atn.max_token_type, len(atn.states))
```

`ATNDeserializationError` (a `ValueError`) is raised for a version other
than 3, an unsupported UUID, an invalid ATN, state, transition or lexer
action type, a reference to a state or set that does not exist, and data
that ends too early.

The resulting `ATN` (`atnrt.atn`) holds:

- `states`: a list of `ATNState` (`atnrt.atn_state`), each with a `kind`
  from `ATNStateKind`, its `rule_index` and its `transitions`;
  `is_decision()` tells decision states apart, `block_start` gives the
  `BlockStartKind` of a block start;
- `rule_to_start_state`, `rule_to_stop_state` and, for lexers,
  `rule_to_token_type`;
- `mode_to_start_state` for lexer modes;
- `decision_to_state`, also reachable through `get_decision_state(decision)`;
- `lexer_actions`, a list of `LexerAction` for lexer grammars.

Transitions and symbol sets live in `atnrt.transitions`: `CodeSet` keeps
integer symbols as sorted inclusive ranges (`add_one`, `add_range`,
`contains`, `in`), and each `Transition` subclass reports `is_epsilon()` and
its `label()`. `ATNState.add_transition` skips a transition that duplicates
an existing one to the same target.

`ATNDeserializationOptions` (`atnrt.atn_deserialization_options`) can be
passed to `ATNDeserializer`; its fields are stored, but the deserializer
does not verify the ATN and does not generate rule bypass transitions.

## DFAs

`atnrt.dfa.DFA` holds the states built for one decision. When the decision
state is a precedence star-loop entry, the DFA is a precedence DFA whose
start state is looked up per precedence level with
`get_precedence_start_state` and `set_precedence_start_state`.

```python
from atnrt.dfa import DFA

dfa = DFA(atn, atn.get_decision_state(0), 0)
print(dfa.to_lexer_string())
```

`DFA.to_lexer_string()` and `DFA.to_string(vocabulary)` (the vocabulary
needs a `get_display_name(token_type)` method) print every edge on its own
line as `s0-'a'->:s1=>1`: accept states carry a leading `:` and their
prediction after `=>`, states that need full context a trailing `^`. Both
return an empty string when the DFA has no start state. The rendering is
done by `atnrt.dfa_serializer.DFASerializer`; states are
`atnrt.dfa_state.DFAState`.

## Character input

`atnrt.char_stream` defines the `CharStream` base class and helpers for
walking input data: `sequence_offset` and `sequence_item` for sequences of
code points, `utf8_offset` and `utf8_item` for UTF-8 bytes, and
`to_display`, which turns code points into text and replaces invalid ones
with U+FFFD.

## Error listeners

In `atnrt.error_listener`:

- `ErrorListener` has `syntax_error`, `report_ambiguity`,
  `report_attempting_full_context` and `report_context_sensitivity`, all
  doing nothing; subclass it and override what you need.
- `ConsoleErrorListener` writes `line L:C message` to standard error.
- `ProxyErrorListener` forwards every report to a list of listeners.
- `DiagnosticErrorListener(exact_only=True)` turns ambiguity and
  context-sensitivity reports into messages sent through the recognizer's
  `notify_error_listeners`. The recognizer must provide `atn`,
  `rule_names`, `input_stream.get_text_from_interval` and
  `notify_error_listeners`.

## Generating recognizers

`atnrt-codegen` runs the grammar tool with `java` over grammars in the
`grammars` directory of the current working directory, writing output to
`../tests/gen` relative to that directory.

```
atnrt-codegen
atnrt-codegen SimpleLR XMLLexer --antlr-path /path/to/antlr-complete.jar
```

With no grammar names it processes `CSV` (with `-visitor`),
`ReferenceToATN`, `XMLLexer`, `SimpleLR` and `Labels`. The jar defaults to
the `ANTLR_JAR` environment variable, or `antlr4-complete.jar`; the target
language comes from `ANTLR_TARGET_LANGUAGE`, default `Python3`. A grammar
the tool fails on is passed over; if `java` cannot be started at all, the
command stops with a `RuntimeError`.

## What this package does not do

It has no lexer or parser engine: there is no ATN simulation or prediction,
no token streams, no parse trees and no error-recovery strategy. The ATN
configuration sets that DFA states and listeners refer to are not provided
either; those objects are accepted as they are given.