"""Options that control how a serialized ATN is read."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ATNDeserializationOptions:
    """Settings for ATN deserialization."""

    read_only: bool = True
    verify_atn: bool = True
    generate_rule_bypass_transitions: bool = False

    def is_verify(self) -> bool:
        return self.verify_atn