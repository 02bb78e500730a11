"""ATN deserialization, ATN and DFA models, character helpers and error listeners."""

__version__ = "0.1.0"