"""Runs the ANTLR tool over the bundled grammars."""

from __future__ import annotations

import argparse
import os
import subprocess
from pathlib import Path
from typing import Optional, Sequence

DEFAULT_GRAMMARS = ("CSV", "ReferenceToATN", "XMLLexer", "SimpleLR", "Labels", "FHIRPath")
DEFAULT_ADDITIONAL_ARGS = ("-visitor", None, None, None, None)
GRAMMAR_DIR = "grammars"
OUTPUT_DIR = "../tests/gen"
TOOL_CLASS = "org.antlr.v4.Tool"


def _target_language() -> str:
    return os.environ.get("ANTLR_TARGET_LANGUAGE", "Python3")


def _default_antlr_path() -> str:
    return os.environ.get("ANTLR_JAR", "antlr4-complete.jar")


def gen_for_grammar(
    grammar_file_name: str, antlr_path: str, additional_arg: Optional[str]
) -> int:
    """Generate code for one grammar in ./grammars; returns the tool's exit code.

    Raises RuntimeError when the tool cannot be started.
    """
    input_dir = Path.cwd() / GRAMMAR_DIR
    file_name = f"{grammar_file_name}.g4"
    command = [
        "java",
        "-cp",
        str(antlr_path),
        TOOL_CLASS,
        f"-Dlanguage={_target_language()}",
        "-o",
        OUTPUT_DIR,
        file_name,
    ]
    if additional_arg is not None:
        command.append(additional_arg)
    try:
        completed = subprocess.run(command, cwd=input_dir, check=False)
    except OSError as exc:
        raise RuntimeError("antlr tool failed to start") from exc
    return completed.returncode


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate recognizers from grammars.")
    parser.add_argument("grammars", nargs="*", help="grammar names without the .g4 suffix")
    parser.add_argument("--antlr-path", default=_default_antlr_path())
    args = parser.parse_args(argv)

    if args.grammars:
        pairs = [(grammar, None) for grammar in args.grammars]
    else:
        pairs = list(zip(DEFAULT_GRAMMARS, DEFAULT_ADDITIONAL_ARGS))

    for grammar, extra in pairs:
        # a failing tool run is not fatal; only a tool that cannot start is
        gen_for_grammar(grammar, args.antlr_path, extra)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())