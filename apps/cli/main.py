#!/usr/bin/env python3
"""Format YAML and convert it to and from JSON or Go struct definitions."""
from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import TextIO

from zyaml.config import Settings
from zyaml.errors import InputError, ZyamlError
from zyaml.jsonbridge import from_json_value, to_json_value
from zyaml.parser import parse
from zyaml.serializer import serialize
from zyaml.structgen import generate_go_struct

PROG = "zuxi"


def log(line: str, log_file: Path | None = None) -> None:
    """Log a message to stderr and, if configured, append it to the log file.

    Args:
        line: Log message
        log_file: Optional file that receives a copy of the message
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    message = f"[{timestamp}] {line}"
    print(message, file=sys.stderr)
    if log_file is None:
        return
    log_file.parent.mkdir(parents=True, exist_ok=True)
    with log_file.open("a", encoding="utf-8") as handle:
        handle.write(message + "\n")


def yamlfmt(text: str, settings: Settings) -> str:
    with parse(text) as document:
        return serialize(document.value)


def yaml2json(text: str, settings: Settings) -> str:
    with parse(text) as document:
        data = to_json_value(document.value)
    return json.dumps(data, indent=settings.json_indent, ensure_ascii=False) + "\n"


def json2yaml(text: str, settings: Settings) -> str:
    return serialize(from_json_value(json.loads(text)))


def yamlstruct(text: str, settings: Settings) -> str:
    with parse(text) as document:
        data = to_json_value(document.value)
    return generate_go_struct(data) + "\n"


def yamlcheck(text: str, settings: Settings) -> str:
    with parse(text) as document:
        to_json_value(document.value)
    return "valid\n"


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    run: Callable[[str, Settings], str]
    example: str


COMMANDS = {
    command.name: command
    for command in (
        Command("yamlfmt", "Format YAML with consistent indentation", yamlfmt, "key: value"),
        Command("yaml2json", "Convert YAML to JSON", yaml2json, "key: value"),
        Command("json2yaml", "Convert JSON to YAML", json2yaml, '{"key":"value"}'),
        Command("yamlstruct", "Generate Go struct from YAML", yamlstruct, "key: value"),
        Command("yamlcheck", "Check that YAML input can be parsed", yamlcheck, "key: value"),
    )
}


def read_input(arg: str | None, stdin: TextIO | None = None, max_size: int | None = None) -> str:
    """Return the positional argument, else piped stdin with trailing whitespace removed.

    Raises:
        InputError: kind "missing" if neither is available, "invalid" if too large
    """
    if arg is not None:
        text = arg
    else:
        stream = stdin if stdin is not None else sys.stdin
        if stream is None or stream.isatty():
            raise InputError("missing")
        text = stream.read().rstrip()
    if max_size is not None and len(text.encode("utf-8")) > max_size:
        raise InputError("invalid", f"input exceeds {max_size} bytes")
    return text


def run_command(name: str, text: str, settings: Settings) -> str:
    """Run the whole pipeline for ``name``; any failure becomes InputError("invalid")."""
    command = COMMANDS[name]
    try:
        return command.run(text, settings)
    except (ZyamlError, ValueError, RecursionError) as exc:
        raise InputError("invalid") from exc


def write_output(data: str, output: str | None) -> None:
    if output:
        Path(output).write_text(data, encoding="utf-8")
    else:
        sys.stdout.write(data)


def _print_usage(command: Command) -> None:
    print(f"Usage: {PROG} {command.name} '<input>'", file=sys.stderr)
    print(f"       echo '{command.example}' | {PROG} {command.name}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description=__doc__)
    subparsers = parser.add_subparsers(dest="command", required=True)
    for command in COMMANDS.values():
        sub = subparsers.add_parser(command.name, help=command.description, description=command.description)
        sub.add_argument("input", nargs="?", default=None, help="Input text (read from stdin when omitted)")
        sub.add_argument("-o", "--output", default=None, help="Write the result to this file instead of stdout")
        sub.add_argument("-v", "--verbose", action="store_true", help="Log what the command did")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    command = COMMANDS[args.command]
    settings = Settings.load()

    try:
        text = read_input(args.input, max_size=settings.max_input_size)
        result = run_command(command.name, text, settings)
    except InputError as exc:
        if exc.kind == "missing":
            print(f"{command.name}: no input provided", file=sys.stderr)
            _print_usage(command)
        else:
            cause = exc.__cause__ or exc
            log(f"{command.name}: {type(cause).__name__}: {cause}", settings.log_file)
            print(f"{command.name}: invalid input", file=sys.stderr)
        return 1

    write_output(result, args.output)
    if args.verbose:
        target = args.output or "stdout"
        log(f"{command.name}: wrote {len(result)} chars -> {target}", settings.log_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
