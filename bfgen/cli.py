"""Command line front end: compile brainfuck to C or run it directly."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Sequence

from .codegen import generate
from .interpreter import execute

WHITE = "\033[0m"
GREY = "\033[2m"
DARK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
CYAN = "\033[36m"

_HELP_FLAGS = ("-h", "--help")
_SOURCE_FLAGS = ("-s", "--source")
_CODE_FLAGS = ("-c", "--code")
_OUTPUT_FLAGS = ("-o", "--output")
_EXECUTE_FLAGS = ("-e", "--execute")


class UsageError(Exception):
    """Raised when the command line arguments are unusable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Options:
    """What the command line asked for."""

    source: str | None = None
    source_is_file: bool = False
    output: str | None = None
    execute: bool = False


def wants_help(argv: Sequence[str]) -> bool:
    """Tell whether help should be shown for the full argument list."""
    return len(argv) <= 1 or any(arg in _HELP_FLAGS for arg in argv)


def help_text(program: str) -> str:
    """Return the usage message for ``program``."""
    return (
        f"Usage: {PURPLE}{program}{WHITE} [options]\n"
        f"  {CYAN}-h | --help{WHITE}                       : Show this help message and exit\n"
        f"  {CYAN}-s | --source [source file]{WHITE}       : Provide brainfuck source file\n"
        f"  {CYAN}-c | --code [source code]{WHITE}         : Provide brainfuck source code\n"
        f"  {CYAN}-o | --output [output C filename]{WHITE} : Provide output C code  filename\n"
        f"  {CYAN}-e | --execute{WHITE}                    : Execute provided source code\n\n"
        f"You {BLUE}need{WHITE} one of each -o/-e and -s/-c :\n"
        f"  {GREEN}{program}"
        f' -o "./some_display.c" -c "++++++++[>+++++++++<-]>.<++++++++++."{WHITE}'
        f'{WHITE}\nThat command will compile the given code into a "{RED}./some_display.c{WHITE}" file\n'
        f"Feel free to check out the associated {YELLOW}README{WHITE} file"
        " for more explanations on how BrainFuck works\n"
    )


def error_text(program: str, message: str) -> str:
    """Return an error line for ``program`` followed by the usage message."""
    return f"{PURPLE}{program}{WHITE}: {RED}{message}{WHITE}\n\n" + help_text(program)


def parse_arguments(argv: Sequence[str]) -> Options:
    """Build options from the arguments that follow the program name.

    Raises UsageError when inputs or outputs are repeated, missing or unknown.
    """
    source: str | None = None
    source_is_file = False
    output: str | None = None
    run_code = False

    args = iter(argv)
    for arg in args:
        if arg in _SOURCE_FLAGS or arg in _CODE_FLAGS:
            if source is not None:
                raise UsageError("Multiple inputs provided")
            source = next(args, None)
            source_is_file = arg in _SOURCE_FLAGS
        elif arg in _OUTPUT_FLAGS:
            if output is not None or run_code:
                raise UsageError("Multiple outputs provided")
            output = next(args, None)
        elif arg in _EXECUTE_FLAGS:
            if output is not None or run_code:
                raise UsageError("Multiple outputs provided")
            run_code = True
        else:
            raise UsageError("Invalid parameter")

    if source is None or (source_is_file and source.startswith("-")):
        raise UsageError("Missing input parameter")
    if not run_code and (output is None or output.startswith("-")):
        raise UsageError("Missing output parameter")
    return Options(source, source_is_file, output, run_code)


def run(
    options: Options,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> None:
    """Execute the program, or write its C translation to the output file."""
    if options.source is None:
        raise UsageError("Missing input parameter")
    if options.source_is_file:
        code = Path(options.source).read_text(encoding="latin-1")
    else:
        code = options.source

    if options.execute:
        execute(code, stdin, stdout)
        return
    if options.output is None:
        raise UsageError("Missing output parameter")
    descriptor = os.open(options.output, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o664)
    with os.fdopen(descriptor, "w", encoding="utf-8", newline="") as handle:
        handle.write(generate(code))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command; returns the exit status."""
    if argv is None:
        argv = sys.argv
    program = argv[0] if argv else "bfgen"

    if wants_help(argv):
        sys.stdout.write(help_text(program))
        return 0
    try:
        options = parse_arguments(argv[1:])
        sys.stdout.flush()
        run(options)
    except UsageError as error:
        sys.stdout.write(error_text(program, error.message))
        return 1
    except OSError as error:
        sys.stdout.write(error_text(program, str(error)))
        return 1
    return 0