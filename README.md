# bfgen

`bfgen` takes a Brainfuck program and either runs it directly or translates
it into a standalone C source file.

## Installation

```
pip install .
```

This installs the `bfgen` command. It needs nothing beyond the standard
library.

## Command line

```
bfgen [options]
```

| Option | Meaning |
| --- | --- |
| `-h`, `--help` | Show the help message and exit |
| `-s`, `--source FILE` | Read the Brainfuck program from a file |
| `-c`, `--code CODE` | Give the Brainfuck program on the command line |
| `-o`, `--output FILE` | Write the generated C code to this file |
| `-e`, `--execute` | Run the program instead of generating C |

You give exactly one input (`-s` or `-c`) and exactly one output (`-o` or
`-e`). If you run `bfgen` with no arguments, or if `-h`/`--help` appears
anywhere, it prints the help and exits with status 0. Repeated, missing or
unknown options print an error line followed by the help, and the command
exits with status 1. A source file name or an output file name that starts
with `-` counts as missing.

Translate a program into C:

```
bfgen -o ./some_display.c -c "++++++++[>+++++++++<-]>.<++++++++++."
```

Run a program from a file:

```
bfgen -e -s hello.bf
```

The output file is created or truncated, with mode `0664`. Source files are
read as Latin-1.

## Behaviour

- The tape has 1024 byte cells. Cell values wrap around within 0–255.
- Moving the pointer off either end of the tape raises `IndexError`.
- `,` reads one byte; at end of input the current cell is left unchanged.
- `.` writes one byte and flushes the output.
- A `]` with no matching `[` is ignored. A `[` that is never closed skips to
  the end of the program when the current cell is zero.
- In C generation, a `/` starts a comment that runs to the end of the line.
  The generated code keeps the line layout of the input and indents loop
  bodies by four spaces.

## Library use

```python
import io
from bfgen.interpreter import execute
from bfgen.codegen import generate

out = io.BytesIO()
tape = execute("++++++++[>+++++++++<-]>.", io.BytesIO(), out, 1024)
print(out.getvalue())          # b'H'
print(tape.cells[1], tape.pointer)   # 72 1

c_source = generate("+[-]", 1024)
```

- `bfgen.interpreter` provides `execute(code, stdin, stdout, size)`, which
  returns the final `Tape` (with `cells` and `pointer`). `stdin` and `stdout`
  default to the process's binary streams.
- `bfgen.codegen` provides `base_code(size)`, `translate(bf_code)`,
  `closing_code()` and `generate(bf_code, size)`.
- `bfgen.cli` provides `Options`, `UsageError`, `wants_help`, `help_text`,
  `error_text`, `parse_arguments`, `run` and `main`, so you can drive the
  command from your own code. `parse_arguments` takes the arguments after
  the program name and raises `UsageError` on bad input.

## What it does not do

`bfgen` writes C source but does not compile it; use a C compiler of your own
to build the generated file.