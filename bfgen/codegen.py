"""Translation of brainfuck programs into C source code."""

from __future__ import annotations

from .interpreter import COMMANDS, MAX_BOXES, PUTCHAR_FLUSHES

_INDENT = "    "

_HEADER = (
    "// Generated from brainfuck source\n\n"
    "#include <unistd.h>\n"
    "int main()\n"
    "{\n"
    "    unsigned long size = "
)

_PRELUDE = (
    ";\n"
    "    unsigned char buffer[size];\n"
    "    while(size) buffer[size--] = 0;\n"
    "    buffer[0] = 0;\n"
    "    unsigned char* p = buffer;\n\n"
    "    // Actual code:\n\n"
)

_CLOSING = "\n\n    // Hope you didn't mess your code up !\n\n    return 0;\n}"

_OUTPUT = "write(STDOUT_FILENO, p, 1);" + (" fsync(STDOUT_FILENO);" if PUTCHAR_FLUSHES else "")

_STATEMENTS = {
    ">": "p++;",
    "<": "p--;",
    "+": "++(*p);",
    "-": "--(*p);",
    ".": _OUTPUT,
    ",": "read(STDIN_FILENO, p, 1);",
    "[": "while (*p) {",
    "]": "}",
}


def base_code(size: int = MAX_BOXES) -> str:
    """Return the C program opening, with a tape of ``size`` cells."""
    return f"{_HEADER}{size}{_PRELUDE}"


def translate(bf_code: str) -> str:
    """Return the C statements for ``bf_code``, keeping its line layout.

    A '/' comments out the rest of its line.
    """
    parts: list[str] = []
    commenting = False
    new_line = True
    indent = 1
    for char in bf_code:
        if char == "/":
            commenting = True
        if char == "\n":
            parts.append("\n")
            commenting = False
            new_line = True
        if commenting or char not in COMMANDS:
            continue
        if char == "]":
            indent -= 1
        if new_line:
            parts.append(_INDENT * max(indent, 0))
            new_line = False
        else:
            parts.append(" ")
        if char == "[":
            indent += 1
        parts.append(_STATEMENTS[char])
    return "".join(parts)


def closing_code() -> str:
    """Return the C program ending."""
    return _CLOSING


def generate(bf_code: str, size: int = MAX_BOXES) -> str:
    """Return a whole C program equivalent to ``bf_code``."""
    return base_code(size) + translate(bf_code) + closing_code()