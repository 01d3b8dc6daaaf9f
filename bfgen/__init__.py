"""Run Brainfuck programs or translate them into C source code."""

__version__ = "0.1.0"
__all__ = ["__version__"]