"""Interpreter for the eight-instruction tape language."""

from .config import InterpreterConfig, load_config
from .errors import (
    BracketError,
    BrainfuckError,
    ExecutionCancelled,
    InputExhaustedError,
    InputRangeError,
    StepLimitExceeded,
    UnmatchedCloseError,
    UnmatchedOpenError,
)
from .interpreter import ADVANCE, Advance, BrainfuckInterpreter, Jump, State, branch, run, step
from .jump_table import JumpTable, build_jump_table
from .runner import first_output, run_with_limit

__version__ = "0.1.0"
