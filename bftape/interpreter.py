#!/usr/bin/env python3
"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the value of the cell at the pointer
    ,   Read the next input value into the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments. They are kept in the program
so bracket positions stay valid, and executing one just advances.

A run has two phases: brackets are resolved into a JumpTable up front, then
the program is stepped one instruction at a time. Every instruction yields an
explicit outcome (ADVANCE or Jump) which State.apply turns into the next
program counter.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union

import numpy as np

from .config import InterpreterConfig
from .errors import InputExhaustedError, InputRangeError
from .jump_table import JumpTable, build_jump_table


class Advance:
    """Outcome: continue with the next instruction."""

    def __repr__(self):
        return "ADVANCE"


ADVANCE = Advance()


@dataclass(frozen=True)
class Jump:
    """Outcome: continue at `target`, which is evaluated next."""
    target: int


Outcome = Union[Advance, Jump]


def _input_values(input_data) -> Iterator[int]:
    if isinstance(input_data, str):
        return (ord(c) for c in input_data)
    return (ord(v) if isinstance(v, str) else v for v in input_data)


@dataclass
class State:
    """All mutable state of one run. Owned by the run, never shared."""
    program: str
    jump_table: JumpTable
    tape: np.ndarray
    config: InterpreterConfig
    input: Iterator[int]
    cursor: int = 0
    pc: int = 0
    output: List[int] = field(default_factory=list)

    @classmethod
    def create(cls, program: str, input_data: Union[str, bytes, Iterable[int]] = "",
               config: Optional[InterpreterConfig] = None) -> 'State':
        """Resolve brackets and build a fresh state. Raises BracketError."""
        config = config or InterpreterConfig()
        return cls(
            program=program,
            jump_table=build_jump_table(program),
            tape=np.zeros(config.memory_size, dtype=np.uint8),
            config=config,
            input=_input_values(input_data),
        )

    @property
    def finished(self) -> bool:
        return self.pc >= len(self.program)

    @property
    def cell(self) -> int:
        return int(self.tape[self.cursor])

    @cell.setter
    def cell(self, value: int):
        self.tape[self.cursor] = value % 256

    @property
    def output_bytes(self) -> bytes:
        return bytes(self.output)

    @property
    def output_text(self) -> str:
        return ''.join(chr(v) for v in self.output)

    def apply(self, outcome: Outcome):
        """Move the program counter according to an instruction's outcome."""
        if isinstance(outcome, Jump):
            self.pc = outcome.target
        else:
            self.pc += 1


def branch(cmd: str, cell: int, pc: int, jump_table: JumpTable) -> Outcome:
    """Jump/no-jump decision for the instruction `cmd` at `pc`."""
    if cmd == '[' and cell == 0:
        return Jump(jump_table[pc])
    if cmd == ']' and cell != 0:
        return Jump(jump_table[pc])
    return ADVANCE


def _read_input(state: State) -> int:
    try:
        value = next(state.input)
    except StopIteration:
        raise InputExhaustedError(state.pc) from None
    if not 0 <= value <= 255 and state.config.input_policy == "reject":
        raise InputRangeError(value, state.pc)
    return value % 256


def step(state: State) -> Outcome:
    """Execute the instruction at state.pc and return its outcome.

    The program counter is left untouched; callers pass the outcome to
    State.apply.
    """
    cmd = state.program[state.pc]

    if cmd == '>':
        if state.cursor + 1 < len(state.tape):
            state.cursor += 1
        elif state.config.pointer_policy == "wrap":
            state.cursor = 0

    elif cmd == '<':
        if state.cursor > 0:
            state.cursor -= 1

    elif cmd == '+':
        state.cell = state.cell + 1

    elif cmd == '-':
        state.cell = state.cell - 1

    elif cmd == '.':
        state.output.append(state.cell)

    elif cmd == ',':
        state.cell = _read_input(state)

    elif cmd in '[]':
        return branch(cmd, state.cell, state.pc, state.jump_table)

    return ADVANCE


def run(program: str, input_data: Union[str, bytes, Iterable[int]] = "",
        config: Optional[InterpreterConfig] = None) -> State:
    """Run `program` to completion and return the final state.

    Raises UnmatchedOpenError / UnmatchedCloseError before anything executes,
    and InputExhaustedError when ',' finds no pending input. Programs that
    never terminate loop forever; bound them with bftape.runner.
    """
    state = State.create(program, input_data, config)
    while not state.finished:
        state.apply(step(state))
    return state


class BrainfuckInterpreter:
    """Object interface over run(): configured once, each run starts fresh."""

    def __init__(self, config: Optional[InterpreterConfig] = None):
        self.config = config or InterpreterConfig()
        self.last_state: Optional[State] = None

    def run(self, code: str, input_data: Union[str, bytes, Iterable[int]] = "") -> str:
        """Execute code with optional input data and return the output text."""
        self.last_state = run(code, input_data, self.config)
        return self.last_state.output_text

    @property
    def memory(self) -> Optional[np.ndarray]:
        return None if self.last_state is None else self.last_state.tape
