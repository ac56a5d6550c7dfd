"""Host-side wrapper that bounds a run with a step budget or a cancel event."""

import threading
from typing import Iterable, Optional, Union

from .config import InterpreterConfig
from .errors import BrainfuckError, ExecutionCancelled, StepLimitExceeded
from .interpreter import State, step

TRACE_STEPS = 50


def run_with_limit(program: str, input_data: Union[str, bytes, Iterable[int]] = "",
                   config: Optional[InterpreterConfig] = None, step_limit: Optional[int] = None,
                   cancel: Optional[threading.Event] = None, trace: bool = False) -> State:
    """Execute a program like interpreter.run, but stop after step_limit steps.

    step_limit defaults to config.step_limit; 0 runs without a budget.
    Raises StepLimitExceeded when the budget runs out and ExecutionCancelled
    once `cancel` is set.
    """
    state = State.create(program, input_data, config)
    max_steps = step_limit if step_limit is not None else state.config.step_limit
    if max_steps < 0:
        raise ValueError(f"step_limit must not be negative, got {max_steps}")

    step_count = 0
    while not state.finished:
        if max_steps and step_count >= max_steps:
            raise StepLimitExceeded(step_count, state.pc)
        if cancel is not None and cancel.is_set():
            raise ExecutionCancelled(step_count, state.pc)

        if trace and step_count < TRACE_STEPS:  # Only show first 50 steps
            cmd = state.program[state.pc]
            print(f"Step {step_count:2d}: IP={state.pc:2d} CMD='{cmd}' PTR={state.cursor} "
                  f"CELL={state.cell} MEM={state.tape[:5].tolist()}")

        state.apply(step(state))
        step_count += 1

    return state


def first_output(code: str, x: int, step_limit: Optional[int] = None,
                 config: Optional[InterpreterConfig] = None) -> Optional[int]:
    """Execute code with a single byte input, return the first output byte.

    Returns None when the program writes nothing or fails.
    """
    try:
        state = run_with_limit(code, [x], config=config, step_limit=step_limit)
    except BrainfuckError:
        return None
    return state.output[0] if state.output else None
