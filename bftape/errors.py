"""Exceptions raised by the bracket resolver, the engine and the host runner."""

from typing import Optional


class BrainfuckError(Exception):
    """Base class for every failure a run can report."""

    kind = "error"

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position


class BracketError(BrainfuckError):
    """Malformed bracket nesting, detected before execution starts."""


class UnmatchedCloseError(BracketError):
    kind = "unmatched_close"

    def __init__(self, position: int):
        super().__init__(f"Unmatched ']' at position {position}", position)


class UnmatchedOpenError(BracketError):
    kind = "unmatched_open"

    def __init__(self, position: int):
        super().__init__(f"Unmatched '[' at position {position}", position)


class InputExhaustedError(BrainfuckError):
    kind = "input_exhausted"

    def __init__(self, position: int):
        super().__init__(f"Input exhausted at position {position}", position)


class InputRangeError(BrainfuckError):
    """Raised under the 'reject' input policy for values outside 0-255."""

    kind = "input_out_of_range"

    def __init__(self, value: int, position: int):
        super().__init__(f"Input value {value} does not fit in a cell (position {position})", position)
        self.value = value


class StepLimitExceeded(BrainfuckError):
    kind = "step_limit"

    def __init__(self, steps: int, position: int):
        super().__init__(f"Execution stopped after {steps} steps (possible infinite loop)", position)
        self.steps = steps


class ExecutionCancelled(BrainfuckError):
    kind = "cancelled"

    def __init__(self, steps: int, position: int):
        super().__init__(f"Execution cancelled after {steps} steps", position)
        self.steps = steps
