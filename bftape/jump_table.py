"""Bracket resolution: pairs every '[' with its ']' before a program runs."""

from collections.abc import Mapping
from typing import Iterator, List, Tuple

import numpy as np

from .errors import UnmatchedCloseError, UnmatchedOpenError

NO_TARGET = -1


class JumpTable(Mapping):
    """Read-only open <-> close position mapping.

    Stored as one integer array indexed by program position; positions that
    do not hold a bracket contain NO_TARGET and are not keys of the mapping.
    """

    def __init__(self, targets: np.ndarray):
        self._targets = targets
        self._targets.flags.writeable = False
        self._positions = np.flatnonzero(targets != NO_TARGET)

    def __getitem__(self, position: int) -> int:
        if not 0 <= position < len(self._targets) or self._targets[position] == NO_TARGET:
            raise KeyError(position)
        return int(self._targets[position])

    def __iter__(self) -> Iterator[int]:
        return (int(p) for p in self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __eq__(self, other):
        if isinstance(other, JumpTable):
            return np.array_equal(self._targets, other._targets)
        return super().__eq__(other)

    __hash__ = None

    def pairs(self) -> List[Tuple[int, int]]:
        """Return (open, close) tuples ordered by the open position."""
        return [(p, self[p]) for p in self if self[p] > p]

    def __repr__(self):
        return f"JumpTable({dict(self.items())!r})"


def build_jump_table(code: str) -> JumpTable:
    """Build a table mapping bracket positions for efficient jumping."""
    targets = np.full(len(code), NO_TARGET, dtype=np.int64)
    stack = []

    for i, cmd in enumerate(code):
        if cmd == '[':
            stack.append(i)
        elif cmd == ']':
            if not stack:
                raise UnmatchedCloseError(i)
            start = stack.pop()
            targets[start] = i
            targets[i] = start

    if stack:
        raise UnmatchedOpenError(stack[-1])

    return JumpTable(targets)
