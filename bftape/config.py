"""Interpreter configuration and its environment loader."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_MEMORY_SIZE = 30000
DEFAULT_STEP_LIMIT = 5000

POINTER_POLICIES = ("wrap", "clamp")
INPUT_POLICIES = ("truncate", "reject")


@dataclass(frozen=True)
class InterpreterConfig:
    """Configuration parameters for a run."""
    memory_size: int = DEFAULT_MEMORY_SIZE
    pointer_policy: str = "wrap"  # what '>' does on the last cell
    input_policy: str = "truncate"  # what ',' does with values above 255
    step_limit: int = DEFAULT_STEP_LIMIT  # host runner budget, 0 means unbounded

    def __post_init__(self):
        if self.memory_size < 1:
            raise ValueError(f"memory_size must be at least 1, got {self.memory_size}")
        if self.pointer_policy not in POINTER_POLICIES:
            raise ValueError(f"pointer_policy must be one of {POINTER_POLICIES}, got {self.pointer_policy!r}")
        if self.input_policy not in INPUT_POLICIES:
            raise ValueError(f"input_policy must be one of {INPUT_POLICIES}, got {self.input_policy!r}")
        if self.step_limit < 0:
            raise ValueError(f"step_limit must not be negative, got {self.step_limit}")


def load_config(env_file: Optional[str] = None, **overrides) -> InterpreterConfig:
    """Build a config from a .env file, the environment and explicit overrides.

    Precedence is overrides, then the environment, then the .env file (looked
    up from the current directory when env_file is None), then defaults.
    Overrides whose value is None are ignored.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    values = {
        "memory_size": os.environ.get("BF_MEMORY_SIZE", DEFAULT_MEMORY_SIZE),
        "pointer_policy": os.environ.get("BF_POINTER_POLICY", "wrap"),
        "input_policy": os.environ.get("BF_INPUT_POLICY", "truncate"),
        "step_limit": os.environ.get("BF_STEP_LIMIT", DEFAULT_STEP_LIMIT),
    }
    values.update((k, v) for k, v in overrides.items() if v is not None)
    return InterpreterConfig(
        memory_size=int(values["memory_size"]),
        pointer_policy=values["pointer_policy"],
        input_policy=values["input_policy"],
        step_limit=int(values["step_limit"]),
    )
