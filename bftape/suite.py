from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import yaml

from .config import InterpreterConfig
from .errors import BrainfuckError
from .runner import run_with_limit


@dataclass
class CaseResult:
    name: str
    passed: bool
    detail: str = ""


@dataclass
class ProgramCase:
    """One program run with its expected output, tape prefix or error kind."""
    name: str
    program: str
    input: str = ""
    output: Optional[str] = None
    tape: Optional[List[int]] = None
    error: Optional[str] = None

    def check(self, config: Optional[InterpreterConfig] = None) -> CaseResult:
        try:
            state = run_with_limit(self.program, self.input, config=config)
        except BrainfuckError as e:
            if self.error == e.kind:
                return CaseResult(self.name, True)
            return CaseResult(self.name, False, f"unexpected error {e.kind}: {e}")

        if self.error is not None:
            return CaseResult(self.name, False, f"expected error {self.error}, program finished")
        if self.output is not None and state.output_text != self.output:
            return CaseResult(self.name, False, f"output {state.output_text!r} != {self.output!r}")
        if self.tape is not None:
            actual = state.tape[:len(self.tape)].tolist()
            if actual != self.tape:
                return CaseResult(self.name, False, f"tape {actual} != {self.tape}")
        return CaseResult(self.name, True)


def check_cases(cases: List[ProgramCase], config: Optional[InterpreterConfig] = None) -> List[CaseResult]:
    return [case.check(config) for case in cases]


def _coerce_case(obj: Any) -> ProgramCase:
    if not isinstance(obj, dict):
        raise ValueError("Each case must be a mapping")
    name = obj.get("name")
    if not name:
        raise ValueError("Each case must have 'name'")
    program = obj.get("program")
    if not isinstance(program, str):
        raise ValueError(f"Case {name!r} must have a 'program' string")

    tape = obj.get("tape")
    if tape is not None:
        if not isinstance(tape, list) or not all(isinstance(v, int) for v in tape):
            raise ValueError(f"Case {name!r}: 'tape' must be a list of integers")
        tape = [v % 256 for v in tape]

    input_data = obj.get("input") or ""
    if not isinstance(input_data, str):
        raise ValueError(f"Case {name!r}: 'input' must be a string")

    return ProgramCase(
        name=str(name),
        program=program,
        input=input_data,
        output=obj.get("output"),
        tape=tape,
        error=obj.get("error"),
    )


def load_program_cases(path: str) -> List[ProgramCase]:
    """Load program cases from a YAML file.
    Supported formats:
      1) { cases: [ { name, program, input?, output? | tape? | error? }, ... ] }
      2) A bare list of such objects
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f)

    items: List[Dict[str, Any]]
    if isinstance(data, dict) and isinstance(data.get("cases"), list):
        items = data["cases"]
    elif isinstance(data, list):
        items = data
    else:
        raise ValueError("Unsupported suite structure; expected a list or a mapping with 'cases'")

    return [_coerce_case(obj) for obj in items]
