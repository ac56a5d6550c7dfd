#!/usr/bin/env python3
"""
Brainfuck Step-by-Step Debugger

Shows the step-by-step execution of a Brainfuck program, displaying the state
of the memory tape, input stream, and output at each step. Execution goes
through the same step()/apply() pair as interpreter.run, so what you see is
exactly what a normal run does.
"""

from typing import List, Optional

from .config import InterpreterConfig
from .interpreter import Jump, State, step


class BrainfuckDebugger:
    """Brainfuck interpreter front-end with step-by-step tracing."""

    def __init__(self, memory_size=30, show_memory_range=10, max_steps=100,
                 config: Optional[InterpreterConfig] = None):
        if config is None:
            config = InterpreterConfig(memory_size=memory_size)
        self.config = config
        self.show_memory_range = show_memory_range
        self.max_steps = max_steps
        self.step_count = 0

    def debug_run(self, code: str, input_data: str = "") -> State:
        """Execute Brainfuck code with step-by-step debugging."""
        print(f"🐛 BRAINFUCK DEBUGGER")
        print(f"Program: {code}")
        print(f"Input: {repr(input_data)} (as chars: {[ord(c) for c in input_data]})")
        print("=" * 80)

        state = State.create(code, input_data, self.config)
        self.step_count = 0
        input_index = 0

        self._show_state(state, input_data, input_index, "INITIAL")

        while not state.finished and self.step_count < self.max_steps:
            cmd = state.program[state.pc]
            self.step_count += 1
            print(f"\nStep {self.step_count}: Execute '{cmd}' at position {state.pc}")

            outcome = step(state)
            if cmd == ',':
                input_index += 1
            print(f"  {self._describe(cmd, state, outcome)}")
            state.apply(outcome)

            self._show_state(state, input_data, input_index, f"AFTER STEP {self.step_count}")

        if not state.finished:
            print(f"\n⚠️ Execution stopped after {self.max_steps} steps (possible infinite loop)")

        print(f"\n🎯 FINAL RESULT:")
        print(f"Output: {state.output_text!r} → {state.output}")
        return state

    def _describe(self, cmd, state, outcome) -> str:
        p = state.cursor
        if cmd == '>':
            return f"Move pointer right → position {p}"
        if cmd == '<':
            return f"Move pointer left → position {p}"
        if cmd == '+':
            return f"Increment cell[{p}] → {state.cell}"
        if cmd == '-':
            return f"Decrement cell[{p}] → {state.cell}"
        if cmd == '.':
            return f"Output cell[{p}] = {state.cell} → {chr(state.cell)!r}"
        if cmd == ',':
            return f"Read input {state.cell} → cell[{p}]"
        if cmd == '[':
            if isinstance(outcome, Jump):
                return f"Loop start: cell[{p}] = 0, jump to position {outcome.target}"
            return f"Loop start: cell[{p}] ≠ 0, enter loop"
        if cmd == ']':
            if isinstance(outcome, Jump):
                return f"Loop end: cell[{p}] ≠ 0, jump back to position {outcome.target}"
            return f"Loop end: cell[{p}] = 0, exit loop"
        return f"Comment {cmd!r}, skip"

    def _show_state(self, state: State, input_data: str, input_index: int, label: str):
        """Show current state of memory, pointer, and program."""
        print(f"\n{label}:")
        for line in self.format_state(state, input_data, input_index):
            print(line)

    def format_state(self, state: State, input_data: str, input_index: int) -> List[str]:
        """Render program, input, memory window and output as display lines."""
        program_display = ""
        for i, cmd in enumerate(state.program):
            if i == state.pc:
                program_display += f"[{cmd}]"
            else:
                program_display += cmd

        input_display = ""
        for i, char in enumerate(input_data):
            if i == input_index:
                input_display += f"[{char}]"
            else:
                input_display += char
        if input_index >= len(input_data):
            input_display += "[EOF]"

        # Memory window focused around the pointer
        start = max(0, state.cursor - self.show_memory_range // 2)
        end = min(len(state.tape), start + self.show_memory_range)
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)

        memory_vals = [f"{int(state.tape[i]):3d}" for i in range(start, end)]
        memory_ptrs = [" ^ " if i == state.cursor else "   " for i in range(start, end)]
        memory_addrs = [f"{i:3d}" for i in range(start, end)]

        if state.output:
            output_display = f"{state.output_text!r} → {state.output}"
        else:
            output_display = "(empty)"

        return [
            f"Program:  {program_display}",
            f"Input:    {input_display}",
            f"Memory:   [" + "|".join(memory_vals) + "]",
            f"Pointer:   " + " ".join(memory_ptrs),
            f"Address:   " + " ".join(memory_addrs),
            f"Output:   {output_display}",
        ]
