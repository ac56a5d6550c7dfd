#!/usr/bin/env python3
"""
bftape command line.

    bftape run hello.bf --input "abc"
    bftape run -e "+++[->+<]>." --json
    bftape debug -e ",[->++<]>." --input "$(printf '\\003')"
    bftape check suite.yaml
"""

import argparse
import json
import sys
from typing import List, Optional

import yaml

from .config import InterpreterConfig, POINTER_POLICIES, INPUT_POLICIES, load_config
from .debugger import BrainfuckDebugger
from .errors import BrainfuckError
from .runner import run_with_limit
from .suite import check_cases, load_program_cases


def _add_program_args(ap: argparse.ArgumentParser):
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("file", nargs="?", help="Path to a program file")
    src.add_argument("-e", "--eval", dest="code", help="Program text given inline")
    ap.add_argument("--input", default="", help="Input text consumed by ','")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bftape", description="Run tape-language programs")
    ap.add_argument("--env-file", default=None, help="Read BF_* settings from this .env file")
    ap.add_argument("--memory-size", type=int, default=None, help="Number of tape cells")
    ap.add_argument("--pointer-policy", choices=POINTER_POLICIES, default=None,
                    help="What '>' does on the last cell")
    ap.add_argument("--input-policy", choices=INPUT_POLICIES, default=None,
                    help="What ',' does with input values above 255")
    sub = ap.add_subparsers(dest="command", required=True)

    run_ap = sub.add_parser("run", help="Run a program and print its output")
    _add_program_args(run_ap)
    run_ap.add_argument("--step-limit", type=int, default=None, help="Interpreter max steps per run (0 for no limit)")
    run_ap.add_argument("--json", action="store_true", help="Print a JSON summary instead of raw output")
    run_ap.add_argument("--trace", action="store_true", help="Print the first 50 executed steps")

    debug_ap = sub.add_parser("debug", help="Step through a program showing the tape")
    _add_program_args(debug_ap)
    debug_ap.add_argument("--max-steps", type=int, default=100)
    debug_ap.add_argument("--window", type=int, default=10, help="Memory cells shown around the pointer")

    check_ap = sub.add_parser("check", help="Run a YAML suite of program cases")
    check_ap.add_argument("suite", help="Path to YAML file with program cases")
    return ap


def _read_program(args) -> str:
    if args.code is not None:
        return args.code
    with open(args.file, "r") as f:
        return f.read()


def _cmd_run(args, config: InterpreterConfig) -> int:
    program = _read_program(args)
    state = run_with_limit(program, args.input, config=config, step_limit=args.step_limit, trace=args.trace)
    if args.json:
        summary = {
            "output": state.output,
            "output_text": state.output_text,
            "cursor": state.cursor,
            "tape": state.tape[:max(state.cursor + 1, 10)].tolist(),
        }
        print(json.dumps(summary, indent=2))
    else:
        sys.stdout.write(state.output_text)
        sys.stdout.flush()
    return 0


def _cmd_debug(args, config: InterpreterConfig) -> int:
    debugger = BrainfuckDebugger(show_memory_range=args.window, max_steps=args.max_steps, config=config)
    state = debugger.debug_run(_read_program(args), args.input)
    if state.finished:
        print(f"\n✅ Execution complete. Final output: {state.output_text!r}")
    return 0


def _cmd_check(args, config: InterpreterConfig) -> int:
    results = check_cases(load_program_cases(args.suite), config)
    for r in results:
        if r.passed:
            print(f"✅ {r.name}")
        else:
            print(f"❌ {r.name}: {r.detail}")
    passed = sum(r.passed for r in results)
    print(f"\n{passed}/{len(results)} cases passed")
    return 0 if passed == len(results) else 1


COMMANDS = {"run": _cmd_run, "debug": _cmd_debug, "check": _cmd_check}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(
            args.env_file,
            memory_size=args.memory_size,
            pointer_policy=args.pointer_policy,
            input_policy=args.input_policy,
        )
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        return COMMANDS[args.command](args, config)
    except BrainfuckError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
