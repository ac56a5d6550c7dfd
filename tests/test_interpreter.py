import pytest

from bftape import (
    ADVANCE,
    BrainfuckInterpreter,
    InputExhaustedError,
    InputRangeError,
    InterpreterConfig,
    Jump,
    State,
    UnmatchedCloseError,
    UnmatchedOpenError,
    branch,
    build_jump_table,
    run,
    step,
)

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


def test_empty_program():
    state = run("")
    assert state.tape[0] == 0
    assert state.output == []


def test_only_comments_leave_tape_untouched():
    state = run("hello world this is not code\n")
    assert not state.tape.any()
    assert state.output == []
    assert state.cursor == 0


def test_increment():
    assert run("+").tape[0] == 1


def test_decrement_wraps_to_255():
    assert run("-").tape[0] == 255


def test_multiple_increment_and_decrement():
    assert run("+++++").tape[0] == 5
    assert run("-----").tape[0] == 251
    assert run("+++-+-").tape[0] == 2


@pytest.mark.parametrize("n", [1, 7, 255, 256, 300])
def test_increments_wrap_modulo_256(n):
    state = run("+" * n + ".")
    assert state.output == [n % 256]


def test_move_right_and_increment():
    state = run(">+")
    assert state.tape[0] == 0
    assert state.tape[1] == 1
    assert state.cursor == 1


def test_move_left_at_zero_is_noop():
    state = run("<")
    assert state.cursor == 0
    state = run("<+")
    assert state.tape[0] == 1


def test_move_right_and_left():
    assert run("><++").tape[0] == 2


def test_output():
    state = run("+.")
    assert state.output == [1]
    assert state.output_text == "\x01"
    assert state.output_bytes == b"\x01"


def test_output_after_pointer_move():
    state = run("+>++.<.")
    assert state.tape[0] == 1
    assert state.tape[1] == 2
    assert state.output == [2, 1]


def test_loop_skipped_on_zero_cell():
    state = run("[+]")
    assert state.tape[0] == 0
    assert state.output == []


def test_loop_single_iteration():
    state = run("+[->+<]")
    assert state.tape.tolist()[:2] == [0, 1]


def test_loop_multiple_iterations():
    state = run("+++[->+<]", "")
    assert state.tape[0] == 0
    assert state.tape[1] == 3


def test_nested_loops():
    state = run("++[>++[>+++<-]<-]")
    assert state.tape.tolist()[:3] == [0, 0, 12]


def test_hello_world():
    assert run(HELLO_WORLD).output_text == "Hello World!\n"


def test_input():
    assert run(",", "\x01").tape[0] == 1


def test_input_multiple():
    state = run(",>,>,", "\x01\x02\x03")
    assert state.tape.tolist()[:3] == [1, 2, 3]


def test_input_accepts_bytes_and_ints():
    assert run(",>,", b"\x07\x08").tape.tolist()[:2] == [7, 8]
    assert run(",>,", [9, 10]).tape.tolist()[:2] == [9, 10]


def test_echo_program():
    assert run(",[.,]", "abc\x00").output_text == "abc"


def test_input_exhausted():
    with pytest.raises(InputExhaustedError) as exc:
        run(",>,>,", "\x01\x02")
    assert exc.value.kind == "input_exhausted"
    assert exc.value.position == 4


def test_input_exhausted_stops_execution():
    state = State.create(",+.")
    with pytest.raises(InputExhaustedError):
        step(state)
    assert state.pc == 0
    assert state.tape[0] == 0
    assert state.output == []


def test_comments_between_instructions():
    state = run("+a+b>c+.>[,]")
    assert state.tape[0] == 2
    assert state.tape[1] == 1
    assert state.output == [1]


def test_bracket_errors_raised_before_execution():
    with pytest.raises(UnmatchedOpenError):
        run("[[")
    with pytest.raises(UnmatchedCloseError):
        run("]")
    # the ',' would fail on empty input if anything ran first
    with pytest.raises(UnmatchedOpenError):
        run(",[")


def test_pointer_wraps_at_end_of_tape():
    config = InterpreterConfig(memory_size=3)
    state = run(">>>+", config=config)
    assert state.cursor == 0
    assert state.tape.tolist() == [1, 0, 0]


def test_pointer_clamps_at_end_of_tape():
    config = InterpreterConfig(memory_size=3, pointer_policy="clamp")
    state = run(">>>>+", config=config)
    assert state.cursor == 2
    assert state.tape.tolist() == [0, 0, 1]


def test_tape_length_comes_from_config():
    assert len(run("+").tape) == 30000
    assert len(run("+", config=InterpreterConfig(memory_size=16)).tape) == 16


def test_large_input_values_are_truncated():
    assert run(",", [300]).tape[0] == 44
    assert run(",", "Ā").tape[0] == 0
    assert run(",", [-1]).tape[0] == 255


def test_large_input_values_rejected():
    config = InterpreterConfig(input_policy="reject")
    with pytest.raises(InputRangeError) as exc:
        run(",", [256], config=config)
    assert exc.value.kind == "input_out_of_range"
    assert exc.value.value == 256
    assert run(",", [255], config=config).tape[0] == 255


def test_branch_transitions():
    table = build_jump_table("[]")
    assert branch("[", 0, 0, table) == Jump(1)
    assert branch("[", 5, 0, table) is ADVANCE
    assert branch("]", 1, 1, table) == Jump(0)
    assert branch("]", 0, 1, table) is ADVANCE
    assert branch("+", 0, 0, table) is ADVANCE


def test_step_returns_outcome_without_moving_pc():
    state = State.create("+[-]")
    assert step(state) is ADVANCE
    assert state.pc == 0
    state.apply(ADVANCE)
    assert step(state) is ADVANCE  # cell is 1, enter loop
    state.apply(ADVANCE)
    state.apply(step(state))
    assert state.tape[0] == 0
    outcome = step(state)
    assert outcome is ADVANCE  # cell is 0, leave loop
    state.apply(outcome)
    assert state.finished


def test_jump_lands_on_target():
    state = State.create("[+]")
    outcome = step(state)
    assert outcome == Jump(2)
    state.apply(outcome)
    assert state.pc == 2
    state.apply(step(state))
    assert state.finished
    assert state.tape[0] == 0


def test_runs_are_independent():
    first = run("+++>+")
    second = run("+")
    assert first.tape[0] == 3
    assert second.tape[0] == 1
    assert second.tape[1] == 0


def test_interpreter_object():
    itp = BrainfuckInterpreter(InterpreterConfig(memory_size=8))
    assert itp.memory is None
    assert itp.run(",+.", "\x03") == "\x04"
    assert itp.memory.tolist() == [4, 0, 0, 0, 0, 0, 0, 0]
    assert itp.run("+.") == "\x01"
    assert itp.memory[0] == 1


def test_input_accepts_sequence_of_characters():
    state = run(",>,", ["a", "b"])
    assert state.tape.tolist()[:2] == [97, 98]
    assert run(",", ("Ā",)).tape[0] == 0
