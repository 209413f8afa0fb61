import pytest

from bfstep import (
    BrainfuckInterpreter,
    IOChannel,
    InterpreterConfig,
    ScriptInvalidError,
    run,
    run_once,
)

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


class TestRunOnce:
    def test_hello_world(self):
        result = run_once(HELLO_WORLD, step_limit=100000)
        assert result.output == "Hello World!\n"
        assert result.halted
        assert not result.hit_step_limit

    def test_echo_input(self):
        result = run_once(",[.,]", "abc", config=InterpreterConfig(eof_behaviour="zero"))
        assert result.output == "abc"

    def test_doubling(self):
        result = run_once(",[>++<-]>.", chr(3))
        assert [ord(c) for c in result.output] == [6]

    def test_invalid_script_raises(self):
        with pytest.raises(ScriptInvalidError):
            run_once("[[]")

    def test_infinite_loop_hits_limit(self):
        result = run_once("+[]", step_limit=50)
        assert result.hit_step_limit
        assert not result.halted
        assert result.cycles == 50

    def test_default_limit_from_config(self):
        result = run_once("+[]", config=InterpreterConfig(step_limit=7))
        assert result.cycles == 7
        assert result.hit_step_limit


class TestRun:
    def test_comments_do_not_count(self):
        itp = BrainfuckInterpreter()
        itp.set_script("+ comment text + ")
        result = run(itp, max_cycles=2)
        assert result.halted
        assert result.cycles == 2
        assert not result.hit_step_limit

    def test_drains_output(self):
        out = IOChannel()
        itp = BrainfuckInterpreter(IOChannel(), out)
        itp.set_script("+" * 66 + ".")
        assert run(itp).output == "B"
        assert out.buffer == ""

    def test_resume_after_limit(self):
        itp = BrainfuckInterpreter()
        itp.set_script("+++++.")
        first = run(itp, max_cycles=3)
        assert first.hit_step_limit
        second = run(itp, max_cycles=100)
        assert second.halted
        assert second.output == chr(5)
