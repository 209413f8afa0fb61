from dataclasses import dataclass
from typing import Optional
import logging

from .channel import IOChannel
from .config import InterpreterConfig
from .interpreter import COMMANDS, BrainfuckInterpreter

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    output: str
    cycles: int
    halted: bool
    hit_step_limit: bool


def run(itp: BrainfuckInterpreter, max_cycles: Optional[int] = None) -> RunResult:
    """Step `itp` until it halts or has executed `max_cycles` instructions.

    Comment characters are free: only executed commands count toward the
    limit. The output channel is drained into the result.
    """
    limit = itp.config.step_limit if max_cycles is None else max_cycles
    logger.debug(f"Running script of length {len(itp.script)} with cycle limit {limit}")

    while not itp.halted:
        if itp.cycles >= limit and itp.script[itp.iptr] in COMMANDS:
            break
        itp.step()

    halted = itp.halted
    hit_step_limit = not halted
    if hit_step_limit:
        logger.debug(f"Stopped after {itp.cycles} cycles at iptr={itp.iptr} (possible infinite loop)")

    output = itp.stdout.read(len(itp.stdout))
    return RunResult(output=output, cycles=itp.cycles, halted=halted, hit_step_limit=hit_step_limit)


def run_once(code: str, input_data: str = "", step_limit: Optional[int] = None,
             config: Optional[InterpreterConfig] = None) -> RunResult:
    """Execute `code` on a fresh interpreter with `input_data` as stdin.

    Without an explicit config the BF_* environment variables apply.

    Raises ScriptInvalidError if the brackets are unbalanced.
    """
    itp = BrainfuckInterpreter(IOChannel(input_data), IOChannel(), config=config or InterpreterConfig.from_env())
    itp.load_script(code)
    return run(itp, step_limit)
