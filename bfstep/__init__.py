from .channel import IOChannel
from .config import InterpreterConfig, load_config
from .debugger import StepDebugger, StepState
from .errors import BrainfuckError, ConfigError, InternalInconsistencyError, ScriptInvalidError
from .interpreter import BrainfuckInterpreter, find_unbalanced
from .runner import RunResult, run, run_once
from .tape import Tape

__all__ = [
    "BrainfuckError",
    "BrainfuckInterpreter",
    "ConfigError",
    "IOChannel",
    "InternalInconsistencyError",
    "InterpreterConfig",
    "RunResult",
    "ScriptInvalidError",
    "StepDebugger",
    "StepState",
    "Tape",
    "find_unbalanced",
    "load_config",
    "run",
    "run_once",
]
