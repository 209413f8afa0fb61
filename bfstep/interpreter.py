#!/usr/bin/env python3
"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the character signified by the cell at the pointer
    ,   Input a character and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments and ignored.

The interpreter is driven one instruction at a time through step(), so a
caller can inspect iptr, dptr, cycles and any cell between instructions.
The tape is forgiving: the pointer may run past either end of the nominal
memory length and keeps working.
"""

import logging
from typing import List, Optional

from .channel import IOChannel
from .config import InterpreterConfig, check_positive_int
from .errors import InternalInconsistencyError, ScriptInvalidError
from .tape import Tape

logger = logging.getLogger(__name__)

COMMANDS = '><+-.,[]'


def find_unbalanced(script: str) -> Optional[int]:
    """Return the index of the first offending bracket, or None if balanced.

    An unmatched ']' is reported where it occurs; otherwise the innermost
    unclosed '[' is reported.
    """
    opens: List[int] = []
    for i, cmd in enumerate(script):
        if cmd == '[':
            opens.append(i)
        elif cmd == ']':
            if not opens:
                return i
            opens.pop()
    return opens[-1] if opens else None


class BrainfuckInterpreter:
    def __init__(self, stdin: Optional[IOChannel] = None, stdout: Optional[IOChannel] = None,
                 memory_length: Optional[int] = None, config: Optional[InterpreterConfig] = None):
        self.config = config or InterpreterConfig()
        if memory_length is None:
            memory_length = self.config.memory_length
        self.memory_length = check_positive_int("memory_length", memory_length)
        self.stdin = stdin if stdin is not None else IOChannel()
        self.stdout = stdout if stdout is not None else IOChannel()
        self.script = ""
        self.tape = Tape()
        self.dptr = 0
        self.iptr = 0
        self.cycles = 0
        self._loops: List[int] = []
        self._out_of_bounds = False

    @staticmethod
    def check_script(script: str) -> bool:
        """Make sure every '[' has a matching ']'."""
        depth = 0
        for cmd in script:
            if cmd == '[':
                depth += 1
            elif cmd == ']':
                depth -= 1
                if depth < 0:
                    return False
        return depth == 0

    def set_script(self, script: str) -> bool:
        """Install `script` and reset all machine state.

        Returns False and leaves the current state untouched if the brackets
        are unbalanced.
        """
        if not self.check_script(script):
            logger.warning(f"Rejected script: unbalanced bracket at position {find_unbalanced(script)}")
            return False
        self.script = script
        self.tape = Tape()
        self.dptr = 0
        self.iptr = 0
        self.cycles = 0
        self._loops = []
        self._out_of_bounds = False
        return True

    def load_script(self, script: str) -> None:
        """Like set_script, but raise ScriptInvalidError on rejection."""
        if not self.set_script(script):
            position = find_unbalanced(script)
            raise ScriptInvalidError(f"Unmatched '{script[position]}' at position {position}", position)

    @property
    def blocks(self) -> List[int]:
        """Positions of the currently active '[' instructions, innermost last."""
        return list(self._loops)

    @property
    def halted(self) -> bool:
        return self.iptr >= len(self.script)

    def cell(self, index: Optional[int] = None) -> int:
        return self.tape[self.dptr if index is None else index]

    def step(self) -> bool:
        """Execute one instruction. Returns False once the script has ended."""
        if self.iptr >= len(self.script):
            return False

        cmd = self.script[self.iptr]

        if cmd == '>':
            self.dptr += 1
            self._check_bounds()
        elif cmd == '<':
            self.dptr -= 1
            self._check_bounds()
        elif cmd == '+':
            self.tape.increment(self.dptr)
        elif cmd == '-':
            self.tape.decrement(self.dptr)
        elif cmd == '.':
            self.stdout.write(chr(self.tape[self.dptr]))
        elif cmd == ',':
            self._read_char()
        elif cmd == '[':
            self._open_loop()
        elif cmd == ']':
            self._close_loop()
        else:
            # comment
            self.iptr += 1
            return True

        self.iptr += 1
        self.cycles += 1
        return True

    def _read_char(self):
        char = self.stdin.read(1)
        if char:
            self.tape[self.dptr] = ord(char)
        elif self.config.eof_behaviour == "zero":
            self.tape[self.dptr] = 0
        elif self.config.eof_behaviour == "max":
            self.tape[self.dptr] = 255

    def _open_loop(self):
        if self.tape[self.dptr] != 0:
            self._loops.append(self.iptr)
            return

        # Cell is zero: land on the matching ']' so the generic advance skips past it
        depth = 0
        for i in range(self.iptr + 1, len(self.script)):
            cmd = self.script[i]
            if cmd == '[':
                depth += 1
            elif cmd == ']':
                if depth == 0:
                    self.iptr = i
                    return
                depth -= 1

        message = f"No matching ']' for '[' at position {self.iptr} in a validated script"
        logger.critical(message)
        raise InternalInconsistencyError(message)

    def _repeat_loop(self):
        self.iptr = self._loops[-1]

    def _close_loop(self):
        if self.tape[self.dptr] != 0:
            self._repeat_loop()
        else:
            self._loops.pop()

    def _check_bounds(self):
        outside = not (0 <= self.dptr < self.memory_length)
        if outside and not self._out_of_bounds:
            logger.warning(f"Data pointer {self.dptr} left nominal memory [0, {self.memory_length})")
        self._out_of_bounds = outside
