#!/usr/bin/env python3
"""
Brainfuck Step-by-Step Debugger

Wraps a BrainfuckInterpreter and records the machine state after each
instruction, and renders the memory tape, program position and output in a
compact text form.
"""

from dataclasses import dataclass
from typing import List, Optional

from .config import check_positive_int
from .interpreter import BrainfuckInterpreter


@dataclass
class StepState:
    """Machine state observed after a step.

    command is the instruction just executed (None before the first step),
    next_command the one iptr now points at (None once halted).
    """
    step: int
    iptr: int
    dptr: int
    cycles: int
    command: Optional[str]
    next_command: Optional[str]
    cell: int
    loop_depth: int


class StepDebugger:
    def __init__(self, interpreter: BrainfuckInterpreter, show_memory_range: Optional[int] = None):
        self.interpreter = interpreter
        if show_memory_range is None:
            show_memory_range = interpreter.config.show_memory_range
        self.show_memory_range = check_positive_int("show_memory_range", show_memory_range)
        self.step_count = 0
        self.last_command: Optional[str] = None

    def snapshot(self) -> StepState:
        itp = self.interpreter
        next_command = itp.script[itp.iptr] if not itp.halted else None
        return StepState(
            step=self.step_count,
            iptr=itp.iptr,
            dptr=itp.dptr,
            cycles=itp.cycles,
            command=self.last_command,
            next_command=next_command,
            cell=itp.cell(),
            loop_depth=len(itp.blocks),
        )

    def step(self) -> Optional[StepState]:
        """Advance one instruction; None once the program has halted."""
        itp = self.interpreter
        if itp.halted:
            return None
        command = itp.script[itp.iptr]
        itp.step()
        self.last_command = command
        self.step_count += 1
        return self.snapshot()

    def trace(self, max_steps: int = 100) -> List[StepState]:
        states: List[StepState] = []
        while len(states) < max_steps:
            state = self.step()
            if state is None:
                break
            states.append(state)
        return states

    def render(self) -> str:
        """Show current state of memory, pointer, and program."""
        itp = self.interpreter
        lines = []

        program_display = ""
        for i, cmd in enumerate(itp.script):
            program_display += f"[{cmd}]" if i == itp.iptr else cmd
        if itp.halted:
            program_display += "[END]"
        lines.append(f"Program:  {program_display}")

        # Window centred on the data pointer; negative addresses are fine
        start = itp.dptr - self.show_memory_range // 2
        end = start + self.show_memory_range
        window = itp.tape.window(start, end)

        memory_vals = [f"{int(v):3d}" for v in window]
        memory_ptrs = [" ^ " if i == itp.dptr else "   " for i in range(start, end)]
        memory_addrs = [f"{i:3d}" for i in range(start, end)]
        lines.append("Memory:   [" + "|".join(memory_vals) + "]")
        lines.append("Pointer:   " + " ".join(memory_ptrs))
        lines.append("Address:   " + " ".join(memory_addrs))

        lines.append(f"Cycles:   {itp.cycles}  Loop depth: {len(itp.blocks)}")

        output = itp.stdout.buffer
        if output:
            lines.append(f"Output:   {output!r} → {[ord(c) for c in output]}")
        else:
            lines.append("Output:   (empty)")
        return "\n".join(lines)
