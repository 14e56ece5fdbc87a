import logging as lg
from typing import Callable, Dict

import bfvm.common.ops as ops
from bfvm.compile.program import Instruction, Program
from bfvm.runtime.peripheral import Console
from bfvm.runtime.tape import Tape


class VM():
    ip: int  # Instruction pointer
    program: Program
    tape: Tape
    console: Console

    def __init__(self, console: Console, tape: Tape | None = None):
        self.console = console                              # Ref. to I/O channel
        self.tape = tape if tape is not None else Tape()    # Survives program reloads

        self.program = ()
        self.ip = 0

    # - Helpers - #

    def debug_dump(self):
        state = [f'{k}:{v}' for k, v in {
            'IP': self.ip,
            'DP': self.tape.dp,
            'M': self.tape.read(),
            'LEN': len(self.program)
        }.items()]

        lg.debug(' '.join(state))

    def load(self, program: Program):
        self.program = program
        self.ip = 0

    def halted(self) -> bool:
        return self.ip >= len(self.program)

    def jump(self, instruction: Instruction):
        assert instruction.partner is not None, f'Unbound loop at {self.ip}'
        self.ip = instruction.partner + 1

    # - Operations - #

    def inc_dp(self, _: Instruction):
        self.tape.move(1)
        self.ip += 1

    def dec_dp(self, _: Instruction):
        self.tape.move(-1)
        self.ip += 1

    def inc_val(self, _: Instruction):
        self.tape.add(1)
        self.ip += 1

    def dec_val(self, _: Instruction):
        self.tape.add(-1)
        self.ip += 1

    def out(self, _: Instruction):
        self.console.write_byte(self.tape.read())
        self.ip += 1

    def inp(self, _: Instruction):
        value = self.console.read_byte()

        # EOF keeps the cell
        if value is not None:
            self.tape.write(value)

        self.ip += 1

    def jmp_fwd(self, instruction: Instruction):
        if self.tape.read() == 0:
            self.jump(instruction)
        else:
            self.ip += 1

    def jmp_back(self, instruction: Instruction):
        if self.tape.read() != 0:
            self.jump(instruction)
        else:
            self.ip += 1

    HANDLERS: Dict[int, Callable[['VM', Instruction], None]] = {
        ops.INC_DP: inc_dp,
        ops.DEC_DP: dec_dp,
        ops.INC_VAL: inc_val,
        ops.DEC_VAL: dec_val,
        ops.OUT: out,
        ops.IN: inp,
        ops.JMP_FWD: jmp_fwd,
        ops.JMP_BACK: jmp_back
    }

    # -- Implementation -- #

    def exec_next(self):
        instruction = self.program[self.ip]
        handler = self.HANDLERS[instruction.op]
        handler(self, instruction)

    def run(self):
        while not self.halted():
            self.exec_next()

        self.debug_dump()
