''' First-pass processor: instruction list and loop partners '''

import logging as lg
from typing import Dict, List

import bfvm.common.ops as ops
from bfvm.compile.errors import UnbalancedBrackets
from bfvm.compile.program import Instruction, Program


class FPP:
    cmd_list: List[int]
    partners: Dict[int, int]
    pending: List[int]  # Indices of unclosed '['

    def __init__(self):
        self.cmd_list = []
        self.partners = dict()
        self.pending = []

    def position(self) -> int:
        return len(self.cmd_list)

    def issue_op(self, op: int):
        self.cmd_list.append(op)

    def issue_loop_start(self, op: int):
        self.pending.append(self.position())
        self.issue_op(op)

    def issue_loop_end(self, op: int):
        end = self.position()

        if not self.pending:
            lg.debug(f'Unmatched {ops.NAMES[op]} at {end}')
            raise UnbalancedBrackets(end, f'Found mismatched jump instruction at op {end}')

        start = self.pending.pop()
        self.partners[start] = end
        self.partners[end] = start
        self.issue_op(op)

    def finish(self) -> Program:
        if self.pending:
            start = self.pending[0]
            lg.debug(f'{len(self.pending)} loop(s) left open, first at {start}')
            raise UnbalancedBrackets(start, f'Found unclosed jump instruction at op {start}')

        return tuple(
            Instruction(op, self.partners.get(index))
            for index, op in enumerate(self.cmd_list)
        )
