from typing import TypeAlias
from dataclasses import dataclass

import bfvm.common.ops as ops


@dataclass(frozen=True)
class Instruction:
    op: int
    partner: int | None = None  # Index of the matching bracket, loops only

    def is_loop(self) -> bool:
        return self.op in (ops.JMP_FWD, ops.JMP_BACK)

    def __str__(self) -> str:
        symbol = ops.NAMES[self.op]

        if self.partner is None:
            return symbol

        return f'{symbol}{self.partner}'


Program: TypeAlias = tuple[Instruction, ...]

