import logging as lg

import bfvm.compile.grammar as grammar
from bfvm.compile.fpp import FPP
from bfvm.compile.program import Program


def compile_source(source: str) -> Program:
    first_pass = FPP()
    actions = grammar.program.parse_string(source, parse_all=True)

    for (func, arg) in actions:  # type: ignore
        func(first_pass, arg)

    program = first_pass.finish()
    loops = sum(1 for i in program if i.is_loop()) // 2
    lg.debug(f'Compiled {len(program)} instructions, {loops} loops')
    return program
