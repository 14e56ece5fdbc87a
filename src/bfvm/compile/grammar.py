# type: ignore
''' Source grammar '''

import pyparsing as pp

import bfvm.common.ops as ops
from bfvm.compile.fpp import FPP


def g_cmd(literal, op, func=FPP.issue_op):
    return pp.Literal(literal).set_parse_action(lambda _: (func, op))


# Anything outside the command alphabet is a comment
comment = pp.Suppress(pp.Regex(r'[^<>+\-.,\[\]]+'))

inc_dp_cmd = g_cmd('>', ops.INC_DP)
dec_dp_cmd = g_cmd('<', ops.DEC_DP)
inc_val_cmd = g_cmd('+', ops.INC_VAL)
dec_val_cmd = g_cmd('-', ops.DEC_VAL)
out_cmd = g_cmd('.', ops.OUT)
in_cmd = g_cmd(',', ops.IN)
jmp_fwd_cmd = g_cmd('[', ops.JMP_FWD, FPP.issue_loop_start)
jmp_back_cmd = g_cmd(']', ops.JMP_BACK, FPP.issue_loop_end)

cmd = pp.MatchFirst([
    inc_dp_cmd,
    dec_dp_cmd,
    inc_val_cmd,
    dec_val_cmd,
    out_cmd,
    in_cmd,
    jmp_fwd_cmd,
    jmp_back_cmd
])

program = pp.ZeroOrMore(cmd | comment)
