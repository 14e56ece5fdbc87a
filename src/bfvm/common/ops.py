# Pointer
INC_DP = 0x01    # > : DP + 1 -> DP
DEC_DP = 0x02    # < : DP - 1 -> DP

# Cell arithmetic
INC_VAL = 0x03   # + : M[DP] + 1 -> M[DP] (mod 256)
DEC_VAL = 0x04   # - : M[DP] - 1 -> M[DP] (mod 256)

# I/O
OUT = 0x05       # . : M[DP] -> console
IN = 0x06        # , : console -> M[DP], unchanged on EOF

# Loops
JMP_FWD = 0x07   # [ : if M[DP] .eq 0 jmp partner + 1
JMP_BACK = 0x08  # ] : if M[DP] .ne 0 jmp partner + 1

SYMBOLS = {
    '>': INC_DP,
    '<': DEC_DP,
    '+': INC_VAL,
    '-': DEC_VAL,
    '.': OUT,
    ',': IN,
    '[': JMP_FWD,
    ']': JMP_BACK
}

NAMES = {op: symbol for symbol, op in SYMBOLS.items()}
