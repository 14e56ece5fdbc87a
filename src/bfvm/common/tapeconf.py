TAPE_SIZE = 30000
CELL_MODULUS = 0x100
