import sys
from typing import TextIO

from bfvm.common.tapeconf import CELL_MODULUS


class Console:
    ''' Byte channel between a running program and the host streams '''

    input: TextIO
    output: TextIO
    character_output: bool

    def __init__(
        self,
        input: TextIO | None = None,
        output: TextIO | None = None,
        character_output: bool = False
    ):
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.character_output = character_output

    def read_byte(self) -> int | None:
        char = self.input.read(1)

        if not char:
            return None

        return ord(char) % CELL_MODULUS

    def write_char(self, value: int):
        buffer = getattr(self.output, 'buffer', None)

        # Raw byte when the stream has one, code point otherwise
        if buffer is None:
            self.output.write(chr(value))
            return

        self.output.flush()
        buffer.write(bytes([value]))
        buffer.flush()

    def write_byte(self, value: int):
        if self.character_output:
            self.write_char(value)
        else:
            self.output.write(f'{value}\n')

        self.output.flush()
