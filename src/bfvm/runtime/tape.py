from bfvm.common.tapeconf import TAPE_SIZE, CELL_MODULUS


class TapeOutOfBounds(Exception):
    position: int

    def __init__(self, position: int, message: str):
        super().__init__(message)
        self.position = position


class Tape:
    cells: bytearray
    dp: int  # Data pointer

    def __init__(self, size: int = TAPE_SIZE):
        self.cells = bytearray(size)
        self.dp = 0

    def __len__(self) -> int:
        return len(self.cells)

    def check(self, position: int):
        if position < 0:
            raise TapeOutOfBounds(position, f'Tape position {position} is below 0')

        if position >= len(self.cells):
            raise TapeOutOfBounds(
                position,
                f'Tape position {position} is beyond tape size {len(self.cells)}'
            )

    def __getitem__(self, position: int) -> int:
        self.check(position)
        return self.cells[position]

    def __setitem__(self, position: int, value: int):
        self.check(position)
        self.cells[position] = value % CELL_MODULUS

    def move(self, delta: int):
        position = self.dp + delta
        self.check(position)
        self.dp = position

    def read(self) -> int:
        return self.cells[self.dp]

    def write(self, value: int):
        self.cells[self.dp] = value % CELL_MODULUS

    def add(self, delta: int):
        self.write(self.read() + delta)
