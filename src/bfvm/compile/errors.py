class CompileError(Exception):
    pass


class UnbalancedBrackets(CompileError):
    index: int

    def __init__(self, index: int, message: str):
        super().__init__(message)
        self.index = index
