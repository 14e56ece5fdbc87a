class Settings:
    character_output: bool
    verbose: bool

    def __init__(self):
        self.character_output = False
        self.verbose = False

    def update(
        self,
        character_output: bool | None = None,
        verbose: bool | None = None
    ):
        if character_output is not None:
            self.character_output = character_output

        if verbose is not None:
            self.verbose = verbose

        return self
