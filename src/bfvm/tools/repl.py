import sys
import logging as lg
from typing import TextIO

import click

from bfvm.common.settings import Settings
from bfvm.compile.errors import CompileError
from bfvm.runtime.emulator import execute
from bfvm.runtime.peripheral import Console
from bfvm.runtime.vm import VM


BANNER = 'Welcome to brainfuck!'
PROMPT = '> '
EXIT_COMMAND = 'exit'


class Repl:
    '''
    Line-at-a-time evaluation against a single VM.

    The tape and the data pointer carry over from one line to the next,
    so `+++` followed by `.` prints 3. Every line is compiled on its own:
    a loop cannot span lines.
    '''

    settings: Settings
    input: TextIO
    vm: VM

    def __init__(self, settings: Settings, input: TextIO | None = None):
        self.settings = settings
        self.input = input if input is not None else sys.stdin

        # Program input shares the line stream
        console = Console(self.input, character_output=settings.character_output)
        self.vm = VM(console)

    def eval(self, line: str) -> bool:
        try:
            execute(line, self.settings, self.vm)
            return True

        except CompileError as e:
            lg.error(f'Execution stopped: {e}')
            return False

    def loop(self):
        click.echo(BANNER)

        while True:
            click.echo(PROMPT, nl=False)
            line = self.input.readline()

            if not line:
                click.echo()
                return

            if line.strip() == EXIT_COMMAND:
                return

            self.eval(line)
