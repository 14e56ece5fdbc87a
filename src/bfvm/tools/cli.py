import sys
import logging as lg
from pathlib import Path

import click

from bfvm.common.settings import Settings
from bfvm.compile.errors import CompileError
from bfvm.runtime.tape import TapeOutOfBounds
import bfvm.runtime.emulator as emulator
from bfvm.tools.repl import Repl


SOURCE_SUFFIX = '.bf'


def validate_source(ctx: click.Context, param: click.Parameter, value: Path | None):
    if value is not None and value.suffix != SOURCE_SUFFIX:
        raise click.BadParameter(f'file {value} was not a `{SOURCE_SUFFIX}` file')

    return value


def run_source(settings: Settings, source: Path):
    try:
        text = source.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        lg.error(f'Error reading file: {e}')
        sys.exit(emulator.EXIT_IO_ERROR)

    emulator.execute(text, settings)


@click.command()
@click.pass_context
@click.option('-c', '--chars', 'character_output', is_flag=True,
              help='Print cells as characters instead of numbers')
@click.option('-v', '--verbose', is_flag=True,
              help='Sets logging level to debug and reports compilation time')
@click.argument('source', type=Path, required=False, callback=validate_source)
def run(ctx: click.Context, source: Path | None, **params):
    ctx.ensure_object(Settings)
    ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if ctx.obj.verbose else lg.INFO)

    try:
        if source is None:
            Repl(ctx.obj).loop()
        else:
            run_source(ctx.obj, source)

        sys.exit(emulator.EXIT_HALT)

    except CompileError as e:
        lg.error(f'Execution stopped: {e}')
        sys.exit(emulator.EXIT_COMPILE_ERROR)

    except TapeOutOfBounds as e:
        lg.error(f'Execution aborted: {e}')
        sys.exit(emulator.EXIT_TAPE_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(emulator.EXIT_KEYBOARD)


if __name__ == '__main__':
    run()
