import time
import logging as lg

from bfvm.common.settings import Settings
from bfvm.compile.compiler import compile_source
from bfvm.runtime.peripheral import Console
from bfvm.runtime.vm import VM


EXIT_HALT = 0
EXIT_IO_ERROR = 1
EXIT_KEYBOARD = 3
EXIT_COMPILE_ERROR = 4
EXIT_TAPE_ERROR = 100


def create_vm(settings: Settings) -> VM:
    return VM(Console(character_output=settings.character_output))


def execute(source: str, settings: Settings, vm: VM | None = None) -> VM:
    if vm is None:
        vm = create_vm(settings)

    start = time.perf_counter()
    program = compile_source(source)

    if settings.verbose:
        lg.info(f'Compilation succeeded in {time.perf_counter() - start:.6f}s')

    vm.load(program)
    vm.run()
    return vm
