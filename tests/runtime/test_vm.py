import io

import pytest

from bfvm.common.tapeconf import TAPE_SIZE
from bfvm.compile.compiler import compile_source
from bfvm.runtime.peripheral import Console
from bfvm.runtime.tape import Tape, TapeOutOfBounds
from bfvm.runtime.vm import VM

from unit_utils import run_string


def test_increment_wraps():
    tape = Tape()
    tape.write(255)
    vm = VM(Console(io.StringIO(), io.StringIO()), tape)
    vm.load(compile_source('+'))
    vm.run()

    assert tape.read() == 0


def test_decrement_wraps():
    vm, _ = run_string('-')
    assert vm.tape.read() == 255


def test_right_out_of_bounds():
    with pytest.raises(TapeOutOfBounds) as info:
        run_string('>' * (TAPE_SIZE + 1))

    assert info.value.position == TAPE_SIZE


def test_left_out_of_bounds():
    with pytest.raises(TapeOutOfBounds) as info:
        run_string('<')

    assert info.value.position == -1


def test_last_cell_reachable():
    vm, _ = run_string('>' * (TAPE_SIZE - 1) + '<>+')

    assert vm.tape.dp == TAPE_SIZE - 1
    assert vm.tape[TAPE_SIZE - 1] == 1


def test_no_continuation_after_bounds():
    vm = VM(Console(io.StringIO(), io.StringIO()))
    vm.load(compile_source('<+'))

    with pytest.raises(TapeOutOfBounds):
        vm.run()

    assert vm.ip == 0
    assert vm.tape.read() == 0


def test_loop_skipped_on_zero():
    vm, _ = run_string('[+]')

    assert vm.tape.read() == 0
    assert vm.ip == 3


def test_loop_body_runs():
    vm, _ = run_string('+++++[>++<-]')

    assert vm.tape[0] == 0
    assert vm.tape[1] == 10


def test_nested_loops():
    vm, _ = run_string('+++[>++[>+++<-]<-]')

    assert vm.tape[2] == 18


def test_output_numbers():
    _, output = run_string('+++.+.', character_output=False)
    assert output == '3\n4\n'


def test_output_chars():
    _, output = run_string('+' * 65 + '.+.', character_output=True)
    assert output == 'AB'


def test_input():
    vm, _ = run_string(',>,', stdin='Hi')

    assert vm.tape[0] == ord('H')
    assert vm.tape[1] == ord('i')


def test_input_exhausted():
    vm, _ = run_string('+++++++,', stdin='')
    assert vm.tape.read() == 7


def test_exec_next_steps():
    vm = VM(Console(io.StringIO(), io.StringIO()))
    vm.load(compile_source('+[-]'))

    vm.exec_next()
    assert (vm.ip, vm.tape.read()) == (1, 1)

    vm.exec_next()
    assert vm.ip == 2

    vm.exec_next()
    assert (vm.ip, vm.tape.read()) == (3, 0)

    vm.exec_next()
    assert vm.ip == 4
    assert vm.halted()


def test_back_jump_targets_after_start():
    vm = VM(Console(io.StringIO(), io.StringIO()))
    vm.load(compile_source('++[-]'))

    for _ in range(5):
        vm.exec_next()

    # ] with a non-zero cell lands on the body, not on [
    assert vm.ip == 3


def test_reload_keeps_tape():
    vm = VM(Console(io.StringIO(), io.StringIO()))

    vm.load(compile_source('>++'))
    vm.run()
    vm.load(compile_source('+'))
    assert vm.ip == 0
    vm.run()

    assert vm.tape.dp == 1
    assert vm.tape.read() == 3


def test_output_high_byte_raw():
    output = io.TextIOWrapper(io.BytesIO(), encoding='ascii')
    vm = VM(Console(io.StringIO(), output, character_output=True))
    vm.load(compile_source('+' * 0xE9 + '.'))
    vm.run()

    assert output.buffer.getvalue() == b'\xe9'


def test_output_keeps_order_with_text():
    output = io.TextIOWrapper(io.BytesIO(), encoding='utf-8')
    output.write('> ')
    vm = VM(Console(io.StringIO(), output, character_output=True))
    vm.load(compile_source('+' * 0x41 + '.+.'))
    vm.run()

    assert output.buffer.getvalue() == b'> AB'
