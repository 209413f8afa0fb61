import numpy as np
import pytest

from bfstep import Tape


class TestTape:
    def test_default_zero(self):
        tape = Tape()
        assert tape[0] == 0
        assert tape[-100] == 0
        assert 0 not in tape

    def test_write_materialises(self):
        tape = Tape()
        tape[-2] = 7
        assert -2 in tape
        assert len(tape) == 1

    def test_values_wrap(self):
        tape = Tape()
        tape[0] = 300
        tape[1] = -1
        assert tape[0] == 44
        assert tape[1] == 255

    def test_increment_decrement(self):
        tape = Tape()
        assert tape.decrement(5) == 255
        assert tape.increment(5) == 0
        assert tape.increment(5) == 1

    def test_items_sorted(self):
        tape = Tape()
        tape[3] = 1
        tape[-3] = 2
        assert list(tape.items()) == [(-3, 2), (3, 1)]

    def test_window(self):
        tape = Tape()
        tape[-1] = 9
        tape[2] = 200
        tape[50] = 1
        view = tape.window(-2, 3)
        assert view.dtype == np.uint8
        np.testing.assert_array_equal(view, [0, 9, 0, 0, 200])

    def test_window_rejects_reversed_range(self):
        with pytest.raises(ValueError):
            Tape().window(3, 1)

    def test_clear(self):
        tape = Tape()
        tape[1] = 1
        tape.clear()
        assert len(tape) == 0
        assert tape[1] == 0
