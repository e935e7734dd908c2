import copy
import logging

import numpy as np
import pytest
from pytest import approx

from tagnum.core import Wrapper
from tagnum.errors import UnsupportedOperationError


@pytest.fixture
def seven():
    return Wrapper(np.int32(7))


@pytest.fixture
def three():
    return Wrapper(np.int32(3))


class TestConstruction:
    def test_default_is_zero(self):
        w = Wrapper()
        assert w.get() == 0.0
        assert w.dtype == np.float64

    def test_default_with_dtype(self):
        w = Wrapper(dtype=np.int16)
        assert w.get() == 0
        assert w.dtype == np.int16

    def test_from_python_numbers(self):
        assert Wrapper(5).get() == 5
        assert Wrapper(5).dtype == np.int64
        assert Wrapper(2.5).dtype == np.float64
        assert Wrapper(True).dtype == np.bool_
        assert Wrapper(1 + 2j).dtype == np.complex128

    def test_from_numpy_scalar_keeps_dtype(self):
        w = Wrapper(np.float32(1.5))
        assert w.dtype == np.float32
        assert w.get() == np.float32(1.5)

    def test_explicit_dtype_converts_value(self):
        w = Wrapper(3.7, np.int32)
        assert w.get() == 3
        assert w.dtype == np.int32

    def test_from_raw(self):
        w = Wrapper.from_raw(4, np.uint8)
        assert w.get() == 4
        assert w.dtype == np.uint8

    def test_python_ints_beyond_int64(self):
        w = Wrapper(2**64 - 1, np.uint64)
        assert w.get() == 2**64 - 1
        assert w.dtype == np.uint64

        assert Wrapper(2**63).dtype == np.uint64
        assert Wrapper(2**70, np.float64).get() == float(2**70)

    def test_python_int_out_of_range_wraps(self):
        assert Wrapper(300, np.int8).get() == 44
        assert Wrapper(-1, np.uint8).get() == 255

    def test_python_int_too_large(self):
        with pytest.raises(UnsupportedOperationError):
            Wrapper(2**70)
        with pytest.raises(UnsupportedOperationError):
            Wrapper(10**400, np.float64)

    def test_type_parameter_is_only_a_hint(self):
        assert Wrapper[np.int32](5).dtype == np.int64
        assert Wrapper[np.int32](5, np.int32).dtype == np.int32

    def test_from_wrapper_is_rejected(self):
        with pytest.raises(UnsupportedOperationError):
            Wrapper(Wrapper(1))
        with pytest.raises(UnsupportedOperationError):
            Wrapper(Wrapper(1.0), np.float32)

    def test_non_numeric_is_rejected(self):
        with pytest.raises(UnsupportedOperationError):
            Wrapper("one")
        with pytest.raises(UnsupportedOperationError):
            Wrapper(dtype="U4")

    def test_rejection_is_a_type_error(self):
        with pytest.raises(TypeError):
            Wrapper(Wrapper(1))

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="tagnum"):
            with pytest.raises(UnsupportedOperationError):
                Wrapper("one")
        assert "not a numeric value" in caplog.text


class TestAccess:
    def test_get_returns_value(self):
        for v in (0, -12, 3.25, np.int8(-5), np.float32(0.5)):
            assert Wrapper(v).get() == v

    def test_set_overwrites(self):
        w = Wrapper(1)
        w.set(7)
        assert w.get() == 7
        assert w.value == 7

    def test_set_converts_to_own_dtype(self):
        w = Wrapper(1)
        w.set(2.9)
        assert w.get() == 2
        assert w.dtype == np.int64

    def test_set_large_python_int(self):
        w = Wrapper(np.uint64(0))
        w.set(2**63)
        assert w.get() == 2**63
        assert w.dtype == np.uint64

    def test_set_rejects_wrapper(self):
        w = Wrapper(1.0)
        with pytest.raises(UnsupportedOperationError):
            w.set(Wrapper(2.0))

    def test_copy_is_independent(self):
        w = Wrapper(4)
        for c in (w.copy(), copy.copy(w), copy.deepcopy(w)):
            c.set(9)
            assert w.get() == 4
            assert type(c) is Wrapper

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Wrapper(1))


class TestReinterpret:
    def test_truncates_toward_zero(self):
        assert Wrapper(3.7).reinterpret(np.int32).get() == 3
        assert Wrapper(-3.7).reinterpret(np.int32).get() == -3

    def test_result_dtype(self):
        w = Wrapper(np.float32(1.5)).reinterpret(np.float64)
        assert w.dtype == np.float64
        assert w.get() == 1.5

    def test_lossy_round_trip(self):
        w = Wrapper(3.7)
        back = w.reinterpret(np.int32).reinterpret(np.float64)
        assert back.get() == 3.0
        assert back != w
        assert w.get() == 3.7

    def test_integer_narrowing_wraps(self):
        assert Wrapper(np.int16(300)).reinterpret(np.int8).get() == 44

    def test_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tagnum"):
            Wrapper(1).reinterpret(np.float32)
        assert "Reinterpreting" in caplog.text


class TestComparison:
    def test_same_type_equality(self, seven, three):
        assert seven == Wrapper(np.int32(7))
        assert seven != three
        assert not seven == three

    def test_same_type_ordering(self, seven, three):
        assert three < seven
        assert seven > three
        assert three <= Wrapper(np.int32(3))
        assert seven >= three

    def test_cross_type(self):
        assert Wrapper(np.int32(3)) == Wrapper(3.0)
        assert Wrapper(np.int32(3)) < Wrapper(3.5)
        assert Wrapper(2) != Wrapper(np.float32(2.5))
        assert Wrapper(np.uint8(200)) > Wrapper(np.int8(-1))

    def test_bare_numbers(self):
        assert Wrapper(5) == 5
        assert 3 < Wrapper(5)
        assert Wrapper(5) >= 5

    def test_results_are_bool(self, seven, three):
        assert type(seven == three) is bool
        assert type(seven < three) is bool

    def test_complex_is_unordered(self):
        a = Wrapper(1 + 2j)
        assert a == Wrapper(1 + 2j)
        with pytest.raises(UnsupportedOperationError):
            _ = a < Wrapper(2 + 0j)
        with pytest.raises(UnsupportedOperationError):
            _ = Wrapper(1.0) >= a

    def test_non_numeric_operand(self):
        assert not Wrapper(1) == "1"
        assert Wrapper(1) != "1"


class TestSameTypeArithmetic:
    def test_operators(self, seven, three):
        assert (seven + three).get() == 10
        assert (seven - three).get() == 4
        assert (seven * three).get() == 21
        assert (seven % three).get() == 1
        assert (seven // three).get() == 2

    def test_keeps_dtype(self, seven, three):
        for result in (seven + three, seven - three, seven * three, seven % three):
            assert result.dtype == np.int32
            assert type(result) is Wrapper

    def test_true_division(self, seven, three):
        result = seven / three
        assert result.dtype == np.float64
        assert result.get() == approx(7 / 3)

    def test_floats(self):
        assert (Wrapper(1.5) + Wrapper(2.25)).get() == 3.75
        assert (Wrapper(np.float32(3.0)) / Wrapper(np.float32(2.0))).dtype == np.float32

    def test_modulo_requires_integers(self):
        with pytest.raises(UnsupportedOperationError):
            _ = Wrapper(5.0) % Wrapper(2.0)
        with pytest.raises(UnsupportedOperationError):
            _ = Wrapper(5.0) // Wrapper(2.0)

    def test_bool_has_no_arithmetic(self):
        with pytest.raises(UnsupportedOperationError):
            _ = Wrapper(True) + Wrapper(True)

    def test_complex(self):
        result = Wrapper(1 + 2j) * Wrapper(2 + 0j)
        assert result.get() == 2 + 4j
        assert result.dtype == np.complex128

    @pytest.mark.filterwarnings("ignore::RuntimeWarning")
    def test_overflow_wraps(self):
        result = Wrapper(np.int8(127)) + Wrapper(np.int8(1))
        assert result.get() == -128
        assert result.dtype == np.int8

    @pytest.mark.filterwarnings("ignore::RuntimeWarning")
    def test_float_division_by_zero(self):
        assert np.isinf((Wrapper(1.0) / Wrapper(0.0)).get())

    @pytest.mark.filterwarnings("ignore::RuntimeWarning")
    def test_integer_division_by_zero(self, seven):
        zero = Wrapper(np.int32(0))
        remainder = seven % zero
        quotient = seven // zero
        assert remainder.get() == 0
        assert quotient.get() == 0
        assert remainder.dtype == np.int32
        assert quotient.dtype == np.int32


class TestCrossTypeArithmetic:
    def test_int_and_float_promote(self):
        result = Wrapper(np.int32(2)) + Wrapper(np.float64(0.5))
        assert result.dtype == np.float64
        assert result.get() == np.float64(2) + 0.5

    def test_operands_are_promoted_first(self):
        result = Wrapper(np.int8(100)) + Wrapper(np.int16(100))
        assert result.dtype == np.int16
        assert result.get() == 200

    def test_all_operators(self):
        a = Wrapper(np.int16(9))
        b = Wrapper(np.float32(2.0))
        assert (a - b).get() == 7.0
        assert (a * b).get() == 18.0
        assert (a / b).get() == 4.5
        assert (a + b).dtype == np.float32

    def test_modulo(self):
        result = Wrapper(np.int8(7)) % Wrapper(np.int32(4))
        assert result.get() == 3
        assert result.dtype == np.int32

    def test_modulo_requires_both_integral(self):
        with pytest.raises(UnsupportedOperationError):
            _ = Wrapper(np.int32(7)) % Wrapper(2.0)

    def test_bare_numbers_take_wrapper_dtype(self):
        w = Wrapper(np.int32(4))
        assert (w + 1).dtype == np.int32
        assert (w + 1).get() == 5
        assert (10 - w).get() == 6
        assert (10 - w).dtype == np.int32
        assert (w * 2.9).get() == 8

    def test_non_numeric_operand(self):
        with pytest.raises(TypeError):
            _ = Wrapper(1) + "1"

    def test_large_python_int_operand(self):
        result = Wrapper(1.0) + 2**70
        assert result.dtype == np.float64
        assert result.get() == 1.0 + float(2**70)
        assert (2**64 - 1) - Wrapper(np.uint64(1)) == Wrapper(np.uint64(2**64 - 2))


class TestDisplay:
    def test_str_delegates(self):
        assert str(Wrapper(42)) == "42"
        assert str(Wrapper(3.5)) == str(np.float64(3.5))
        assert str(Wrapper(np.float32(0.25))) == str(np.float32(0.25))

    def test_format_delegates(self):
        assert format(Wrapper(3.14159), ".2f") == "3.14"
        assert f"{Wrapper(7):>3}" == "  7"

    def test_repr(self):
        assert repr(Wrapper(np.int32(5))) == "Wrapper(5, dtype=int32)"
