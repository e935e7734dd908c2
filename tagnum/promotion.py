from functools import lru_cache
import operator

import numpy as np

from tagnum.errors import UnsupportedOperationError

# Bare Python numbers adopt these dtypes. bool must precede int.
DEFAULT_DTYPES = (
    (bool, np.dtype(np.bool_)),
    (int, np.dtype(np.int64)),
    (float, np.dtype(np.float64)),
    (complex, np.dtype(np.complex128)),
)

RAW_TYPES = (bool, int, float, complex, np.generic)

NUMERIC_KINDS = "biufc"
ORDERED_KINDS = "biuf"
ARITHMETIC_KINDS = "iufc"
INTEGRAL_KINDS = "iu"

UFUNCS = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.true_divide,
    "//": np.floor_divide,
    "%": np.remainder,
}

INTEGRAL_OPERATORS = ("//", "%")

COMPARISONS = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}

EQUALITY_OPERATORS = ("==", "!=")


def is_structured(dtype: np.dtype) -> bool:
    return dtype.names is not None


def as_dtype(dtype) -> np.dtype:
    """Normalizes a dtype-like object and rejects types that cannot be wrapped.

    :param dtype: Anything :func:`numpy.dtype` understands, e.g. ``np.int32`` or ``"float64"``.
    :return: The normalized dtype.
    :rtype: :class:`numpy.dtype`
    :raises UnsupportedOperationError: If the dtype is neither numeric nor structured.
    """
    dtype = np.dtype(dtype)
    if dtype.kind in NUMERIC_KINDS or is_structured(dtype):
        return dtype
    raise UnsupportedOperationError(f"Cannot wrap values of dtype {dtype}")


def infer_dtype(value) -> np.dtype:
    """Returns the dtype a bare value is wrapped as.

    numpy scalars keep their own dtype, Python numbers use :data:`DEFAULT_DTYPES`.
    Python ints beyond int64 that fit in uint64 are wrapped as uint64.

    :param value: The bare value.
    :return: The dtype of the value.
    :rtype: :class:`numpy.dtype`
    :raises UnsupportedOperationError: If the value is not a number, or is an
        int no numpy integer dtype can hold.
    """
    if isinstance(value, np.generic):
        return as_dtype(value.dtype)
    if isinstance(value, int) and not isinstance(value, bool):
        for dtype in (np.dtype(np.int64), np.dtype(np.uint64)):
            if fits(value, dtype):
                return dtype
        raise UnsupportedOperationError(f"{value!r} does not fit any integer dtype")
    for pytype, dtype in DEFAULT_DTYPES:
        if isinstance(value, pytype):
            return dtype
    raise UnsupportedOperationError(f"{value!r} is not a numeric value")


def is_raw(value) -> bool:
    return isinstance(value, RAW_TYPES)


def accepts_raw(value, dtype: np.dtype) -> bool:
    """Whether a bare value can stand in for a wrapper of ``dtype``.

    Compound values only pair with compound dtypes, plain numbers with plain ones.
    """
    return is_raw(value) and isinstance(value, np.void) == is_structured(dtype)


def fits(value: int, dtype: np.dtype) -> bool:
    info = np.iinfo(dtype)
    return int(info.min) <= value <= int(info.max)


def zero(dtype: np.dtype):
    return np.zeros((), dtype=dtype)[()]


def cast(value, dtype: np.dtype):
    """Converts a numpy scalar to ``dtype`` the way a C cast would.

    Float to integer truncates toward zero, out of range integers wrap and
    narrowing floats round. Nothing is reported.
    """
    return np.asarray(value).astype(dtype, casting="unsafe")[()]


def convert(value, dtype: np.dtype):
    """Converts a bare value into a scalar of ``dtype``.

    Structured dtypes also accept a tuple holding one entry per field.
    """
    if isinstance(value, tuple):
        if not is_structured(dtype):
            raise UnsupportedOperationError(f"Cannot store {value!r} as {dtype}")
        return np.array(value, dtype=dtype)[()]
    if isinstance(value, int) and not isinstance(value, bool) and not is_structured(dtype):
        return _convert_int(value, dtype)
    source = infer_dtype(value)
    if not supports_cast(source, dtype):
        raise UnsupportedOperationError(f"Cannot store {value!r} as {dtype}")
    return cast(np.asarray(value, dtype=source), dtype)


def _convert_int(value: int, dtype: np.dtype):
    # Python ints are unbounded, so they go straight to the target dtype.
    if is_integral(dtype) and not fits(value, dtype):
        # Out of range: keep the low bits, as a C cast does.
        unsigned = np.dtype(f"u{dtype.itemsize}")
        return cast(np.array(value & ((1 << 8 * dtype.itemsize) - 1), dtype=unsigned), dtype)
    try:
        return np.array(value, dtype=dtype)[()]
    except OverflowError:
        raise UnsupportedOperationError(f"Cannot store {value!r} as {dtype}")


def supports_cast(a: np.dtype, b: np.dtype) -> bool:
    if is_structured(a) or is_structured(b):
        return is_structured(a) and is_structured(b)
    return True


def supports_equality(a: np.dtype, b: np.dtype) -> bool:
    if is_structured(a) or is_structured(b):
        return a == b
    return a.kind in NUMERIC_KINDS and b.kind in NUMERIC_KINDS


def supports_ordering(a: np.dtype, b: np.dtype) -> bool:
    return a.kind in ORDERED_KINDS and b.kind in ORDERED_KINDS


def supports_arithmetic(a: np.dtype, b: np.dtype) -> bool:
    return a.kind in ARITHMETIC_KINDS and b.kind in ARITHMETIC_KINDS


def is_integral(dtype: np.dtype) -> bool:
    return dtype.kind in INTEGRAL_KINDS


@lru_cache(maxsize=None)
def common_dtype(a: np.dtype, b: np.dtype) -> np.dtype:
    """The dtype both operands of a binary operator are converted to."""
    return np.result_type(a, b)


@lru_cache(maxsize=None)
def result_dtype(symbol: str, a: np.dtype, b: np.dtype) -> np.dtype:
    """Computes the dtype produced by ``a <symbol> b`` without touching any values.

    The operator's ufunc is run over empty arrays of the common dtype, so the
    answer is exactly numpy's own type resolution for the operator (``int32 + float64``
    is ``float64``, ``int16 / int16`` is ``float64``).

    :param symbol: One of the keys of :data:`UFUNCS`.
    :type symbol: str
    :param a: Left operand dtype.
    :type a: :class:`numpy.dtype`
    :param b: Right operand dtype.
    :type b: :class:`numpy.dtype`
    :return: The result dtype.
    :rtype: :class:`numpy.dtype`
    """
    common = common_dtype(a, b)
    empty = np.empty(0, dtype=common)
    return UFUNCS[symbol](empty, empty).dtype


def check_arithmetic(symbol: str, a: np.dtype, b: np.dtype) -> None:
    if not supports_arithmetic(a, b):
        raise UnsupportedOperationError(f"Operator {symbol} is not supported between {a} and {b}")
    if symbol in INTEGRAL_OPERATORS and not (is_integral(a) and is_integral(b)):
        raise UnsupportedOperationError(f"Operator {symbol} requires integral operands, got {a} and {b}")


def check_comparison(symbol: str, a: np.dtype, b: np.dtype) -> None:
    supported = supports_equality if symbol in EQUALITY_OPERATORS else supports_ordering
    if not supported(a, b):
        raise UnsupportedOperationError(f"Operator {symbol} is not supported between {a} and {b}")


def apply(symbol: str, lhs, rhs):
    """Applies an arithmetic operator to two numpy scalars after promoting both."""
    check_arithmetic(symbol, lhs.dtype, rhs.dtype)
    common = common_dtype(lhs.dtype, rhs.dtype)
    value = UFUNCS[symbol](cast(lhs, common), cast(rhs, common))
    return cast(value, result_dtype(symbol, lhs.dtype, rhs.dtype))


def compare(symbol: str, lhs, rhs) -> bool:
    """Compares two numpy scalars directly, under numpy's mixed comparison rules."""
    check_comparison(symbol, lhs.dtype, rhs.dtype)
    return bool(COMPARISONS[symbol](np.asarray(lhs), np.asarray(rhs)))
