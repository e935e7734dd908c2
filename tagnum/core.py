from typing import Generic, TypeVar

import numpy as np

from tagnum import promotion
from tagnum.errors import UnsupportedOperationError
from tagnum.utils.logging import Debug

T = TypeVar("T", bound=np.generic)


class Wrapper(Generic[T]):
    """
    A container for a single numeric value of type ``T``.

    The wrapper attaches no meaning to the value. Meaning comes from the name of
    a class built on top of it, which adds accessor pairs reading the stored value
    under different scales (see :func:`tagnum.accessor.scaled`).

    A bare number can be used wherever a wrapper is expected: it is stored as, or
    combined as, the wrapper's own dtype. A wrapper of one dtype is never accepted
    in place of a raw value; moving between dtypes needs :meth:`reinterpret`.

    ``T`` only serves type hints. The runtime type is the ``dtype`` argument, or the
    dtype of ``value``, so ``Wrapper[np.int32](5)`` still holds an int64. Write
    ``Wrapper(5, np.int32)`` to choose the dtype.

    :param value: The value to store. Defaults to the zero of ``dtype``.
    :param dtype: The wrapped numpy dtype. Inferred from ``value`` when omitted.
    :raises UnsupportedOperationError: If ``value`` is a wrapper or not a number,
        or if this class does not accept ``dtype``.
    """

    __slots__ = ("_value",)

    DEFAULT_DTYPE = np.dtype(np.float64)

    def __init__(self, value=None, dtype=None) -> None:
        if isinstance(value, Wrapper):
            raise UnsupportedOperationError(
                f"Cannot construct {type(self).__name__} from {value!r}, use reinterpret()"
            )
        if dtype is None:
            if value is None or isinstance(value, tuple):
                dtype = self.DEFAULT_DTYPE
            else:
                dtype = promotion.infer_dtype(value)
        dtype = self._check_dtype(dtype)
        self._value = promotion.zero(dtype) if value is None else promotion.convert(value, dtype)

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        slots = cls.__dict__.get("__slots__")
        if slots is None or len(slots) != 0:
            raise UnsupportedOperationError(
                f"{cls.__name__} must declare __slots__ = (), wrappers store a single value"
            )

    @classmethod
    def accepts(cls, dtype: np.dtype) -> bool:
        """Returns whether this class can wrap values of ``dtype``. Extensions override this to narrow ``T``."""
        return True

    @classmethod
    def from_raw(cls, value, dtype=None) -> "Wrapper":
        """Wraps a bare value. Equivalent to calling the class."""
        return cls(value, dtype)

    @classmethod
    def _check_dtype(cls, dtype) -> np.dtype:
        dtype = promotion.as_dtype(dtype)
        if not cls.accepts(dtype):
            raise UnsupportedOperationError(f"{cls.__name__} does not accept dtype {dtype}")
        return dtype

    @classmethod
    def _wrap(cls, value) -> "Wrapper":
        result = cls.__new__(cls)
        result._value = value
        return result

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    @property
    def value(self) -> T:
        return self._value

    def get(self) -> T:
        """Returns the stored value.

        :return: The stored value.
        :rtype: T
        """
        return self._value

    def set(self, value) -> None:
        """Overwrites the stored value, converting it to this wrapper's dtype.

        :param value: The new bare value.
        :raises UnsupportedOperationError: If ``value`` is a wrapper.
        """
        if isinstance(value, Wrapper):
            raise UnsupportedOperationError(
                f"Cannot set {type(self).__name__} from {value!r}, use get() or reinterpret()"
            )
        self._value = promotion.convert(value, self.dtype)

    def reinterpret(self, dtype) -> "Wrapper":
        """Returns a new wrapper holding the value cast to ``dtype``.

        The cast may truncate or round silently, e.g. ``Wrapper(3.7).reinterpret(np.int32)``
        holds ``3``. The result keeps this wrapper's class when that class accepts
        ``dtype``, and is a plain :class:`Wrapper` otherwise.

        :param dtype: The target dtype.
        :return: The reinterpreted wrapper.
        :rtype: :class:`Wrapper`
        """
        dtype = promotion.as_dtype(dtype)
        if not promotion.supports_cast(self.dtype, dtype):
            raise UnsupportedOperationError(f"Cannot reinterpret {self.dtype} as {dtype}")
        Debug(f"Reinterpreting {self!r} as {dtype}")
        cls = type(self) if type(self).accepts(dtype) else Wrapper
        return cls._wrap(promotion.cast(self._value, dtype))

    def copy(self) -> "Wrapper":
        return type(self)._wrap(self._value)

    def __copy__(self) -> "Wrapper":
        return self.copy()

    def __deepcopy__(self, memo) -> "Wrapper":
        return self.copy()

    def _coerce(self, other):
        # Bare numbers take on this wrapper's class and dtype.
        # Plain numbers never pair with compound values, nor compound with plain.
        if isinstance(other, Wrapper):
            return other
        if promotion.accepts_raw(other, self.dtype):
            return type(self)._wrap(promotion.convert(other, self.dtype))
        return NotImplemented

    def _result_class(self, other: "Wrapper", dtype: np.dtype):
        cls = type(self) if type(other) is type(self) else Wrapper
        return cls if cls.accepts(dtype) else Wrapper

    def _arithmetic(self, other, symbol: str, reflected: bool = False):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        lhs, rhs = (other, self) if reflected else (self, other)
        value = promotion.apply(symbol, lhs._value, rhs._value)
        return lhs._result_class(rhs, value.dtype)._wrap(value)

    def _compare(self, other, symbol: str):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return promotion.compare(symbol, self._value, other._value)

    # --- Comparison ---

    def __eq__(self, other):
        return self._compare(other, "==")

    def __ne__(self, other):
        return self._compare(other, "!=")

    def __lt__(self, other):
        return self._compare(other, "<")

    def __gt__(self, other):
        return self._compare(other, ">")

    def __le__(self, other):
        return self._compare(other, "<=")

    def __ge__(self, other):
        return self._compare(other, ">=")

    __hash__ = None

    # --- Arithmetic ---

    def __add__(self, other):
        return self._arithmetic(other, "+")

    def __radd__(self, other):
        return self._arithmetic(other, "+", reflected=True)

    def __sub__(self, other):
        return self._arithmetic(other, "-")

    def __rsub__(self, other):
        return self._arithmetic(other, "-", reflected=True)

    def __mul__(self, other):
        return self._arithmetic(other, "*")

    def __rmul__(self, other):
        return self._arithmetic(other, "*", reflected=True)

    def __truediv__(self, other):
        return self._arithmetic(other, "/")

    def __rtruediv__(self, other):
        return self._arithmetic(other, "/", reflected=True)

    def __floordiv__(self, other):
        return self._arithmetic(other, "//")

    def __rfloordiv__(self, other):
        return self._arithmetic(other, "//", reflected=True)

    def __mod__(self, other):
        return self._arithmetic(other, "%")

    def __rmod__(self, other):
        return self._arithmetic(other, "%", reflected=True)

    # --- Display ---

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value}, dtype={self.dtype})"
