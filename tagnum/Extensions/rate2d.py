import numpy as np

from tagnum import promotion
from tagnum.accessor import scaled
from tagnum.core import Wrapper

# Two float32 components, laid out like the Vector2 structs of game libraries such as raylib.
VECTOR2 = np.dtype([("x", np.float32), ("y", np.float32)])

FRAMES_PER_SECOND = 60


def vector2(x: float, y: float):
    """Builds a :data:`VECTOR2` value.

    :param x: The x component.
    :type x: float
    :param y: The y component.
    :type y: float
    :return: The compound value.
    :rtype: :class:`numpy.void`
    """
    return np.array((x, y), dtype=VECTOR2)[()]


class Rate2D(Wrapper):
    """
    A 2D rate stored in pixels/second, readable and writable in pixels/frame.

    The stored value is compound, so arithmetic and ordering are unavailable and
    raise :class:`~tagnum.errors.UnsupportedOperationError`. Equality still works
    against another value of the same dtype. A plain bare number is never equal
    to a rate, and arithmetic with one raises ``TypeError``.
    """

    __slots__ = ()

    DEFAULT_DTYPE = VECTOR2

    pxps, set_pxps = scaled()
    pxpf, set_pxpf = scaled(divisor=FRAMES_PER_SECOND)

    @classmethod
    def accepts(cls, dtype: np.dtype) -> bool:
        return promotion.is_structured(dtype) and {"x", "y"} <= set(dtype.names)
