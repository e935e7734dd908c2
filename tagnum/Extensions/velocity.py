import numpy as np

from tagnum.accessor import scaled
from tagnum.core import Wrapper

KPH_PER_MPH = 1.60934
MPH_PER_MPS = 2.2369362921


class Velocity(Wrapper):
    """
    A velocity stored in miles/hr, readable and writable in kilometers/hr and meters/sec.

    Example::

        v = Velocity()
        v.set_mph(10.0)
        v.kph()  # 16.0934
    """

    __slots__ = ()

    mph, set_mph = scaled()
    kph, set_kph = scaled(KPH_PER_MPH)
    mps, set_mps = scaled(divisor=MPH_PER_MPS)

    @classmethod
    def accepts(cls, dtype: np.dtype) -> bool:
        return dtype.kind in "iuf"
