import numpy as np

from tagnum import promotion


def _map_value(value, fn):
    # Structured values are scaled field by field, each staying in its own dtype.
    if not promotion.is_structured(value.dtype):
        return promotion.cast(fn(value), value.dtype)
    result = np.zeros((), dtype=value.dtype)
    for name in value.dtype.names:
        result[name] = promotion.cast(fn(value[name]), value.dtype[name])
    return result[()]


def scaled(factor: float = 1.0, divisor: float = 1.0):
    """Creates a named accessor/mutator pair over a wrapper's stored value.

    The getter returns the stored value as ``value * factor / divisor``, the setter
    stores ``value * divisor / factor``. Both convert back to the wrapper's dtype,
    so the stored value always stays in the base scale chosen by the extension.

    Usage::

        class Velocity(Wrapper):
            __slots__ = ()
            mph, set_mph = scaled()
            kph, set_kph = scaled(1.60934)

    :param factor: Multiplier from the base scale to the named scale.
    :type factor: float
    :param divisor: Divisor from the base scale to the named scale.
    :type divisor: float
    :return: The getter and setter functions, to be bound as methods.
    :rtype: tuple
    """

    def getter(self):
        return _map_value(self.get(), lambda v: v * factor / divisor)

    def setter(self, value) -> None:
        value = promotion.convert(value, self.dtype)
        self.set(_map_value(value, lambda v: v * divisor / factor))

    return getter, setter
