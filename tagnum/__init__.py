"""
tagnum: tagged numeric values.

A :class:`~tagnum.core.Wrapper` holds one numpy scalar and supplies arithmetic,
comparison and explicit reinterpretation over it. Classes built on top of it
give the value a meaning through their name and their accessor pairs.

Usage:
    from tagnum.tagnum import Wrapper, Velocity

    count = Wrapper(np.int32(3))
    ratio = Wrapper(0.5)
    (count * ratio).dtype  # float64

    speed = Velocity(10.0)
    speed.kph()
"""

__version__ = "0.1.0"
