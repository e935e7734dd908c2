import logging

import numpy as np

from tagnum.tagnum import Wrapper, Velocity, Rate2D, vector2
from tagnum.utils.logging import Debug, SetLoggingLevel

logging.basicConfig()
SetLoggingLevel(logging.DEBUG)

count = Wrapper(np.int32(3))
ratio = Wrapper(0.75)
Debug(f"Count: {count}, Ratio: {ratio}")
Debug(f"Count * Ratio: {count * ratio!r}")
Debug(f"Count as float32: {count.reinterpret(np.float32)!r}")

speed = Velocity()
speed.set_mph(60.0)
Debug(f"Speed: {speed.mph()} mph, {speed.kph():.2f} kph, {speed.mps():.2f} m/s")

rate = Rate2D(vector2(240.0, -120.0))
Debug(f"Rate: {rate.pxps()} px/s, {rate.pxpf()} px/frame")
