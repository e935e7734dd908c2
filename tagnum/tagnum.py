# Import the public surface for easy access
from tagnum.core import Wrapper
from tagnum.accessor import scaled
from tagnum.errors import UnsupportedOperationError
from tagnum.promotion import common_dtype, result_dtype
from tagnum.Extensions.velocity import Velocity, KPH_PER_MPH, MPH_PER_MPS
from tagnum.Extensions.rate2d import Rate2D, VECTOR2, FRAMES_PER_SECOND, vector2
