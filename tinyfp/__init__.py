from .fpu import f64, zext, FMAX, FMIN_SUBNORMAL, EPSILON
from .libm import *
