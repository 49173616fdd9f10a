# C17/C++17 <math.h> functions with IEEE-754 (IEC 60559) semantics on python floats.
# References:
#  C17: http://www.open-std.org/jtc1/sc22/wg14/www/abq/c17_updated_proposed_fdis.pdf (7.12, annex F)
#  C++17: http://www.open-std.org/jtc1/sc22/wg21/docs/papers/2017/n4659.pdf (29.9)
#  https://en.cppreference.com/w/c/numeric/math
# Keep in mind that 0.0 == -0.0. Signs of zeros are told apart with f64(x).is_neg.
import math
from .fpu import f64, FMAX, FMIN_SUBNORMAL, EPSILON

__all__ = ['nextafter', 'pow', 'signbit', 'frexp', 'ldexp', 'copysign', 'fabs', 'abs', 'hypot']

def _is_odd_integer(num): return math.isfinite(num) and math.fabs(math.fmod(num, 2.0)) == 1.0

def nextafter(num, toward):
    if math.isnan(num) or math.isnan(toward): return math.nan
    if num == toward: return toward  # also picks the sign of a zero toward
    if num == 0: return math.copysign(FMIN_SUBNORMAL, toward)
    if math.isinf(num): return math.copysign(FMAX, num)
    if num == -FMIN_SUBNORMAL and toward > num: return -0.0
    if math.fabs(num) < 2.0 ** -1020: return f64(f64(num).raw + (1 if (num < toward) != (num < 0) else -1)).float  # steps would round to the subnormal grid
    multiplier = math.copysign(0.5, num) * (1 if num < toward else -1)
    while True:  # grow the step until it rounds to the neighbour
        result = num + num * (EPSILON * multiplier)
        if result != num: return result
        multiplier *= 2

def pow(base, exponent):  # total: C17 F.10.4.4 results instead of ValueError/OverflowError/complex
    if base == 1 or (base == -1 and math.isinf(exponent)): return 1.0  # even for a nan exponent
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0: return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf  # pole
        return math.nan  # negative base, non-integral exponent
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exponent) else math.inf

def signbit(num):  # NaNs report False, whatever their raw sign bit
    f = f64(float(num))
    return f.is_neg and not f.is_nan

def frexp(num):
    """Returns (mantissa, exponent) with num == (2*mantissa) * 2**(exponent-1) and 0.5 <= abs(mantissa) < 1.0.

    Zeros, infinities and NaN come back as (num, 0).
    """
    if num == 0 or not math.isfinite(num): return num, 0
    abs_num = math.fabs(num)
    exp = max(-1023, math.floor(math.log2(abs_num)) + 1)  # clamped: 2.0**1024 would overflow for subnormals
    x = abs_num * 2.0 ** -exp
    # log2 is not guaranteed to be correctly rounded, these loops fix up off-by-one estimates.
    # the first one also finishes scaling subnormals.
    while x < 0.5: x *= 2; exp -= 1
    while x >= 1: x *= 0.5; exp += 1
    return (-x if num < 0 else x), exp

def ldexp(factor, exponent):
    if factor == 0 or not math.isfinite(factor) or exponent == 0: return factor
    mantissa, e = frexp(factor)
    exponent += e  # result is mantissa * 2**exponent, 0.5 <= abs(mantissa) < 1
    if exponent < -1021: return mantissa * 2.0 ** -1021 * 2.0 ** max(-1074, exponent + 1021)  # subnormal or zero: round once, in the last multiply
    exponent = min(exponent, 1026)  # inf from here on, and 2**half stays finite
    half = math.trunc(exponent * 0.5)
    half_power = 2.0 ** half
    return mantissa * 2.0 ** (exponent - 2*half) * half_power * half_power  # first power is 0.5, 1 or 2

def copysign(num, sign):  # a NaN sign source counts as positive
    return -fabs(num) if signbit(sign) else fabs(num)

fabs = math.fabs
abs = fabs  # C's integer abs; ints and floats are not told apart here

def hypot(x, y, z=None):
    # the IEC 60559 cases (F.10.4.3) only bind the 2-argument form: inf wins over nan, hypot(x, +-0) is exactly fabs(x)
    if z is not None: return math.hypot(x, y, z)
    if math.isinf(x) or math.isinf(y): return math.inf
    if x == 0 or y == 0: return fabs(y if x == 0 else x)
    return math.hypot(x, y)
