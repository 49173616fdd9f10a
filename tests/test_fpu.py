import math, struct

from hypothesis import given
from hypothesis import strategies as st

from tinyfp import f64, FMAX, FMIN_SUBNORMAL, EPSILON


def test_constants():
    assert FMAX == 1.7976931348623157e308
    assert FMIN_SUBNORMAL == 5e-324
    assert EPSILON == 2.0 ** -52
    assert f64(FMAX).raw == f64.FMAX == 0x7FEF_FFFF_FFFF_FFFF
    assert f64.EXP_BIAS == 1023
    assert math.isnan(f64(f64.EXP_MASK | 1).float)


def test_signed_zero():
    pz, nz = f64(0.0), f64(-0.0)
    assert pz.is_zero and nz.is_zero
    assert not pz.is_neg and nz.is_neg
    assert nz.raw == f64.SIGN_BIT
    assert pz != nz


def test_classification():
    assert f64(math.inf).is_inf and not f64(math.inf).is_neg
    assert f64(-math.inf).is_inf and f64(-math.inf).is_neg
    assert f64(math.nan).is_nan and not f64(math.nan).is_inf
    assert f64(FMIN_SUBNORMAL).is_subnormal and f64(FMIN_SUBNORMAL).e == -1074
    assert f64(1.0).is_normal and f64(1.0).e == 0 and f64(1.0).s == f64.SIG_ONE
    assert f64(2.2250738585072014e-308).is_normal  # smallest normal
    assert f64(2.225073858507201e-308).is_subnormal  # largest subnormal


def test_raw_input():
    assert f64(1).float == FMIN_SUBNORMAL
    assert f64(0x3FF0_0000_0000_0000).float == 1.0
    assert f64(-1).raw == 0xFFFF_FFFF_FFFF_FFFF  # ints are zero-extended to 64 bits
    assert f64(-1).is_nan


def test_repr():
    assert repr(f64(-0.0)) == '- s: 0 e: -1023 raw: 8000000000000000 value: -0.0'
    assert repr(f64(1.5)).startswith('+ s: 11' + '0'*51 + ' e: 0 ')


@given(st.floats(allow_nan=False, width=64))
def test_raw_matches_struct(x: float):
    f = f64(x)
    assert f.raw == struct.unpack('<Q', struct.pack('<d', x))[0]
    assert f == f64(f.raw)
    assert f.is_neg == (math.copysign(1.0, x) < 0)


@given(st.floats(allow_nan=False, allow_infinity=False, width=64).filter(lambda x: x != 0))
def test_significand_and_exponent(x: float):
    f = f64(x)
    assert f.s * 2.0 ** (f.e - f.s.bit_length() + 1) == math.fabs(x)
    assert f.s.bit_length() == f64.TLEN+1 or f.is_subnormal
