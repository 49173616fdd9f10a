import struct, sys
def zext(length, word): return word&((1<<length)-1)

class f64:  # bit-level view of an IEEE-754 binary64. accepts a float or a raw 64-bit pattern (int).
    FLEN      = 64
    TLEN      = 52  # number of trailing significand bits
    SIGN_BIT  = 1 << FLEN-1
    ABS_MASK  = SIGN_BIT-1
    SIG_ONE   = 1 << TLEN
    TSIG_MASK = SIG_ONE-1
    EXP_MASK  = ABS_MASK ^ TSIG_MASK
    EXP_BIAS  = (1<<FLEN-TLEN-2)-1
    FMAX      = EXP_MASK-1  # largest finite magnitude, raw
    def __init__(self, float_or_raw):
        self.raw = zext(64, float_or_raw) if isinstance(float_or_raw, int) else struct.unpack('<Q', struct.pack('<d', float_or_raw))[0]
        self.float = struct.unpack('<d', struct.pack('<Q', self.raw))[0]
        self.is_neg = (self.raw&self.SIGN_BIT) != 0
        self.is_zero = (self.raw&self.ABS_MASK) == 0
        self.is_inf = self.raw&self.ABS_MASK == self.EXP_MASK
        self.is_nan = self.raw&self.ABS_MASK > self.EXP_MASK
        self.e = ((self.raw&self.EXP_MASK)>>self.TLEN) - self.EXP_BIAS
        self.is_subnormal = (self.e==-self.EXP_BIAS) and not self.is_zero
        self.is_normal = not (self.is_subnormal or self.is_inf or self.is_nan or self.is_zero)
        self.s = self.raw&self.TSIG_MASK
        if self.is_subnormal: self.e -= self.TLEN-self.s.bit_length()  # reduce exp by number of leading zeros
        elif self.is_normal: self.s |= self.SIG_ONE  # + implicit 1.

    def __eq__(self, other): return isinstance(other, f64) and self.raw == other.raw  # bitwise, so -0 != +0 and nan == nan
    def __repr__(self) -> str: return ('- ' if self.is_neg else '+ ') + f's: {self.s:b} e: {self.e} raw: {self.raw:016x} value: {self.float!r}'

FMAX           = f64(f64.FMAX).float  # 1.7976931348623157e+308
FMIN_SUBNORMAL = f64(1).float         # 5e-324, the ulp next to zero
EPSILON        = f64((f64.EXP_BIAS-f64.TLEN) << f64.TLEN).float  # 2**-52, ulp of 1.0

if __name__ == "__main__":
    for a in sys.argv[1:]: print(f64(int(a, 16) if a.lower().startswith('0x') else float(a)))
