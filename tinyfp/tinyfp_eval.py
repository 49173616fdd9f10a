#!/usr/bin/env python3
import sys, argparse, logging
from . import libm
from .fpu import f64

logger = logging.getLogger('tinyfp')

arity = {'nextafter': (2,), 'pow': (2,), 'signbit': (1,), 'frexp': (1,), 'ldexp': (2,), 'copysign': (2,), 'fabs': (1,), 'abs': (1,), 'hypot': (2, 3)}

def parse_double(s): return f64(int(s, 16)).float if s.lower().startswith('0x') else float(s)  # 0x... is a raw bit pattern

def evaluate(name, args):  # returns the printable lines for one call
    result = getattr(libm, name)(*args)
    if name == 'frexp': return [f'mantissa {f64(result[0])}', f'exponent {result[1]}']
    if name == 'signbit': return [str(result)]
    return [str(f64(result))]

def main(argv=None):
    parser = argparse.ArgumentParser(prog='tinyfp-eval', description='Evaluates one IEEE-754 math function and dumps the bits of the result.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log the decoded arguments')
    parser.add_argument('func', choices=sorted(arity))
    parser.add_argument('args', nargs='+', help='doubles (python float syntax: 1.5, -0, nan, ...) or raw bit patterns in hex (0x...). Put -- before a leading -inf.')
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format='%(name)s: %(message)s')
    if len(args.args) not in arity[args.func]: parser.error(f'{args.func} takes {" or ".join(map(str, arity[args.func]))} arguments, got {len(args.args)}')
    try: values = [int(a) if (args.func, i) == ('ldexp', 1) else parse_double(a) for i, a in enumerate(args.args)]
    except ValueError as e: parser.error(f'bad number: {e}')
    for v in values: logger.debug(f'arg {f64(v) if isinstance(v, float) else v}')
    for line in evaluate(args.func, values): print(line)
    return 0

if __name__ == '__main__': sys.exit(main())
