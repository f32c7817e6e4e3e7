"""
Print the Halton sequence in BASE, starting after SKIP elements.

Usage: print_sequence.py [BASE] [SKIP] [--params NAME]
"""
import argparse
import sys
import params
from halton import GenericSequence

USAGE = 64
IOERR = 74
SIGPIPE = 141

class UsageError(Exception):
    pass

class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)

def parse_args(argv):
    parser = ArgumentParser(prog="print_sequence.py")
    parser.add_argument("base", nargs="?", default="2")
    parser.add_argument("skip", nargs="?", default="0")
    parser.add_argument("--params", type=str, default="default", choices=params.presets)
    args = parser.parse_args(argv)
    try:
        args.base = int(args.base)
    except ValueError:
        raise UsageError("Bad value for BASE")
    if args.base < 2:
        raise UsageError("Bad value for BASE")
    try:
        args.skip = int(args.skip)
    except ValueError:
        raise UsageError("Bad value for SKIP")
    if args.skip < 0:
        raise UsageError("Bad value for SKIP")
    return args

def print_sequence(seq, out):
    for value in seq:
        out.write(repr(float(value)))
        out.write("\n")

def main(argv=None, out=None):
    out = out if out is not None else sys.stdout
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
        seq = GenericSequence(args.base, params.get(args.params), start=args.skip)
    except (UsageError, ValueError) as e:
        print(e, file=sys.stderr)
        print("Usage: print_sequence.py [BASE] [SKIP] [--params NAME]", file=sys.stderr)
        return USAGE

    try:
        print_sequence(seq, out)
        out.flush()
    except BrokenPipeError:
        return SIGPIPE
    except OSError as e:
        print(e, file=sys.stderr)
        return IOERR
    return 0

if __name__ == "__main__":
    sys.exit(main())
