"""
IPv6 canonicalization and numeral conversion — command-line entry point.

Usage:
    python main.py --operation <name> <value> [options]

Available operations:
    validate     Check an IPv6 literal against the grammar
    expand       Full eight-segment form        (::1 → 0000:...:0001)
    abbreviate   Shortest form                  (0000:...:0001 → ::1)
    to-binary    Hex digits (or --int integer) → binary digits
    to-hex       Binary digits (or --int integer) → hex digits
    to-decimal   Binary/hex digits → integer    (requires --base)

Examples:
    python main.py -op expand 2001:db8::1
    python main.py -op to-binary ff
    python main.py -op to-hex --int 255 --width 8
    python main.py -op to-decimal --base 2 11111111
"""

import argparse
import sys

from canon import ErrorKind, Result, Width, abbreviate, expand, validate
from canon import to_binary, to_decimal, to_hex


OPERATIONS = [
    "validate",
    "expand",
    "abbreviate",
    "to-binary",
    "to-hex",
    "to-decimal",
]


def _validate(args) -> Result:
    check = validate(args.value)
    if not check:
        return Result.failure(ErrorKind.INVALID_FORMAT, check.reason)
    return Result.success("valid")


def _int_value(args):
    """The VALUE argument as an integer when --int is given, else as text.

    A VALUE that is not a decimal integer becomes None, which the converters
    reject as InvalidFormat.
    """
    if not args.int:
        return args.value
    try:
        return int(args.value, 10)
    except ValueError:
        return None


def _width(args):
    return Width(args.width) if args.width else None


def get_operation(name: str):
    """Return a callable mapping parsed args to a Result for *name*."""
    mapping = {
        "validate":   _validate,
        "expand":     lambda a: expand(a.value),
        "abbreviate": lambda a: abbreviate(a.value),
        "to-binary":  lambda a: to_binary(_int_value(a), a.keep_leading_zeros, _width(a)),
        "to-hex":     lambda a: to_hex(_int_value(a), _width(a)),
        "to-decimal": lambda a: to_decimal(a.value, a.base, _width(a)),
    }
    operation = mapping.get(name)
    if operation is None:
        print(f"Unknown operation '{name}'. Choose from: {', '.join(OPERATIONS)}")
        sys.exit(1)
    return operation


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="IPv6 canonicalization and numeral base conversion"
    )
    parser.add_argument(
        "--operation", "-op",
        required=True,
        choices=OPERATIONS,
        help="Operation to run",
    )
    parser.add_argument(
        "value",
        help="IPv6 literal or numeral to operate on",
    )
    parser.add_argument(
        "--base",
        type=int,
        default=16,
        help="Numeral base for to-decimal: 2 or 16 (default: 16)",
    )
    parser.add_argument(
        "--width", "-w",
        type=int,
        choices=[int(w) for w in Width],
        default=None,
        help="Fixed unsigned width the value must fit in (default: unbounded)",
    )
    parser.add_argument(
        "--int",
        action="store_true",
        help="Read VALUE as a decimal integer (to-binary, to-hex)",
    )
    parser.add_argument(
        "--keep-leading-zeros",
        action="store_true",
        help="Keep leading zero bits in to-binary output "
             "(with --int, pads to --width; no effect without one)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    operation = get_operation(args.operation)
    print(f"[*] Operation: {args.operation}")
    print(f"[*] Value:     {args.value}")
    result = operation(args)
    if not result.ok:
        print(f"[!] {result.error}: {result.reason}")
        return 1
    print(f"[+] {result.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
