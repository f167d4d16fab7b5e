## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# makeopts — Command-line interpretation following the POSIX Utility Syntax Guidelines.
#

from collections.abc import Sequence

from .types import Option, Extraction
from .parser import parse_optspec
from .errors import InvalidInputError, UnknownOptionError, MissingOptionArgumentError


def extract(argv: Sequence[str], optstring: str) -> Extraction:
    """Split `argv` into the options recognized by `optstring` and the operands after them.

    Options are single characters introduced by `-` and may be bundled (`-ab`). A letter
    followed by a colon in `optstring` takes an option-argument, either the rest of its
    cluster (`-fFile`) or the next argument (`-f File`). Scanning stops at the first
    operand, at a lone `-` which is always an operand, or after the first `--`.
    """
    if argv is None or isinstance(argv, str):
        raise InvalidInputError('Invalid argv')
    spec = parse_optspec(optstring)

    argv = list(argv)
    if not all(isinstance(arg, str) for arg in argv):
        raise InvalidInputError('Invalid argv')

    options: list[Option] = []
    index = 0
    while index < len(argv):
        arg = argv[index]

        # Guidelines 9 & 13: options precede operands, and `-` is an operand.
        if not arg.startswith('-') or arg == '-':
            return Extraction(options, argv[index:])
        # Guideline 10: the first `--` ends the options and is discarded.
        if arg == '--':
            return Extraction(options, argv[index+1:])

        for pos in range(1, len(arg)):
            opt = arg[pos]
            if opt not in spec:
                raise UnknownOptionError(f"Unknown option: -{opt}", opt=opt, token=arg)
            if not spec[opt]:
                options.append(Option(opt))
                continue

            if pos < len(arg) - 1:
                optarg = arg[pos+1:]          # e.g. `Foo` in `-abFoo`
            elif index < len(argv) - 1:
                index += 1
                optarg = argv[index]          # e.g. `Foo` in `-ab Foo`
            else:
                raise MissingOptionArgumentError(f"Missing argument for option -{opt}", opt=opt, token=arg)
            options.append(Option(opt, optarg))
            break

        index += 1

    return Extraction(options, [])
