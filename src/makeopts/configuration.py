## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# makeopts — Command-line interpretation following the POSIX Utility Syntax Guidelines.
#

from collections.abc import Sequence

from .types import Configuration, Macro
from .options import extract
from .errors import InvalidInputError


MAKE_OPTSPEC = 'ef:ikSnpqrst'

# Boolean options, applied in command-line order so that a later one overrides.
FLAG_EFFECTS: dict[str, tuple[str, bool]] = {
    'e': ('env_overrides', True),
    'i': ('ignore_errors', True),
    'k': ('continue_on_error', True),
    'S': ('continue_on_error', False),
    'n': ('dry_run', True),
    'p': ('print_dump', True),
    'q': ('moist_run', True),
    'r': ('clear_suffixes', True),
    's': ('silent_mode', True),
    't': ('touch_only', True),
}


def parse(argv: Sequence[str]) -> Configuration:
    """Interpret the arguments of a `make` command line, excluding the program name."""
    if argv is None:
        raise InvalidInputError('Invalid argv')

    extraction = extract(argv, MAKE_OPTSPEC)
    config = Configuration()

    for option in extraction.options:
        if option.opt == 'f':
            config.makefile = option.optarg
        elif option.opt in FLAG_EFFECTS:
            name, value = FLAG_EFFECTS[option.opt]
            setattr(config, name, value)
        # `-:` is accepted by the extractor since the optstring holds a colon; it has no effect.

    for operand in extraction.operands:
        name, eq, value = operand.partition('=')
        if eq:
            config.macros.append(Macro(name, value))
        else:
            config.targets.append(operand)

    return config
