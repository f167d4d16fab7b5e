## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import sys

from .types import Configuration, Extraction, Macro


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_value(it) -> str:
    if it is None: return '∅'
    if isinstance(it, bool): return str(it).lower()
    if isinstance(it, Macro): return it.name + '=' + format_value(it.value)
    if isinstance(it, list): return '[' + ' '.join(format_value(i) for i in it) + ']'
    if isinstance(it, str): return '"' + it.replace('\\', '\\\\').replace('"', '\\"') + '"'
    return str(it)


def show_configuration(config: Configuration, file=None) -> None:
    file = file or sys.stdout
    record = config.as_record()
    width = max(len(k) for k in record)
    print("\033[97m\033[48;5;30m CONFIGURATION. \033[0m", file=file)
    for key in record:
        # Render from the dataclass so macros keep their `name=value` form.
        value = config.macros if key == 'macros' else record[key]
        print(f"{key:<{width}}  \033[97m{format_value(value)}\033[0m", file=file)


def show_extraction(extraction: Extraction, file=None) -> None:
    file = file or sys.stderr
    for option in extraction.options:
        optarg = '' if option.optarg is None else ' ' + format_value(option.optarg)
        print(f"\033[90moption\033[0m  \033[1;97m-{option.opt}\033[0m{optarg}", file=file)
    for operand in extraction.operands:
        print(f"\033[90moperand\033[0m {format_value(operand)}", file=file)
