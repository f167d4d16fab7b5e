## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# makeopts — Command-line interpretation following the POSIX Utility Syntax Guidelines.
#

import sys
import json
from dataclasses import dataclass

import click

from .errors import OptionError
from .options import extract
from .parser import parse_optspec
from .configuration import parse, MAKE_OPTSPEC
from .formatting import write_without_ansi, show_configuration, show_extraction, format_value


USAGE = "usage: make [-einpqrst] [-k|-S] [-f makefile]... [macro=value...] [target_name...]"

FRONT_END_FLAGS = ('--verbose', '--plain', '--json', '--help')


@dataclass(frozen=True)
class RuntimeConfig:
    verbose: int
    plain: bool
    json: bool


class MakeoptsRunner:
    def __init__(self, config: RuntimeConfig):
        self.verbose = config.verbose
        self.plain = config.plain
        self.as_json = config.json

        if self.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

    def _fatal_error(self, message: str, detail: str, exc_type: str = None, context: str = '') -> None:
        header = detail if not exc_type else f"{detail} (Exception: \033[33m{exc_type}\033[0m)"
        print(f'\033[30;43m {message} \033[0m {header}\n{context}', file=sys.stderr)

    def _handle_exception(self, exc: OptionError) -> None:
        context = f"\033[90m  In argument `{exc.token}`.\033[0m\n" if exc.token is not None else ''
        self._fatal_error("USAGE ERROR.", str(exc), type(exc).__name__, context + USAGE)

    def _trace(self, arguments: list[str]) -> None:
        if self.verbose >= 2:
            spec = parse_optspec(MAKE_OPTSPEC)
            letters = ' '.join(f"-{k}" + (' arg' if v else '') for k, v in spec.items() if k != ':')
            print(f"\033[90moptspec\033[0m {format_value(MAKE_OPTSPEC)} \033[90m→\033[0m {letters}", file=sys.stderr)
        show_extraction(extract(arguments, MAKE_OPTSPEC), file=sys.stderr)

    def run(self, arguments: list[str]) -> int:
        try:
            if self.verbose:
                self._trace(arguments)
            config = parse(arguments)
        except OptionError as exc:
            self._handle_exception(exc)
            return 2

        if self.as_json:
            print(json.dumps(config.as_record(), indent=2, ensure_ascii=False))
        else:
            show_configuration(config)
        return 0


@click.command(context_settings={'ignore_unknown_options': True, 'allow_extra_args': True})
@click.option('--verbose', default=0, count=True, help='Show how the arguments were split, on stderr.')
@click.option('--plain', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--json', 'as_json', is_flag=True, help='Print the configuration as a JSON record.')
@click.argument('arguments', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, verbose: int, plain: bool, as_json: bool, arguments: tuple[str, ...]) -> None:
    """Interpret a POSIX `make` command line and print the resulting configuration."""
    runner = MakeoptsRunner(RuntimeConfig(verbose=verbose, plain=plain, json=as_json))
    ctx.exit(runner.run(list(arguments)))


def main(argv: list[str] | None = None) -> None:
    a = list(sys.argv[1:] if argv is None else argv)
    # Only leading long flags belong to the front end, the rest is passed untouched
    # after `--` so that click never reinterprets make's options, `-` or `--`.
    g = []
    while a and a[0] in FRONT_END_FLAGS:
        g.append(a.pop(0))

    cli.main(args=[*g, '--', *a], prog_name='makeopts')


if __name__ == "__main__":
    main()
