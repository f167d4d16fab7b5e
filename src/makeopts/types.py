## makeopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Option:
    opt: str
    optarg: str | None = None


@dataclass
class Extraction:
    options: list[Option] = field(default_factory=list)
    operands: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Macro:
    name: str
    value: str


@dataclass
class Configuration:
    """Settings of a POSIX make invocation, as given on its command line.

    Scalar fields keep the value of the last option that set them; `targets` and
    `macros` accumulate operands in command-line order.
    """

    # -e  Environment variables, including those with null values, override
    #     macro assignments within makefiles.
    env_overrides: bool = False

    # -f makefile  Pathname of the description file; '-' denotes standard input.
    #     The effect of repeating the option is unspecified, the last one wins.
    makefile: str | None = None

    # -i  Ignore error codes returned by invoked commands, as .IGNORE does.
    ignore_errors: bool = False

    # -k  Keep updating targets that don't depend on a failed one.
    # -S  Terminate on error; the default, and the opposite of -k.
    continue_on_error: bool = False

    # -n  Write commands that would be executed, but don't execute them.
    dry_run: bool = False

    # -p  Write the complete set of macro definitions and target descriptions.
    print_dump: bool = False

    # -q  Query mode: exit status tells whether targets are up-to-date.
    moist_run: bool = False

    # -r  Clear the suffix list and don't use the built-in rules.
    clear_suffixes: bool = False

    # -s  Don't echo command lines or touch messages, as .SILENT does.
    silent_mode: bool = False

    # -t  Touch targets instead of running their commands.
    touch_only: bool = False

    # target_name operands; empty means the first target of the makefile.
    targets: list[str] = field(default_factory=list)

    # macro=value operands.
    macros: list[Macro] = field(default_factory=list)

    def as_record(self) -> dict:
        """Plain dictionary with the external field names, ready for `json.dumps()`."""
        return {
            'envOverrides': self.env_overrides,
            'makefile': self.makefile,
            'ignoreErrors': self.ignore_errors,
            'continueOnError': self.continue_on_error,
            'dryRun': self.dry_run,
            'printDump': self.print_dump,
            'moistRun': self.moist_run,
            'clearSuffixes': self.clear_suffixes,
            'silentMode': self.silent_mode,
            'touchOnly': self.touch_only,
            'targets': list(self.targets),
            'macros': [{'name': m.name, 'value': m.value} for m in self.macros],
        }
