"""Command-line options: parsing of arguments and of the checker selection."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, NoReturn, Sequence

from .checks import CheckerInfo, CZIChecks
from .consoleio import ConsoleLog, Log
from .utils import get_version_number, icasecmp, trim

_CHECKS_SEPARATOR = re.compile(r"[\s|,;]+")
_CHECKER_ITEM = re.compile(r"\s*([\+|-]?)\s*(\S+)\s*")

_EXIT_CODES_TEXT = (
    "The exit code of CZICheck is\n"
    " 0  - all checks completed without an error or a warning\n"
    " 1  - the checks found some warnings, but no errors\n"
    " 2  - the checks gave one or more errors\n"
    " 5  - the CZI-file could not be read or opened\n"
    " 10 - the command line arguments are invalid\n\n"
)


class OutputEncodingFormat(Enum):
    """How the results of a run are encoded."""

    TEXT = "text"
    JSON = "json"
    XML = "xml"


class OptionsError(ValueError):
    """The command-line arguments are invalid."""


@dataclass(frozen=True)
class CheckerSelection:
    """A checker (or set) name and whether it is to be added or removed."""

    checker_name: str
    add: bool = True


@dataclass
class Options:
    """The settings of a validation run."""

    czi_filename: str
    checks_enabled: list[CZIChecks] = field(default_factory=list)
    max_findings: int = 3
    print_details: bool = False
    lax_parsing: bool = False
    ignore_sizem: bool = False
    encoding: OutputEncodingFormat = OutputEncodingFormat.TEXT
    log: Log = field(default_factory=ConsoleLog, repr=False, compare=False)


def parse_encoding_argument(text: str) -> OutputEncodingFormat:
    """Parse 'text', 'json' or 'xml' (in any case)."""
    for encoding in OutputEncodingFormat:
        if icasecmp(encoding.value, text):
            return encoding
    raise OptionsError("The output encoding option you passed is unknown.")


def parse_boolean_argument(key: str, value: str) -> bool:
    """Parse a boolean given as yes/no, true/false or 1/0."""
    trimmed = trim(value)
    if any(icasecmp(trimmed, word) for word in ("yes", "true", "1")):
        return True
    if any(icasecmp(trimmed, word) for word in ("no", "false", "0")):
        return False
    raise OptionsError(f"Invalid argument for option '{key}': \"{trimmed}\"")


def try_parse_checker_add_or_remove(text: str) -> CheckerSelection | None:
    """Split an optional leading '+' or '-' from a checker name; None if malformed."""
    match = _CHECKER_ITEM.fullmatch(text)
    if match is None:
        return None
    return CheckerSelection(checker_name=match.group(2), add=match.group(1) != "-")


def _find_checker(name: str, catalog: Sequence[CheckerInfo]) -> CheckerInfo | None:
    return next((info for info in catalog if icasecmp(info.short_name, name)), None)


def parse_checks_argument(text: str, catalog: Iterable[CheckerInfo]) -> list[CZIChecks]:
    """Evaluate a checker selection such as 'default, -benabled'.

    Returns the selected checks ordered by their numeric value.
    """
    catalog = list(catalog)
    tokens = [token for token in _CHECKS_SEPARATOR.split(text) if token]
    if not tokens:
        raise OptionsError("No checkers specified")

    selected: set[CZIChecks] = set()
    for token in tokens:
        selection = try_parse_checker_add_or_remove(token)
        if selection is None:
            raise OptionsError(f'Invalid checker encountered "{token}"')

        name = selection.checker_name
        if icasecmp("default", name):
            defaults = {info.check for info in catalog if not info.is_opt_in}
            if selection.add:
                selected |= defaults
            else:
                selected -= defaults
        elif icasecmp("all", name):
            if selection.add:
                selected |= {info.check for info in catalog}
            else:
                selected.clear()
        else:
            info = _find_checker(name, catalog)
            if info is None:
                raise OptionsError(f'Invalid checker encountered "{token}"')
            if selection.add:
                selected.add(info.check)
            else:
                selected.discard(info.check)

    return sorted(selected)


def default_checks(catalog: Iterable[CheckerInfo]) -> list[CZIChecks]:
    """Return the checks which are not opt-in, in catalog order."""
    return [info.check for info in catalog if not info.is_opt_in]


def checker_list_help_text(catalog: Iterable[CheckerInfo]) -> str:
    """Describe the available checkers, marking the default ones with '*'."""
    lines = ["Available checkers (checkers enabled with the default set are marked with '*'):"]
    for info in catalog:
        marker = "  " if info.is_opt_in else "* "
        lines.append(f'{marker}"{info.short_name}" -> {info.display_name}')
    return "\n".join(lines) + "\n"


class _HelpRequested(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def __init__(self, log: Log, **kwargs) -> None:
        super().__init__(**kwargs)
        self._log = log

    def print_help(self, file=None) -> None:
        self._log.write_stdout(self.format_help())

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if status == 0:
            raise _HelpRequested()
        raise OptionsError(message or "invalid arguments")

    def error(self, message: str) -> NoReturn:
        raise OptionsError(message)


_CHECKS_HELP = (
    "Specifies a comma-separated list of short-names of checkers to run. "
    "In addition to the short-names, the following \"set-names\" are possible: "
    "'default' and 'all'. 'default' means \"all checkers which are not flagged as "
    "opt-in\", and 'all' means \"all available checkers\". A minus ('-') prepended "
    "to the checker-short-name (or set-name) means that this checker or set is to "
    "be removed from the list of checkers to run. A plus ('+') means that it is to "
    "be added, and this is also the default if no plus or minus is prepended. "
    "Default is 'default'."
)


def _build_parser(catalog: Sequence[CheckerInfo], log: Log) -> _Parser:
    parser = _Parser(
        log,
        prog="CZICheck",
        description=f"CZICheck version {get_version_number()}",
        epilog=_EXIT_CODES_TEXT + checker_list_help_text(catalog),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-s", "--source", metavar="FILENAME", required=True,
                        help="Specify the CZI-file to be checked.")
    parser.add_argument("-c", "--checks", metavar="CHECKS-TO-BE-RUN", help=_CHECKS_HELP)
    parser.add_argument("-m", "--maxfindings", metavar="INTEGER", type=int, default=3,
                        help="Specifies how many findings are to be reported and printed "
                             "(for every check). A negative number means 'no limit'. "
                             "Default is 3.")
    parser.add_argument("-d", "--printdetails", metavar="BOOLEAN",
                        help="Specifies whether to print details (if available) with a "
                             "finding. The argument may be one of 'true', 'false', 'yes' "
                             "or 'no'.")
    parser.add_argument("-l", "--laxparsing", metavar="BOOLEAN",
                        help="Specifies whether lax parsing for file opening is enabled. "
                             "Default is 'no'.")
    parser.add_argument("-i", "--ignoresizem", metavar="BOOLEAN",
                        help="Specifies whether to ignore the 'SizeM' field for pyramid "
                             "subblocks. Default is 'false'.")
    parser.add_argument("-e", "--encoding", metavar="ENCODING",
                        help="Specifies which encoding should be used for result "
                             "reporting. The argument may be one of 'json', 'xml', "
                             "'text'. Default is 'text'.")
    return parser


def _options_from_namespace(args: argparse.Namespace, catalog: Sequence[CheckerInfo],
                            log: Log) -> Options:
    if not args.source:
        raise OptionsError("No CZI-file specified.")

    options = Options(czi_filename=args.source, checks_enabled=default_checks(catalog), log=log)
    options.max_findings = args.maxfindings if args.maxfindings >= 0 else -1

    if args.checks is not None:
        options.checks_enabled = parse_checks_argument(args.checks, catalog)
    if args.printdetails is not None:
        options.print_details = parse_boolean_argument("printdetails", args.printdetails)
    if args.laxparsing is not None:
        options.lax_parsing = parse_boolean_argument("laxparsing", args.laxparsing)
    if args.ignoresizem:
        options.ignore_sizem = parse_boolean_argument("ignoresizem", args.ignoresizem)
    if args.encoding is not None:
        options.encoding = parse_encoding_argument(args.encoding)
    return options


def parse_command_line(
    argv: Sequence[str] | None,
    catalog: Iterable[CheckerInfo],
    log: Log | None = None,
) -> Options | None:
    """Parse the arguments (without the program name).

    Returns None when help was requested and printed. On invalid arguments the
    message is written to the log's error output and OptionsError is raised.
    """
    catalog = list(catalog)
    log = log if log is not None else ConsoleLog()
    parser = _build_parser(catalog, log)
    try:
        args = parser.parse_args(list(argv) if argv is not None else None)
        return _options_from_namespace(args, catalog, log)
    except _HelpRequested:
        return None
    except OptionsError as error:
        log.write_line_stderr(str(error))
        raise