# czivalidate

Building blocks for a validator of CZI microscopy documents. The package
provides:

- the catalogue of checks a validator can run (`czivalidate.checks`):
  the `CZIChecks` enumeration, `czi_check_to_string` for the canonical name
  of a check, `CheckerInfo` describing one available checker (check, short
  name, display name, whether it is opt-in), and the abstract `Checker`
  with its `run_check()` method;
- option parsing (`czivalidate.options`): `parse_command_line`,
  `parse_checks_argument`, `parse_boolean_argument`,
  `parse_encoding_argument`, `try_parse_checker_add_or_remove`,
  `default_checks` and `checker_list_help_text`, producing an `Options`
  record;
- console output (`czivalidate.consoleio`): the abstract `Log`, the
  `ConsoleLog` implementation, the `ConsoleColor` enumeration and
  `ansi_sequence`;
- small helpers (`czivalidate.utils`): `icasecmp`, `trim`,
  `get_version_number` and `get_file_size`.

## Selecting checks

`parse_checks_argument(text, catalog)` takes a list of checker short names
separated by commas, semicolons, pipes or whitespace, and a catalogue of
`CheckerInfo` entries. Two set names are also accepted: `default` (every
checker that is not opt-in) and `all` (every checker). A leading `-`
removes a checker or set, and a leading `+` (the default) adds it; `-all`
clears the selection. Names are matched without regard to case. The
selected checks come back sorted by their `CZIChecks` value. An empty
selection text or an unknown name raises `OptionsError`.

```python
from czivalidate.checks import CheckerInfo, CZIChecks
from czivalidate.options import parse_checks_argument

catalog = [
    CheckerInfo(CZIChecks.SUB_BLOCK_DIRECTORY_POSITIONS_WITHIN_RANGE,
                "subblkdirpositions", "SubBlockDirectory positions within file range"),
    CheckerInfo(CZIChecks.BENABLED_DOCUMENT, "benabled", "Usage of B-Index"),
    CheckerInfo(CZIChecks.SUBBLOCKS_HAVE_MINDEX, "minallsubblks",
                "check if all subblocks have the M index", is_opt_in=True),
]

assert parse_checks_argument("default, -benabled", catalog) == [
    CZIChecks.SUB_BLOCK_DIRECTORY_POSITIONS_WITHIN_RANGE,
]
assert parse_checks_argument("all", catalog)[-1] is CZIChecks.SUBBLOCKS_HAVE_MINDEX
```

## Command-line options

`parse_command_line(argv, catalog, log=None)` parses arguments (without the
program name) and returns an `Options` record:

| option | field | default |
| --- | --- | --- |
| `-s`, `--source FILENAME` (required) | `czi_filename` | |
| `-c`, `--checks CHECKS-TO-BE-RUN` | `checks_enabled` | the catalogue's non-opt-in checks, in catalogue order |
| `-m`, `--maxfindings INTEGER` | `max_findings` | 3; any negative number becomes -1 (no limit) |
| `-d`, `--printdetails BOOLEAN` | `print_details` | `False` |
| `-l`, `--laxparsing BOOLEAN` | `lax_parsing` | `False` |
| `-i`, `--ignoresizem BOOLEAN` | `ignore_sizem` | `False` |
| `-e`, `--encoding ENCODING` | `encoding` | `OutputEncodingFormat.TEXT` |

Booleans accept `yes`/`no`, `true`/`false` and `1`/`0` in any case; the
encoding accepts `text`, `json` or `xml` in any case. When help is
requested it is written to the log and `None` is returned. Invalid
arguments are written to the log's error output and raise `OptionsError`.

```python
from czivalidate.options import (
    OutputEncodingFormat,
    parse_boolean_argument,
    parse_encoding_argument,
)
from czivalidate.utils import icasecmp, trim

assert parse_boolean_argument("printdetails", " yes ") is True
assert parse_encoding_argument("JSON") is OutputEncodingFormat.JSON
assert icasecmp("Default", "default")
assert trim("  all\t") == "all"
```

## Console output

`ConsoleLog(stream=None, error_stream=None, use_color=None)` writes to
standard output by default; error output goes to the same stream unless
another is given. `set_color` emits the ANSI sequence from
`ansi_sequence(foreground, background)` only when colouring is on, which by
default is when the stream is a terminal.

## What this package does not do

It does not read CZI files, contains no concrete checkers and does not
collect or report findings: the caller supplies the catalogue of checkers
and their implementations of `Checker`. There is no result reporting in
text, JSON or XML, no aggregated verdict for a run, and no command to run
from the shell.