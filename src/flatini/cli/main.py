import dataclasses
import logging
import pathlib
import sys
from typing import Annotated, Optional

import typer
from rich.table import Table
from rich.text import Text

from .. import files, writer
from ..entry import Entry, to_dict
from ..errors import FlatiniError

from .console import console, err_console

_log = logging.getLogger(__name__)

LOG_LEVELS = [
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
]

FileArgument = Annotated[
    pathlib.Path, typer.Argument(exists=True, dir_okay=False, resolve_path=True)
]

app = typer.Typer(no_args_is_help=True)


def _load(file: pathlib.Path, encoding: str | None) -> tuple[list[Entry], str]:
    try:
        if encoding is None:
            encoding = files.detect_path_encoding(file)

        return files.load_path(file, encoding=encoding), encoding
    except (FlatiniError, UnicodeDecodeError) as e:
        err_console.print(f"error: {file}: {e}", style="red", markup=False)
        raise typer.Exit(code=2)


@app.callback()
def common(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, min=0, max=5, help="set logging level"
        ),
    ] = 0
):
    """Read, query and reformat flat section/key/value config files."""

    if verbose == 0:
        logging.disable()
    else:
        logging.basicConfig(level=LOG_LEVELS[verbose - 1])


@app.command()
def show(
    file: FileArgument,
    section: Annotated[
        Optional[str], typer.Option(help="Only show entries in this section")
    ] = None,
    encoding: Annotated[
        Optional[str], typer.Option(help="File encoding, detected if not given")
    ] = None,
):
    """Show the entries of a file as a table."""

    entries, _ = _load(file, encoding)
    if section is not None:
        entries = [e for e in entries if e.section == section]

    table = Table(title=str(file))
    for field in dataclasses.fields(Entry):
        table.add_column(field.name.capitalize())

    for entry in entries:
        # Entries may contain brackets, which rich would take as markup.
        table.add_row(*(Text(v) for v in dataclasses.astuple(entry)))

    console.print(table)


@app.command()
def get(
    file: FileArgument,
    section: str,
    key: str,
    encoding: Annotated[
        Optional[str], typer.Option(help="File encoding, detected if not given")
    ] = None,
):
    """Print the value of a key in a section.
    If the key is given more than once, the last value wins.
    Use an empty string for the default section.
    """

    entries, _ = _load(file, encoding)
    config = to_dict(entries)

    try:
        value = config[section][key]
    except KeyError:
        err_console.print(f"key not found: [{section}] {key}", markup=False)
        raise typer.Exit(code=1)

    # Print as is, without rich markup or wrapping.
    sys.stdout.write(value + "\n")


@app.command()
def fmt(
    file: FileArgument,
    check: Annotated[
        bool, typer.Option(help="Exit with 1 if the file is not formatted")
    ] = False,
    write: Annotated[bool, typer.Option(help="Reformat the file in place")] = False,
    encoding: Annotated[
        Optional[str], typer.Option(help="File encoding, detected if not given")
    ] = None,
):
    """Reformat a file. Comments and blank lines are not kept."""

    entries, encoding = _load(file, encoding)
    formatted = writer.dumps(entries)

    if check:
        if file.read_bytes() != formatted.encode(encoding):
            err_console.print(f"would reformat {file}", markup=False)
            raise typer.Exit(code=1)

        return

    if write:
        files.save_path(entries, file, encoding=encoding)
        _log.info("reformatted %s", file)
    else:
        sys.stdout.write(formatted)
