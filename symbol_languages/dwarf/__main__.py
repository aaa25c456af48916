from pathlib import Path
from typing import Annotated

from rich.style import Style
from rich.table import Column, Table
from rich.text import Text
from typer import Argument, Typer

from .._cli import console, demangle_result_format, demangle_result_status_format, name_format
from .model import Subprogram, Subprograms
from .parse import parse_path

app = Typer()


@app.command()
def symbols(elf_path: Path, config_path: Annotated[Path | None, Argument()] = None) -> None:
    with console.status("Parsing..."):
        subprograms = parse_path(elf_path, config_path)

    _subprograms(subprograms)


def _subprograms(subprograms: Subprograms) -> None:
    table = Table(
        Column("Address"),
        Column("Language"),
        Column(
            "Name",
            overflow="fold",
            no_wrap=False,
        ),
        Column(
            "Demangled",
            overflow="fold",
            no_wrap=False,
        ),
        Column("Result"),
        title="Subprograms",
    )

    for subprogram in subprograms.inner:
        table.add_row(
            _address_format(subprogram),
            Text(subprogram.language),
            name_format(subprogram.name) if subprogram.name is not None else Text("-", style=Style(dim=True)),
            (
                demangle_result_format(subprogram.linkage_name, subprogram.demangle_result)
                if subprogram.linkage_name is not None and subprogram.demangle_result is not None
                else Text("-", style=Style(dim=True))
            ),
            demangle_result_status_format(subprogram.demangle_result),
        )

    console.print(table)


def _address_format(subprogram: Subprogram) -> Text:
    if subprogram.address is None:
        return Text("-", style=Style(dim=True))

    return Text(f"0x{subprogram.address:08X}")


if __name__ == "__main__":
    app()
