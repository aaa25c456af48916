import sys
from functools import reduce
from pathlib import Path
from typing import Annotated

from rich.table import Column, Table
from rich.text import Text
from typer import Argument, Option, Typer

from .._cli import console, demangle_result_format, demangle_result_status_format, name_format
from .config import config_from_path
from .model import LanguageKind
from .registry import Languages

app = Typer()


@app.command()
def demangle(
    kind: LanguageKind,
    names: Annotated[list[str] | None, Argument()] = None,
    config_path: Annotated[Path | None, Option("--config")] = None,
) -> None:
    language = Languages.from_config(config_from_path(config_path)).by_kind(kind)

    # like c++filt - read names from stdin if none given
    if not names:
        names = [line.strip() for line in sys.stdin if line.strip()]

    table = Table(
        Column("Mangled", overflow="fold"),
        Column("Demangled", overflow="fold"),
        Column("Result"),
        title=f"Demangle ({kind})",
    )

    for name in names:
        result = language.demangle_name(name)
        table.add_row(
            Text(name),
            demangle_result_format(name, result),
            demangle_result_status_format(result),
        )

    console.print(table)


@app.command()
def qualify(kind: LanguageKind, parts: list[str]) -> None:
    language = Languages.from_facilities(None, None).by_kind(kind)

    qualified_name = reduce(language.make_qualified_name, parts, "")

    console.print(name_format(qualified_name))


@app.command()
def kinds() -> None:
    languages_ = Languages.from_facilities(None, None)

    table = Table(
        Column("Kind"),
        Column("Qualified name"),
        Column("Has functions"),
        title="Languages",
    )

    for language in languages_:
        table.add_row(
            Text(language.kind()),
            Text(language.make_qualified_name("parent", "name")),
            Text("yes" if language.has_functions() else "no"),
        )

    console.print(table)


if __name__ == "__main__":
    app()
