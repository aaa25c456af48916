from importlib import metadata

from typer import Typer

from . import _cli as _  # noqa: F401
from .dwarf.__main__ import app as dwarf
from .language.__main__ import app as language

app = Typer()

app.add_typer(
    language,
    name="language",
)
app.add_typer(
    dwarf,
    name="dwarf",
)


@app.command()
def version() -> None:
    version_ = metadata.version("symbol-languages")

    print(version_)


if __name__ == "__main__":
    app()
