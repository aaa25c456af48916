# side-effect module to be used within __main__.py

import logging
import string
from functools import cache
from itertools import chain

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.style import Style
from rich.text import Text
from rich.traceback import install

from .language.common import DemangleFailure, DemangleNotAttempted, DemangleResult, DemangleSuccess

console = Console()

install(
    console=console,
)

logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            rich_tracebacks=True,
            markup=False,
        )
    ],
)
logging.getLogger("symbol_languages").setLevel(logging.DEBUG)
logging.getLogger("__main__").setLevel(logging.DEBUG)


@cache
def name_format(name: str) -> Text:
    parts = name.split("::")

    # special case - if last part is h+HEX - this is rust hash, dim it
    part_format_rust_hash = _name_format_rust_hash(parts[-1]) if len(parts) > 1 else None
    if part_format_rust_hash is not None:
        del parts[-1]

    # last item should be function name - highlight it
    part_format_function_name = Text(
        escape(parts[-1]),
        style=Style(
            bold=True,
        ),
    )
    del parts[-1]

    # others - treat them normally
    parts_format_path = [Text(escape(part)) for part in parts]

    # combine
    format_ = Text("::").join(
        chain(
            parts_format_path,
            [part_format_function_name],
            ([part_format_rust_hash] if part_format_rust_hash is not None else []),
        )
    )

    return format_


def demangle_result_format(mangled: str, result: DemangleResult) -> Text:
    match result:
        case DemangleSuccess(demangled=demangled):
            return name_format(demangled)
        case DemangleFailure():
            return Text(mangled, style=Style(color="red"))
        case DemangleNotAttempted():
            return Text(mangled, style=Style(dim=True))


def demangle_result_status_format(result: DemangleResult | None) -> Text:
    match result:
        case DemangleSuccess():
            return Text("success", style=Style(color="green"))
        case DemangleFailure():
            return Text("failure", style=Style(color="red"))
        case DemangleNotAttempted():
            return Text("not attempted", style=Style(color="yellow"))
        case None:
            return Text("-", style=Style(dim=True))


_HEX_LOWERCASE = set(chain(string.digits, "abcdef"))


def _name_format_rust_hash(part: str) -> Text | None:
    # h + 16 lowercase hex
    if len(part) != 17:
        return None

    if part[0] != "h":
        return None

    if not set(part[1:]) <= _HEX_LOWERCASE:
        return None

    return Text(
        part,
        style=Style(
            dim=True,
        ),
    )
