from collections.abc import Iterator
from functools import reduce
from itertools import chain
from logging import getLogger
from pathlib import Path
from typing import Any

from elftools.dwarf.compileunit import CompileUnit
from elftools.dwarf.die import DIE
from elftools.elf.elffile import ELFFile

from ..language.config import config_from_path
from ..language.model import Language
from ..language.registry import Languages
from .common import language_kind_from_dwarf
from .model import Subprogram, Subprograms

_logger = getLogger(__name__)

# DIEs introducing a named scope for nested declarations
_SCOPE_TAGS = frozenset(
    {
        "DW_TAG_namespace",
        "DW_TAG_class_type",
        "DW_TAG_structure_type",
        "DW_TAG_union_type",
    }
)
_UNIT_TAGS = frozenset(
    {
        "DW_TAG_compile_unit",
        "DW_TAG_partial_unit",
    }
)
_ANONYMOUS_NAMESPACE = "(anonymous namespace)"

# out-of-line definitions and inlined instances refer to the DIE holding the name
_ORIGIN_ATTRIBUTES = ("DW_AT_specification", "DW_AT_abstract_origin")
_LINKAGE_NAME_ATTRIBUTES = ("DW_AT_linkage_name", "DW_AT_MIPS_linkage_name")


def parse_path(elf_path: Path, config_path: Path | None) -> Subprograms:
    languages_ = Languages.from_config(config_from_path(config_path))

    with elf_path.open("rb") as elf_file:
        elffile = ELFFile(elf_file)  # type: ignore

        subprograms = parse(elffile, languages_)

    return subprograms


def parse(elffile: ELFFile, languages_: Languages) -> Subprograms:
    if not elffile.has_dwarf_info():
        raise ValueError(
            "Unable to find DWARF debug information. "
            "It is required to resolve compile unit languages and function names. "
            "Please build with debug information (ex. -g) and don't strip the binary."
        )

    dwarfinfo = elffile.get_dwarf_info()

    subprograms = list(
        chain.from_iterable(
            parse_compile_unit(compile_unit, languages_)
            for compile_unit in dwarfinfo.iter_CUs()  # type: ignore
        )
    )

    # code first, ordered by address
    subprograms.sort(key=lambda subprogram: (subprogram.address is None, subprogram.address or 0))

    return Subprograms(subprograms)


def parse_compile_unit(compile_unit: CompileUnit, languages_: Languages) -> Iterator[Subprogram]:
    top_die = compile_unit.get_top_DIE()

    language = languages_.by_kind(language_kind_from_dwarf(_attribute_value(top_die, "DW_AT_language")))

    if not language.has_functions():
        _logger.debug(
            "Skipping compile unit `%s`, %s has no functions.",
            _attribute_str(top_die, "DW_AT_name"),
            language.kind(),
        )
        return

    for die in compile_unit.iter_DIEs():
        if die.tag != "DW_TAG_subprogram":
            continue

        # declarations are completed by DW_AT_specification elsewhere
        if "DW_AT_declaration" in die.attributes:
            continue

        subprogram = parse_subprogram(die, language)
        if subprogram is None:
            continue

        yield subprogram


def parse_subprogram(die: DIE, language: Language) -> Subprogram | None:
    origin = _origin(die)

    name = _attribute_str(die, "DW_AT_name") or _attribute_str(origin, "DW_AT_name")
    linkage_name = _linkage_name(die) or _linkage_name(origin)

    # compiler generated, nothing to show
    if not name and not linkage_name:
        return None

    qualified_name = language.make_qualified_name(_scope_name(origin, language), name) if name else None

    demangle_result = language.demangle_name(linkage_name) if linkage_name else None

    return Subprogram(
        language=language.kind(),
        address=_attribute_value(die, "DW_AT_low_pc"),
        name=qualified_name,
        linkage_name=linkage_name or None,
        demangle_result=demangle_result,
    )


def _origin(die: DIE) -> DIE:
    # follow specification / abstract origin chain up to the DIE carrying declaration details
    seen = {die.offset}
    while True:
        attribute_name = next((name for name in _ORIGIN_ATTRIBUTES if name in die.attributes), None)
        if attribute_name is None:
            return die

        die_next = die.get_DIE_from_attribute(attribute_name)
        if die_next.offset in seen:
            raise ValueError(f"Cyclic {attribute_name} reference at DIE 0x{die.offset:X}.")

        seen.add(die_next.offset)
        die = die_next


def _scope_name(die: DIE, language: Language) -> str:
    names = list[str]()

    parent = die.get_parent()
    while parent is not None and parent.tag not in _UNIT_TAGS:
        if parent.tag in _SCOPE_TAGS:
            name = _attribute_str(parent, "DW_AT_name")
            if name is None and parent.tag == "DW_TAG_namespace":
                name = _ANONYMOUS_NAMESPACE

            # anonymous classes / structs do not contribute to the name
            if name is not None:
                names.append(name)

        parent = parent.get_parent()

    # names were collected innermost first
    return reduce(language.make_qualified_name, reversed(names), "")


def _linkage_name(die: DIE) -> str | None:
    for attribute_name in _LINKAGE_NAME_ATTRIBUTES:
        if (linkage_name := _attribute_str(die, attribute_name)) is not None:
            return linkage_name

    return None


def _attribute_value(die: DIE, attribute_name: str) -> Any:
    attribute = die.attributes.get(attribute_name)
    if attribute is None:
        return None

    return attribute.value


def _attribute_str(die: DIE, attribute_name: str) -> str | None:
    value = _attribute_value(die, attribute_name)
    if value is None:
        return None

    if isinstance(value, bytes):
        return value.decode(errors="replace")

    return str(value)
