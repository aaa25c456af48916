from collections.abc import Mapping

from elftools.dwarf.enums import ENUM_DW_LANG

from ..language.model import LanguageKind

type Address = int

_LANGUAGE_KIND_BY_DW_LANG: Mapping[int, LanguageKind] = {
    ENUM_DW_LANG["DW_LANG_Java"]: LanguageKind.JAVA,
    ENUM_DW_LANG["DW_LANG_Swift"]: LanguageKind.SWIFT,
    ENUM_DW_LANG["DW_LANG_Rust"]: LanguageKind.RUST,
    ENUM_DW_LANG["DW_LANG_Mips_Assembler"]: LanguageKind.ASSEMBLER,
}


def language_kind_from_dwarf(dw_lang: int | None) -> LanguageKind:
    # compile unit language (DW_AT_language)
    # everything else (C, C++ dialects, missing attribute) is treated as c++
    if dw_lang is None:
        return LanguageKind.CPLUSPLUS

    return _LANGUAGE_KIND_BY_DW_LANG.get(dw_lang, LanguageKind.CPLUSPLUS)
