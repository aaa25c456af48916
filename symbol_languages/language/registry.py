from collections.abc import Iterator
from dataclasses import dataclass
from threading import Lock
from typing import Self, assert_never

from more_itertools import all_unique

from .common import CxxDemangler, RustDemangler
from .config import Config, ConfigRustfilt
from .facilities.cxx import CxaDemangler
from .facilities.rust import RUSTFILT_EXECUTABLE, RustfiltDemangler
from .model import Assembler, CPlusPlus, Java, Language, LanguageKind, Rust, Swift


@dataclass(frozen=True, kw_only=True)
class Languages:
    # exactly one instance per language kind, callers may compare languages by identity

    cplusplus: CPlusPlus
    java: Java
    swift: Swift
    rust: Rust
    assembler: Assembler

    def __post_init__(self) -> None:
        # every kind must be covered exactly once
        assert all_unique(language.kind() for language in self)
        assert {language.kind() for language in self} == set(LanguageKind)

    def __iter__(self) -> Iterator[Language]:
        return iter((self.cplusplus, self.java, self.swift, self.rust, self.assembler))

    def by_kind(self, kind: LanguageKind) -> Language:
        match kind:
            case LanguageKind.CPLUSPLUS:
                return self.cplusplus
            case LanguageKind.JAVA:
                return self.java
            case LanguageKind.SWIFT:
                return self.swift
            case LanguageKind.RUST:
                return self.rust
            case LanguageKind.ASSEMBLER:
                return self.assembler
            case _:
                assert_never(kind)

    @classmethod
    def from_facilities(
        cls,
        cxx_demangler: CxxDemangler | None,
        rust_demangler: RustDemangler | None,
    ) -> Self:
        return cls(
            cplusplus=CPlusPlus(cxx_demangler=cxx_demangler),
            java=Java(),
            swift=Swift(),
            rust=Rust(
                rust_demangler=rust_demangler,
                cxx_demangler=cxx_demangler,
            ),
            assembler=Assembler(),
        )

    @classmethod
    def from_config(cls, config: Config) -> Self:
        cxx_demangler = CxaDemangler.find() if config.cxx_demangler.root else None

        rust_demangler: RustfiltDemangler | None
        match config.rust_demangler.root:
            case ConfigRustfilt(executable=executable, timeout=timeout):
                rust_demangler = RustfiltDemangler.find(
                    executable if executable is not None else RUSTFILT_EXECUTABLE,
                    timeout,
                )
            case True:
                rust_demangler = RustfiltDemangler.find()
            case False:
                rust_demangler = None

        return cls.from_facilities(cxx_demangler, rust_demangler)


_languages: Languages | None = None
_languages_lock = Lock()


def languages() -> Languages:
    # process-wide default registry, built once on first use
    global _languages

    if (languages_ := _languages) is not None:
        return languages_

    with _languages_lock:
        if _languages is None:
            _languages = Languages.from_config(Config.default())

        return _languages
