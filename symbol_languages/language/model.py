from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum

from .common import (
    CxxDemangler,
    DemangleFailure,
    DemangleNotAttempted,
    DemangleResult,
    DemangleSuccess,
    MangledName,
    QualifiedName,
    RustDemangler,
    qualified_name_join,
)
from .rust_legacy.parse import demangle as rust_legacy_demangle


class LanguageKind(StrEnum):
    CPLUSPLUS = "cplusplus"
    JAVA = "java"
    SWIFT = "swift"
    RUST = "rust"
    ASSEMBLER = "assembler"


@dataclass(frozen=True, kw_only=True)
class Language(ABC):
    @classmethod
    @abstractmethod
    def kind(cls) -> LanguageKind:
        pass

    def has_functions(self) -> bool:
        return True

    @abstractmethod
    def make_qualified_name(self, parent: QualifiedName, name: str) -> QualifiedName:
        pass

    def demangle_name(self, mangled: MangledName) -> DemangleResult:
        return DemangleNotAttempted()


@dataclass(frozen=True, kw_only=True)
class CPlusPlus(Language):
    cxx_demangler: CxxDemangler | None  # None - platform without itanium demangler

    @classmethod
    def kind(cls) -> LanguageKind:
        return LanguageKind.CPLUSPLUS

    def make_qualified_name(self, parent: QualifiedName, name: str) -> QualifiedName:
        return qualified_name_join(parent, "::", name)

    def demangle_name(self, mangled: MangledName) -> DemangleResult:
        if self.cxx_demangler is None:
            return DemangleNotAttempted()

        demangled = self.cxx_demangler.demangle(mangled)
        if demangled is None:
            return DemangleFailure()

        return DemangleSuccess(demangled)


@dataclass(frozen=True, kw_only=True)
class Java(Language):
    @classmethod
    def kind(cls) -> LanguageKind:
        return LanguageKind.JAVA

    def make_qualified_name(self, parent: QualifiedName, name: str) -> QualifiedName:
        return qualified_name_join(parent, ".", name)


@dataclass(frozen=True, kw_only=True)
class Swift(Language):
    @classmethod
    def kind(cls) -> LanguageKind:
        return LanguageKind.SWIFT

    def make_qualified_name(self, parent: QualifiedName, name: str) -> QualifiedName:
        return qualified_name_join(parent, ".", name)

    def demangle_name(self, mangled: MangledName) -> DemangleResult:
        # there is no in-process swift demangler. mangled form carries more information than qualified name would, so
        # pass it through and let external tools (`swift-demangle`) post-process it
        return DemangleSuccess(mangled)


@dataclass(frozen=True, kw_only=True)
class Rust(Language):
    rust_demangler: RustDemangler | None  # None - use legacy fallback on top of cxx_demangler
    cxx_demangler: CxxDemangler | None

    @classmethod
    def kind(cls) -> LanguageKind:
        return LanguageKind.RUST

    def make_qualified_name(self, parent: QualifiedName, name: str) -> QualifiedName:
        return qualified_name_join(parent, ".", name)

    def demangle_name(self, mangled: MangledName) -> DemangleResult:
        if self.rust_demangler is not None:
            demangled = self.rust_demangler.demangle(mangled)
            if demangled is None:
                return DemangleFailure()

            return DemangleSuccess(demangled)

        # legacy names are carried by itanium mangling, nothing to do without it
        if self.cxx_demangler is None:
            return DemangleNotAttempted()

        return rust_legacy_demangle(mangled, self.cxx_demangler)


@dataclass(frozen=True, kw_only=True)
class Assembler(Language):
    @classmethod
    def kind(cls) -> LanguageKind:
        return LanguageKind.ASSEMBLER

    def has_functions(self) -> bool:
        return False

    def make_qualified_name(self, parent: QualifiedName, name: str) -> QualifiedName:
        # assembler symbols are never nested
        return name
