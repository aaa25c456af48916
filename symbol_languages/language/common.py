from dataclasses import dataclass
from typing import Protocol

type MangledName = str
type QualifiedName = str


class CxxDemangler(Protocol):
    # itanium c++ abi demangler, returns None if name could not be demangled
    def demangle(self, mangled: MangledName) -> str | None: ...


class RustDemangler(Protocol):
    # external rust demangler (legacy + v0), returns None if name could not be demangled
    def demangle(self, mangled: MangledName) -> str | None: ...


@dataclass(frozen=True)
class DemangleSuccess:
    demangled: str


@dataclass(frozen=True)
class DemangleFailure:
    # demangling was attempted, but failed. mangled name should be used instead
    pass


@dataclass(frozen=True)
class DemangleNotAttempted:
    # language (or platform) does not demangle names. mangled name should be used instead
    pass


type DemangleResult = DemangleSuccess | DemangleFailure | DemangleNotAttempted


def demangled_or_mangled(mangled: MangledName, result: DemangleResult) -> str:
    match result:
        case DemangleSuccess(demangled=demangled):
            return demangled
        case DemangleFailure() | DemangleNotAttempted():
            return mangled


def qualified_name_join(parent: QualifiedName, separator: str, name: str) -> QualifiedName:
    # top level names are not prefixed with separator
    if not parent:
        return name

    return f"{parent}{separator}{name}"
