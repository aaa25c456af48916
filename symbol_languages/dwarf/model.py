from collections.abc import Collection
from dataclasses import dataclass
from functools import cached_property

from more_itertools import is_sorted

from ..language.common import DemangleResult, MangledName, QualifiedName, demangled_or_mangled
from ..language.model import LanguageKind
from .common import Address


@dataclass(frozen=True, kw_only=True)
class Subprogram:
    language: LanguageKind
    address: Address | None  # None - no code (ex. inlined only)

    name: QualifiedName | None  # joined with enclosing scopes
    linkage_name: MangledName | None
    demangle_result: DemangleResult | None  # None if there is no linkage name

    def __post_init__(self) -> None:
        # must be positive
        assert self.address is None or self.address >= 0

        # must be named somehow
        assert self.name or self.linkage_name

        # linkage name is always demangled
        assert (self.linkage_name is None) == (self.demangle_result is None)

    @cached_property
    def display_name(self) -> str:
        if self.linkage_name is not None and self.demangle_result is not None:
            return demangled_or_mangled(self.linkage_name, self.demangle_result)

        assert self.name is not None
        return self.name


@dataclass(frozen=True)
class Subprograms:
    inner: Collection[Subprogram]

    def __post_init__(self) -> None:
        # subprograms with code go first, sorted by address
        addresses = [subprogram.address for subprogram in self.inner if subprogram.address is not None]
        assert is_sorted(addresses)
        assert all(subprogram.address is not None for subprogram in list(self.inner)[: len(addresses)])
