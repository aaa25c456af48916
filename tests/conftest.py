from collections.abc import Mapping
from dataclasses import dataclass, field

import pytest


@dataclass(frozen=True)
class FakeDemangler:
    # demangles only names it knows about
    names: Mapping[str, str]
    calls: list[str] = field(default_factory=list[str], compare=False)

    def demangle(self, mangled: str) -> str | None:
        self.calls.append(mangled)
        return self.names.get(mangled)


@pytest.fixture
def fake_demangler() -> type[FakeDemangler]:
    return FakeDemangler
