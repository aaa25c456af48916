from pathlib import Path
from typing import Annotated, Literal, Self

from annotated_types import Gt
from pydantic import BaseModel, Field, RootModel

from .facilities.rust import RUSTFILT_TIMEOUT


class ConfigCxxDemangler(RootModel[bool]):
    # itanium demangler used for c++ names and as a carrier layer for legacy rust names
    # True - use __cxa_demangle from c++ runtime, if found (recommended)
    # False - disabled, c++ names won't be demangled, rust names only through rustfilt

    @classmethod
    def default(cls) -> Self:
        return cls(True)


class ConfigRustfilt(BaseModel):
    # explicitly configured rustfilt

    executable: Path | None = None  # None - look up `rustfilt` on PATH
    timeout: Annotated[float, Gt(0)] = RUSTFILT_TIMEOUT  # seconds, per name


class ConfigRustDemangler(RootModel[ConfigRustfilt | bool]):
    # external rust demangler
    # ConfigRustfilt - use rustfilt with provided details, fall back to legacy decoder if not found
    # True - use rustfilt from PATH if available, fall back to legacy decoder if not found (recommended)
    # False - always use legacy decoder (legacy names only, v0 names will fail)

    @classmethod
    def default(cls) -> Self:
        return cls(True)


class Config(BaseModel):
    # main configuration file, supplied by user

    # used to distinguish config versions if more then one is available
    symbol_languages_version: Literal[1]

    # see ConfigCxxDemangler for details
    cxx_demangler: ConfigCxxDemangler = Field(default_factory=ConfigCxxDemangler.default)

    # see ConfigRustDemangler for details
    rust_demangler: ConfigRustDemangler = Field(default_factory=ConfigRustDemangler.default)

    @classmethod
    def default(cls) -> Self:
        return cls(
            symbol_languages_version=1,
        )


def config_from_path(config_path: Path | None) -> Config:
    if config_path is None:
        return Config.default()

    with config_path.open("r") as config_file:
        return Config.model_validate_json(config_file.read())
