import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from unittest.mock import patch

import pytest

from symbol_languages.language import registry
from symbol_languages.language.config import Config, ConfigCxxDemangler, ConfigRustDemangler, ConfigRustfilt
from symbol_languages.language.facilities.rust import RustfiltDemangler
from symbol_languages.language.model import Language, LanguageKind
from symbol_languages.language.registry import Languages, languages


@pytest.mark.parametrize("kind", list(LanguageKind))
def test_by_kind(kind: LanguageKind) -> None:
    languages_ = Languages.from_facilities(None, None)

    assert languages_.by_kind(kind).kind() is kind


def test_by_kind_returns_same_instance() -> None:
    languages_ = Languages.from_facilities(None, None)

    for language in languages_:
        assert languages_.by_kind(language.kind()) is language


def test_iter_covers_every_kind_once() -> None:
    assert [language.kind() for language in Languages.from_facilities(None, None)] == list(LanguageKind)


def test_from_facilities_shares_cxx_demangler(fake_demangler) -> None:
    cxx_demangler = fake_demangler({})
    rust_demangler = fake_demangler({})

    languages_ = Languages.from_facilities(cxx_demangler, rust_demangler)

    assert languages_.cplusplus.cxx_demangler is cxx_demangler
    assert languages_.rust.cxx_demangler is cxx_demangler
    assert languages_.rust.rust_demangler is rust_demangler


def test_languages_singleton() -> None:
    assert languages() is languages()
    assert languages().rust is languages().by_kind(LanguageKind.RUST)
    assert isinstance(languages().cplusplus, Language)


def test_languages_singleton_built_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = list[Config]()

    def from_config(config: Config) -> Languages:
        calls.append(config)
        time.sleep(0.05)
        return Languages.from_facilities(None, None)

    monkeypatch.setattr(registry, "_languages", None)
    monkeypatch.setattr(registry.Languages, "from_config", from_config)

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: languages(), range(32)))

    assert len(calls) == 1
    assert all(result is results[0] for result in results)


def test_from_config_disabled() -> None:
    config = Config(
        symbol_languages_version=1,
        cxx_demangler=ConfigCxxDemangler(False),
        rust_demangler=ConfigRustDemangler(False),
    )

    languages_ = Languages.from_config(config)

    assert languages_.cplusplus.cxx_demangler is None
    assert languages_.rust.cxx_demangler is None
    assert languages_.rust.rust_demangler is None


def test_from_config_rustfilt_on_path() -> None:
    config = Config(
        symbol_languages_version=1,
        cxx_demangler=ConfigCxxDemangler(False),
        rust_demangler=ConfigRustDemangler(True),
    )

    with patch("shutil.which", return_value="/usr/bin/rustfilt") as which:
        languages_ = Languages.from_config(config)

    which.assert_called_once_with("rustfilt")
    assert languages_.rust.rust_demangler == RustfiltDemangler(executable=Path("/usr/bin/rustfilt"), timeout=5.0)


def test_from_config_rustfilt_not_found() -> None:
    config = Config(
        symbol_languages_version=1,
        cxx_demangler=ConfigCxxDemangler(False),
        rust_demangler=ConfigRustDemangler(True),
    )

    with patch("shutil.which", return_value=None):
        languages_ = Languages.from_config(config)

    assert languages_.rust.rust_demangler is None


def test_from_config_rustfilt_explicit() -> None:
    config = Config(
        symbol_languages_version=1,
        cxx_demangler=ConfigCxxDemangler(False),
        rust_demangler=ConfigRustDemangler(ConfigRustfilt(executable=Path("/opt/rustfilt"), timeout=1.5)),
    )

    with patch("shutil.which", return_value="/opt/rustfilt") as which:
        languages_ = Languages.from_config(config)

    which.assert_called_once_with(Path("/opt/rustfilt"))
    assert languages_.rust.rust_demangler == RustfiltDemangler(executable=Path("/opt/rustfilt"), timeout=1.5)
