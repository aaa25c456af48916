import pytest

from symbol_languages.language.common import DemangleFailure, DemangleSuccess
from symbol_languages.language.rust_legacy.parse import demangle

_MANGLED = "_ZN3foo8$u20$bar17h0123456789abcdefE"


def test_demangle(fake_demangler) -> None:
    cxx_demangler = fake_demangler({_MANGLED: "foo$u20$bar::h0123456789abcdef"})

    assert demangle(_MANGLED, cxx_demangler) == DemangleSuccess("foo bar")


def test_demangle_strips_hash_of_nested_path(fake_demangler) -> None:
    cxx_demangler = fake_demangler(
        {"mangled": "core::fmt::Write::write$LT$T$GT$::h00112233445566ff"},
    )

    assert demangle("mangled", cxx_demangler) == DemangleSuccess("core::fmt::Write::write<T>")


def test_demangle_cxx_failure(fake_demangler) -> None:
    cxx_demangler = fake_demangler({})

    assert demangle(_MANGLED, cxx_demangler) == DemangleFailure()
    assert cxx_demangler.calls == [_MANGLED]


@pytest.mark.parametrize(
    "cxx_demangled",
    [
        "foo$u20$bar",  # no hash
        "foo bar::h0123456789abcdef",  # space is not allowed before decoding
        "foo::h0123456789ABCDEF",  # uppercase hash
        "foo::h0123456789abcde",  # 15 digits
        "foo::h0123456789abcdef0",  # 17 digits
        "foo::g0123456789abcdef",  # not a hash marker
        "::h0123456789abcdef",  # empty path
        "foo(int)",  # regular c++ name
    ],
)
def test_demangle_not_legacy_rust(fake_demangler, cxx_demangled: str) -> None:
    cxx_demangler = fake_demangler({_MANGLED: cxx_demangled})

    assert demangle(_MANGLED, cxx_demangler) == DemangleFailure()


@pytest.mark.parametrize(
    "cxx_demangled",
    [
        "foo$zz$bar::h0123456789abcdef",  # unknown token
        "foo$u20bar::h0123456789abcdef",  # unterminated token
        "foo_bar::h0123456789abcdef",  # bare underscore
    ],
)
def test_demangle_decode_failure(fake_demangler, cxx_demangled: str) -> None:
    cxx_demangler = fake_demangler({_MANGLED: cxx_demangled})

    assert demangle(_MANGLED, cxx_demangler) == DemangleFailure()
