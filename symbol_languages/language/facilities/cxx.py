# itanium c++ abi demangler exposed by c++ runtime (libstdc++ / libc++)

import sys
from collections.abc import Iterator
from ctypes import CDLL, POINTER, byref, c_char_p, c_int, c_size_t, c_void_p, string_at
from ctypes.util import find_library
from dataclasses import dataclass
from logging import getLogger
from typing import Any, Self

from ..common import MangledName

_logger = getLogger(__name__)

_CXX_RUNTIME_NAMES = ("stdc++", "c++")
_CXX_RUNTIME_FALLBACK_PATHS = ("libstdc++.so.6", "libc++.so.1", "libc++.1.dylib")

# __cxa_demangle status codes
_STATUS_SUCCESS = 0
_STATUS_MEMORY_ALLOCATION_FAILURE = -1
_STATUS_INVALID_MANGLED_NAME = -2
_STATUS_INVALID_ARGUMENT = -3


@dataclass(frozen=True, kw_only=True)
class CxaDemangler:
    cxa_demangle: Any  # ctypes function
    free: Any  # ctypes function

    @classmethod
    def find(cls) -> Self | None:
        # android ndk and msvc runtimes do not provide __cxa_demangle
        if sys.platform in ("android", "win32"):
            return None

        for library in _cxx_runtime_libraries():
            try:
                cxa_demangle = getattr(library, "__cxa_demangle")
            except AttributeError:
                continue

            cxa_demangle.argtypes = [c_char_p, c_char_p, POINTER(c_size_t), POINTER(c_int)]
            cxa_demangle.restype = c_void_p

            free = _libc().free
            free.argtypes = [c_void_p]
            free.restype = None

            return cls(
                cxa_demangle=cxa_demangle,
                free=free,
            )

        _logger.debug("__cxa_demangle not found, c++ names won't be demangled")
        return None

    def demangle(self, mangled: MangledName) -> str | None:
        status = c_int()
        buffer = self.cxa_demangle(mangled.encode(), None, None, byref(status))
        try:
            if status.value == _STATUS_SUCCESS and buffer:
                return string_at(buffer).decode(errors="replace")

            if status.value == _STATUS_MEMORY_ALLOCATION_FAILURE:
                _logger.warning("__cxa_demangle failed to allocate memory for `%s`", mangled)
            elif status.value not in (_STATUS_INVALID_MANGLED_NAME, _STATUS_INVALID_ARGUMENT):
                _logger.debug("__cxa_demangle returned unknown status %d for `%s`", status.value, mangled)

            return None
        finally:
            # buffer is owned by us, release it on every path
            if buffer:
                self.free(buffer)


def _cxx_runtime_libraries() -> Iterator[CDLL]:
    paths = [find_library(name) for name in _CXX_RUNTIME_NAMES]
    paths.extend(_CXX_RUNTIME_FALLBACK_PATHS)

    for path in paths:
        if path is None:
            continue

        try:
            yield CDLL(path)
        except OSError:
            continue


def _libc() -> CDLL:
    path = find_library("c")

    # NOTE: None loads symbols of the current process, which include libc on posix
    return CDLL(path)
