import re
from logging import getLogger

from ..common import CxxDemangler, DemangleFailure, DemangleResult, DemangleSuccess, MangledName
from .decode import decode
from .model import Decoded, ParseError

_logger = getLogger(__name__)

# legacy rustc reuses itanium mangling and appends `h` + 16 hex digits hash as the last path segment
_HASH_SUFFIX_REGEX = re.compile(r"([A-Za-z0-9_.:$]+)::h([0-9a-f]{16})")


def demangle(mangled: MangledName, cxx_demangler: CxxDemangler) -> DemangleResult:
    # pass 1 - itanium layer
    cxx_demangled = cxx_demangler.demangle(mangled)
    if cxx_demangled is None:
        return DemangleFailure()

    # pass 2 - strip hash suffix
    match_ = _HASH_SUFFIX_REGEX.fullmatch(cxx_demangled)
    if match_ is None:
        _logger.debug("`%s` (`%s`) is not a legacy rust name", mangled, cxx_demangled)
        return DemangleFailure()

    # pass 3 - escape tokens
    match decode(match_.group(1)):
        case Decoded(text=text):
            return DemangleSuccess(text)
        case ParseError() as error:
            _logger.debug("Unable to decode `%s`: %s", mangled, error)
            return DemangleFailure()
