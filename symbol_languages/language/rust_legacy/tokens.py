from collections.abc import Mapping
from types import MappingProxyType

# characters not allowed in itanium identifiers are emitted by legacy rustc as `$token$`
ESCAPE_TOKENS: Mapping[str, str] = MappingProxyType(
    {
        "C": ",",
        # punctuation
        "SP": "@",
        "BP": "*",
        "RF": "&",
        "LT": "<",
        "GT": ">",
        "LP": "(",
        "RP": ")",
        # unicode escapes, `u` + lowercase hex code point
        "u20": " ",
        "u22": '"',
        "u27": "'",
        "u2b": "+",
        "u3b": ";",
        "u5b": "[",
        "u5d": "]",
        "u7b": "{",
        "u7d": "}",
        "u7e": "~",
    }
)

ESCAPE_MARKER = "$"
