from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Token:
    token: str  # text between markers
    character: str  # resolved through escape tokens table
    end: int  # position right after closing marker

    def __post_init__(self) -> None:
        # tokens always decode to exactly one character
        assert len(self.character) == 1

        # end points past at least `token$`
        assert self.end > len(self.token)


@dataclass(frozen=True)
class Decoded:
    text: str


@dataclass(frozen=True, kw_only=True)
class ParseError:
    position: int  # position in input where decoding stopped
    reason: str

    def __post_init__(self) -> None:
        assert self.position >= 0

    def __str__(self) -> str:
        return f"{self.reason} (at {self.position})"
