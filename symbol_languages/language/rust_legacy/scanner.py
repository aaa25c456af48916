from .model import ParseError, Token
from .tokens import ESCAPE_MARKER, ESCAPE_TOKENS


def scan_token(text: str, start: int) -> Token | ParseError:
    # start points right after the opening marker
    assert 0 < start <= len(text)
    assert text[start - 1] == ESCAPE_MARKER

    end = text.find(ESCAPE_MARKER, start)
    if end == -1:
        return ParseError(
            position=start - 1,
            reason="unterminated escape token",
        )

    token = text[start:end]

    character = ESCAPE_TOKENS.get(token)
    if character is None:
        return ParseError(
            position=start - 1,
            reason=f"unknown escape token `{token}`",
        )

    return Token(
        token=token,
        character=character,
        end=end + 1,
    )
