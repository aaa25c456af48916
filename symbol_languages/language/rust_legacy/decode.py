from enum import Enum, auto

from .model import Decoded, ParseError, Token
from .scanner import scan_token
from .tokens import ESCAPE_MARKER


class DecoderState(Enum):
    LITERAL = auto()
    ESCAPE = auto()


def decode(text: str) -> Decoded | ParseError:
    output = list[str]()

    position = 0
    state = DecoderState.LITERAL

    while position < len(text):
        match state:
            case DecoderState.LITERAL:
                character = text[position]
                match character:
                    case "_":
                        # NOTE: meaning of bare underscore in this encoding is unknown, refuse instead of guessing
                        return ParseError(
                            position=position,
                            reason="bare underscore is not supported",
                        )
                    case _ if character == ESCAPE_MARKER:
                        state = DecoderState.ESCAPE
                    case _:
                        output.append(character)
                position += 1

            case DecoderState.ESCAPE:
                match scan_token(text, position):
                    case ParseError() as error:
                        return error
                    case Token(character=character, end=end):
                        output.append(character)
                        # skip whole token including closing marker
                        position = end
                        state = DecoderState.LITERAL

    # input ended right after opening marker
    if state is DecoderState.ESCAPE:
        return ParseError(
            position=position - 1,
            reason="unterminated escape token",
        )

    return Decoded("".join(output))
