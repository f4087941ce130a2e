from enum import Enum
from typing import List, NamedTuple

from .. import constants


class TokenKind(Enum):
    DIGITS = "digits"
    LETTERS = "letters"
    MARKER = "marker"


class Token(NamedTuple):
    kind: TokenKind
    text: str

    @property
    def is_marker(self) -> bool:
        return self.kind is TokenKind.MARKER

    @property
    def is_numeric(self) -> bool:
        return self.kind is TokenKind.DIGITS


def _kind_of(ch: str) -> TokenKind | None:
    # ASCII only, str.isdigit() would also accept other scripts' digits
    if "0" <= ch <= "9":
        return TokenKind.DIGITS
    if "a" <= ch <= "z":
        return TokenKind.LETTERS
    return None


def tokenize(text: str) -> List[Token]:
    """
    Split an already-lowercased version string into maximal runs.

    Digit runs and letter runs are flushed whenever the character category
    changes. "_" and "-" are emitted as single-character MARKER tokens, every
    other character ends the current run and is dropped.

        >>> [t.text for t in tokenize("1.0_rc2")]
        ['1', '0', '_', 'rc', '2']
    """
    tokens: List[Token] = []
    buf: List[str] = []
    last: TokenKind | None = None

    def flush():
        if buf:
            tokens.append(Token(last, "".join(buf)))
            buf.clear()

    for ch in text:
        kind = _kind_of(ch)
        if kind is None:
            flush()
            last = None
            if ch in constants.MARKERS:
                tokens.append(Token(TokenKind.MARKER, ch))
            continue
        if kind is not last:
            flush()
            last = kind
        buf.append(ch)

    flush()
    return tokens
