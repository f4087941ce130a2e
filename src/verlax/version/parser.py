import logging
from typing import List, Optional

from .. import constants
from .qualifier import Qualifier, canonical_name
from .tokens import Token, tokenize
from .version import Version

logger = logging.getLogger(__name__)


def is_date(text: str) -> bool:
    return constants.DATE_PATTERN.match(text) is not None


def _as_int(token: Token) -> Optional[int]:
    if not token.is_numeric:
        return None
    try:
        return int(token.text)
    except ValueError:
        # past the interpreter's int digit limit; read as a qualifier instead
        return None


def trim_release(release: List[int]) -> List[int]:
    """Drop trailing zeros so "1", "1.0" and "1.0.0" share one release list."""
    end = len(release)
    while end > 0 and release[end - 1] == 0:
        end -= 1
    return release[:end]


class VersionParser:
    """
    Single left-to-right pass over the token list with one token of lookahead.

    Leading integers form the release list until a date, a non-numeric token
    or (with ``markers_end_release``) a "_"/"-" marker closes that section.
    Everything after it is a qualifier, optionally numbered by the digit run
    that directly follows it ("rc2", "beta.3").
    """

    def __init__(self, markers_end_release: bool = False):
        self._markers_end_release = markers_end_release

    @property
    def markers_end_release(self) -> bool:
        return self._markers_end_release

    def parse(self, text: str) -> Version:
        tokens = tokenize(text.lower())
        if not self._markers_end_release:
            # invisible, so "rc-2" still reads as rc2
            tokens = [t for t in tokens if not t.is_marker]
        release: List[int] = []
        date: Optional[str] = None
        pre_list: List[Qualifier] = []
        in_release = True

        i = 0
        while i < len(tokens):
            token = tokens[i]
            i += 1

            if token.is_marker:
                in_release = False
                continue

            if is_date(token.text):
                date = token.text.ljust(constants.DATE_WIDTH, "0")
                in_release = False
                continue

            if in_release:
                n = _as_int(token)
                if n is not None:
                    release.append(n)
                    continue
                in_release = False

            name = canonical_name(token.text)
            number = 0
            # a numeric qualifier never takes a suffix of its own
            if not token.is_numeric and i < len(tokens):
                following = tokens[i]
                if not is_date(following.text):
                    n = _as_int(following)
                    if n is not None:
                        number = n
                        i += 1
            pre_list.append(Qualifier(name, number))

        version = Version(text, trim_release(release), date, pre_list)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Parsed '{text}': release={list(version.release)}, date={version.date}, "
                f"pre={[str(q) for q in version.pre_list]}"
            )
        return version

    def __repr__(self):
        return f"VersionParser(markers_end_release={self._markers_end_release})"


_default_parser = VersionParser()


def parse(text: str) -> Version:
    """Parse any string into a Version; this never fails."""
    return _default_parser.parse(text)
