from typing import NamedTuple

from .. import constants


def canonical_name(token: str) -> str:
    """Resolve a qualifier alias ("a", "c", "m", ...) to its canonical name."""
    return constants.QUALIFIER_ALIASES.get(token, token)


def rank_of(name: str) -> str:
    """
    Rank string used to order qualifier names.

    Known names map to their two-digit weight. Anything else ranks by its own
    literal text, so unknown qualifiers sort among themselves by plain string
    order and land wherever that text falls against the two-digit ranks.
    """
    return constants.QUALIFIER_WEIGHTS.get(name, name)


class Qualifier(NamedTuple):
    """A pre-release marker such as ``rc`` with its optional number (``rc2``)."""
    name: str
    number: int = 0

    @property
    def rank(self) -> str:
        return rank_of(self.name)

    def compare(self, other: "Qualifier") -> int:
        # each side falls back to its own name when unlisted
        rank, other_rank = self.rank, other.rank
        if rank > other_rank:
            return 1
        if rank < other_rank:
            return -1

        if self.number > other.number:
            return 1
        if self.number < other.number:
            return -1
        return 0

    def __str__(self):
        return f"{self.name}{self.number}" if self.number else self.name


# Padding for the shorter pre-list; an unqualified version ranks as a release
RELEASE = Qualifier(constants.RELEASE_QUALIFIER, 0)
