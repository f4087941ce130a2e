from itertools import zip_longest
from typing import Any, Iterable, Optional, Tuple

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .qualifier import Qualifier, RELEASE


class Version:
    """
        Parsed, comparable form of one loosely formatted version string.

        Instances come from ``verlax.parse`` and never change afterwards.
        The empty string is a sentinel meaning "no version": every relational
        helper involving it returns False, including ``eq`` against itself.
    """
    __slots__ = ("_original", "_release", "_date", "_pre_list")

    def __init__(
        self,
        original: str,
        release: Iterable[int] = (),
        date: Optional[str] = None,
        pre_list: Iterable[Qualifier] = (),
    ):
        self._original = original
        self._release: Tuple[int, ...] = tuple(release)
        self._date = date
        self._pre_list: Tuple[Qualifier, ...] = tuple(pre_list)

    @property
    def original_text(self) -> str:
        return self._original

    @property
    def release(self) -> Tuple[int, ...]:
        return self._release

    @property
    def date(self) -> Optional[str]:
        return self._date

    @property
    def pre_list(self) -> Tuple[Qualifier, ...]:
        return self._pre_list

    @property
    def is_empty(self) -> bool:
        return self._original == ""

    def compare(self, other: "Version") -> int:
        return compare(self, other)

    def _comparable(self, other: "Version") -> bool:
        return not (self.is_empty or other.is_empty)

    def lt(self, other: "Version") -> bool:
        return self._comparable(other) and compare(self, other) == -1

    def lte(self, other: "Version") -> bool:
        return self._comparable(other) and compare(self, other) <= 0

    def gt(self, other: "Version") -> bool:
        return self._comparable(other) and compare(self, other) == 1

    def gte(self, other: "Version") -> bool:
        return self._comparable(other) and compare(self, other) >= 0

    def eq(self, other: "Version") -> bool:
        return self._comparable(other) and compare(self, other) == 0

    # Operators follow the helpers above, sentinel rule included, so they
    # are spelled out instead of derived with functools.total_ordering.
    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.gte(other)

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.eq(other)

    def __hash__(self):
        # The date tier is skipped when one side has no date, so it cannot
        # take part in the hash; trailing "release 0" entries equal padding.
        pre = [(q.rank, q.number) for q in self._pre_list]
        while pre and pre[-1] == (RELEASE.rank, 0):
            pre.pop()
        return hash((self._release, tuple(pre)))

    def __str__(self):
        return self._original

    def __repr__(self):
        return f"Version('{self._original}')"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Let pydantic models declare ``Version`` fields, fed and dumped as strings."""
        from .parser import parse

        from_str_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(parse),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str_schema]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: instance.original_text
            ),
        )


def _compare_release(a: Tuple[int, ...], b: Tuple[int, ...]) -> int:
    for x, y in zip(a, b):
        if x > y:
            return 1
        if x < y:
            return -1
    # trailing zeros are trimmed at parse time, so a longer list is newer
    if len(a) > len(b):
        return 1
    if len(a) < len(b):
        return -1
    return 0


def compare(a: Version, b: Version) -> int:
    """
    Three-way order of two versions: -1, 0 or 1.

    Release numbers decide first, then the embedded date (only when both
    sides carry one), then the qualifier lists, the shorter one padded with
    ``release 0`` so that "1.0" outranks "1.0-rc1".
    """
    r = _compare_release(a.release, b.release)
    if r != 0:
        return r

    if a.date is not None and b.date is not None:
        if a.date > b.date:
            return 1
        if a.date < b.date:
            return -1

    for pre1, pre2 in zip_longest(a.pre_list, b.pre_list, fillvalue=RELEASE):
        r = pre1.compare(pre2)
        if r != 0:
            return r
    return 0
