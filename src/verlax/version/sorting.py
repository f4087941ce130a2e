import logging
from functools import cmp_to_key
from typing import Iterable, List, Optional, Union

from .parser import parse
from .version import Version, compare

logger = logging.getLogger(__name__)

VersionLike = Union[str, Version]


def _coerce(items: Iterable[VersionLike]) -> List[Version]:
    return [item if isinstance(item, Version) else parse(item) for item in items]


def sort_versions(items: Iterable[VersionLike], reverse: bool = False) -> List[Version]:
    """Stable sort of version strings and/or Versions, oldest first."""
    return sorted(_coerce(items), key=cmp_to_key(compare), reverse=reverse)


def latest(items: Iterable[VersionLike]) -> Optional[Version]:
    """Highest version in ``items``, ignoring empty sentinels."""
    candidates = [v for v in _coerce(items) if not v.is_empty]
    if not candidates:
        logger.debug("No comparable versions given to latest()")
        return None
    return max(candidates, key=cmp_to_key(compare))


def earliest(items: Iterable[VersionLike]) -> Optional[Version]:
    """Lowest version in ``items``, ignoring empty sentinels."""
    candidates = [v for v in _coerce(items) if not v.is_empty]
    if not candidates:
        logger.debug("No comparable versions given to earliest()")
        return None
    return min(candidates, key=cmp_to_key(compare))
