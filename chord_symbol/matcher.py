"""Modifier symbol matching.

Scans a normalized descriptor for known modifier spellings and turns each
match into a modifier id plus the intervals that modifier includes and omits.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chord_symbol.tables import ChordTables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Modifiers found in a descriptor, in order of appearance.

    Parameters
    ----------
    modifiers : tuple[str, ...]
        Modifier ids, one per matched symbol.
    included : tuple[str, ...]
        Intervals included by the matched modifiers.
    omitted : tuple[str, ...]
        Intervals omitted by the matched modifiers.
    """

    modifiers: tuple[str, ...]
    included: tuple[str, ...]
    omitted: tuple[str, ...]


@lru_cache(maxsize=32)
def symbols_pattern(tables: ChordTables) -> re.Pattern[str]:
    """Compile the alternation of every modifier spelling, longest first.

    Python alternation takes the first alternative that matches, so ordering
    by length makes every position consume the longest known symbol.
    """
    return re.compile("|".join(re.escape(symbol) for symbol in tables.symbol_variants))


def match_modifiers(descriptor: str, tables: ChordTables) -> MatchResult | None:
    """Match a normalized descriptor against the modifier symbol table.

    Parameters
    ----------
    descriptor : str
        A descriptor already passed through ``normalize_descriptor``.
    tables : ChordTables
        The lookup tables to match against.

    Returns
    -------
    MatchResult | None
        The matched modifiers, or None if nothing matched or if characters
        other than whitespace are left unexplained.

    Raises
    ------
    TableError
        If a matched modifier has no detail entry.

    Examples
    --------
    >>> from chord_symbol.tables import DEFAULT_TABLES
    >>> match_modifiers("m7 b5", DEFAULT_TABLES).modifiers
    ('minor', 'dominant-7', 'flat-5')
    >>> match_modifiers("xyz", DEFAULT_TABLES) is None
    True
    """
    pattern = symbols_pattern(tables)

    modifiers: list[str] = []
    included: list[str] = []
    omitted: list[str] = []

    for match in pattern.finditer(descriptor):
        modifier_id = tables.modifier(match.group(0))
        detail = tables.detail(modifier_id)

        modifiers.append(modifier_id)
        included.extend(detail.includes)
        omitted.extend(detail.omits)

    if not modifiers:
        logger.debug("No modifier found in descriptor %r", descriptor)
        return None

    remaining = pattern.sub("", descriptor).strip()
    if remaining:
        logger.debug("Unmatched characters %r left in descriptor %r", remaining, descriptor)
        return None

    return MatchResult(
        modifiers=tuple(modifiers),
        included=tuple(included),
        omitted=tuple(omitted),
    )
