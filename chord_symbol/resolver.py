"""Interval resolution.

Folds the intervals contributed by the matched modifiers into the final
interval set of a chord. Music-theory defaults are expressed as an ordered
pipeline of rules; each rule is a pure function from one ``IntervalState``
to the next and can be exercised on its own.

Rule order matters. The pipeline is:

1. ``add_third``: a chord has a major third unless it already has a third
   or is suspended.
2. ``add_fifth``: a chord has a perfect fifth unless it already has one
   (diminished, perfect, augmented) or carries a flat thirteenth.
3. ``suspend_major_eleventh``: an eleventh chord with major intent is read
   as a suspended chord (4 instead of 3 and 11).
4. ``drop_fifth_for_flat_thirteenth``: a flat thirteenth replaces the fifth.
5. ``drop_eleventh_for_thirteenth``: a thirteenth chord with major intent
   drops the eleventh.
6. ``suspend_minor``: a minor suspended chord trades its minor third for a 4.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chord_symbol.tables import (
    DOMINANT_11,
    DOMINANT_13,
    MAJOR_11,
    MAJOR_13,
    MINOR,
    NON_MAJOR_MODIFIERS,
    SUS,
    SUS2,
    has_none_of,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from chord_symbol.tables import ChordTables

logger = logging.getLogger(__name__)

ROOT_INTERVAL = "1"


@dataclass(frozen=True)
class IntervalState:
    """Intermediate state threaded through the resolution rules.

    Parameters
    ----------
    modifiers : tuple[str, ...]
        Modifier ids found in the descriptor.
    included : tuple[str, ...]
        Intervals included so far, possibly with duplicates.
    omitted : tuple[str, ...]
        Intervals to remove from the final set.
    """

    modifiers: tuple[str, ...]
    included: tuple[str, ...] = (ROOT_INTERVAL,)
    omitted: tuple[str, ...] = ()

    def include(self, *intervals: str) -> IntervalState:
        return replace(self, included=(*self.included, *intervals))

    def omit(self, *intervals: str) -> IntervalState:
        return replace(self, omitted=(*self.omitted, *intervals))

    def has_modifier(self, *modifier_ids: str) -> bool:
        """Check whether any of the given modifiers is present."""
        return any(modifier_id in self.modifiers for modifier_id in modifier_ids)


@dataclass(frozen=True)
class Resolution:
    """Final intervals of a chord, ascending and index-aligned.

    Parameters
    ----------
    intervals : tuple[str, ...]
        Unique intervals sorted by semitone.
    semitones : tuple[int, ...]
        Semitone offset of each interval, same order.
    """

    intervals: tuple[str, ...]
    semitones: tuple[int, ...]


def has_major_intent(modifiers: Iterable[str]) -> bool:
    """Check that no minor or diminished modifier is present.

    Examples
    --------
    >>> has_major_intent(["dominant-7"])
    True
    >>> has_major_intent(["minor", "dominant-7"])
    False
    """
    return NON_MAJOR_MODIFIERS.isdisjoint(modifiers)


def add_third(state: IntervalState) -> IntervalState:
    if has_none_of(state.included, ("b3", "3")) and not state.has_modifier(SUS, SUS2):
        return state.include("3")
    return state


def add_fifth(state: IntervalState) -> IntervalState:
    if has_none_of(state.included, ("b5", "5", "#5", "b13")):
        return state.include("5")
    return state


def suspend_major_eleventh(state: IntervalState) -> IntervalState:
    if has_major_intent(state.modifiers) and state.has_modifier(MAJOR_11, DOMINANT_11):
        return state.omit("b3", "3", "11").include("4")
    return state


def drop_fifth_for_flat_thirteenth(state: IntervalState) -> IntervalState:
    if "b13" in state.included:
        return state.omit("5")
    return state


def drop_eleventh_for_thirteenth(state: IntervalState) -> IntervalState:
    if has_major_intent(state.modifiers) and state.has_modifier(DOMINANT_13, MAJOR_13):
        return state.omit("11")
    return state


def suspend_minor(state: IntervalState) -> IntervalState:
    if state.has_modifier(MINOR) and state.has_modifier(SUS):
        return state.omit("b3").include("4")
    return state


# Applied in this order
RULES: tuple[Callable[[IntervalState], IntervalState], ...] = (
    add_third,
    add_fifth,
    suspend_major_eleventh,
    drop_fifth_for_flat_thirteenth,
    drop_eleventh_for_thirteenth,
    suspend_minor,
)


def apply_rules(state: IntervalState) -> IntervalState:
    """Run every resolution rule in order."""
    for rule in RULES:
        new_state = rule(state)
        if new_state != state:
            logger.debug("Rule %s applied to %s", rule.__name__, state.modifiers)
        state = new_state
    return state


def resolve_intervals(
    modifiers: tuple[str, ...],
    included: tuple[str, ...],
    omitted: tuple[str, ...],
    tables: ChordTables,
) -> Resolution:
    """Resolve matched modifiers into the final intervals of a chord.

    Parameters
    ----------
    modifiers : tuple[str, ...]
        Modifier ids found in the descriptor (may be empty).
    included : tuple[str, ...]
        Intervals included by those modifiers.
    omitted : tuple[str, ...]
        Intervals omitted by those modifiers.
    tables : ChordTables
        Tables providing the semitone of each interval.

    Returns
    -------
    Resolution
        Unique intervals and their semitones, ascending.

    Raises
    ------
    TableError
        If an interval has no semitone entry.

    Examples
    --------
    >>> from chord_symbol.tables import DEFAULT_TABLES
    >>> resolve_intervals((), (), (), DEFAULT_TABLES)
    Resolution(intervals=('1', '3', '5'), semitones=(0, 4, 7))
    >>> resolve_intervals(("sus",), ("4",), (), DEFAULT_TABLES).intervals
    ('1', '4', '5')
    """
    state = apply_rules(
        IntervalState(
            modifiers=modifiers,
            included=(ROOT_INTERVAL, *included),
            omitted=omitted,
        )
    )

    omitted_set = set(state.omitted)
    # dict.fromkeys: deduplicates while keeping first-seen order
    remaining = [interval for interval in dict.fromkeys(state.included) if interval not in omitted_set]
    intervals = sorted(remaining, key=tables.semitone)
    semitones = [tables.semitone(interval) for interval in intervals]

    return Resolution(intervals=tuple(intervals), semitones=tuple(semitones))
