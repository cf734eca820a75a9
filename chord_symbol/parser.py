"""Chord symbol parsing.

This module provides ``parse_chord``, which splits a chord symbol into root,
descriptor and bass note, then runs the descriptor through normalization,
modifier matching and interval resolution.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import TYPE_CHECKING

from chord_symbol.matcher import match_modifiers
from chord_symbol.models import Chord
from chord_symbol.normalizer import normalize_descriptor
from chord_symbol.resolver import resolve_intervals
from chord_symbol.tables import DEFAULT_TABLES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chord_symbol.tables import ChordTables

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def chord_pattern(tables: ChordTables) -> re.Pattern[str]:
    """Compile the root/descriptor/bass pattern for a set of tables.

    The descriptor group is lazy so a trailing ``/<note>`` is taken as the
    bass note rather than absorbed into the descriptor. It does not cross line
    breaks, so a symbol split over lines is rejected.
    """
    notes = "|".join(re.escape(variant) for variant in tables.note_variants)
    return re.compile(rf"^({notes})(.*?)(?:/({notes}))?$")


def parse_chord(text: str, tables: ChordTables = DEFAULT_TABLES) -> Chord | None:
    """Parse a chord symbol.

    Parameters
    ----------
    text : str
        The chord symbol (e.g., "Cmaj7", "F#mi7b5/A", "G7(omit3,add13)").
    tables : ChordTables
        Lookup tables to parse with. Defaults to the built-in tables.

    Returns
    -------
    Chord | None
        The parsed chord, or None if the text is not a recognized chord.

    Raises
    ------
    TypeError
        If ``text`` is not a string.

    Examples
    --------
    >>> chord = parse_chord("Dm7b5/F")
    >>> chord.root_note, chord.bass_note
    ('D', 'F')
    >>> chord.modifiers
    ('minor', 'dominant-7', 'flat-5')
    >>> chord.intervals
    ('1', 'b3', 'b5', 'b7')
    >>> parse_chord("Cxyz") is None
    True
    """
    if not isinstance(text, str):
        msg = f"Chord symbol must be a string, not {type(text).__name__}"
        raise TypeError(msg)

    result = chord_pattern(tables).fullmatch(text)
    if result is None:
        logger.debug("No root note at the start of %r", text)
        return None

    root_variant, descriptor, bass_variant = result.groups()
    root_note = tables.note(root_variant)
    bass_note = tables.note(bass_variant) if bass_variant else None

    modifiers: tuple[str, ...] = ()
    included: tuple[str, ...] = ()
    omitted: tuple[str, ...] = ()
    parsable_descriptor = None

    if descriptor:
        parsable_descriptor = normalize_descriptor(descriptor)
        matched = match_modifiers(parsable_descriptor, tables)
        if matched is None:
            logger.debug("Unparsable descriptor %r in %r", descriptor, text)
            return None
        modifiers, included, omitted = matched.modifiers, matched.included, matched.omitted

    resolution = resolve_intervals(modifiers, included, omitted, tables)

    return Chord(
        input=text,
        root_note=root_note,
        bass_note=bass_note,
        descriptor=descriptor or None,
        parsable_descriptor=parsable_descriptor,
        modifiers=modifiers,
        intervals=resolution.intervals,
        semitones=resolution.semitones,
    )


def parse_chords(texts: Iterable[str], tables: ChordTables = DEFAULT_TABLES) -> list[Chord | None]:
    """Parse several chord symbols, keeping their order.

    Examples
    --------
    >>> [c.root_note if c else None for c in parse_chords(["Am", "H7", "E/G#"])]
    ['A', None, 'E']
    """
    return [parse_chord(text, tables) for text in texts]
