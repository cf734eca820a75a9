"""Chord symbol parser.

This library parses chord symbols as written in lead sheets and chord charts
(e.g., "Cmaj7", "Dm7b5/F", "G7(no5,add13)") into their root note, optional
bass note, modifiers, and the intervals and semitones the chord contains.

Examples
--------
>>> from chord_symbol import parse_chord

>>> chord = parse_chord("Cm7")
>>> chord.root_note
'C'
>>> chord.intervals
('1', 'b3', '5', 'b7')
>>> chord.semitones
(0, 3, 7, 10)

>>> # Slash chords keep the bass note
>>> parse_chord("G7/B").bass_note
'B'

>>> # Anything that is not a chord gives None
>>> parse_chord("Hello") is None
True
"""

from chord_symbol.models import Chord
from chord_symbol.normalizer import normalize_descriptor
from chord_symbol.parser import parse_chord, parse_chords
from chord_symbol.tables import DEFAULT_TABLES, ChordTables, ModifierDetail, TableError

__all__ = [
    "DEFAULT_TABLES",
    "Chord",
    "ChordTables",
    "ModifierDetail",
    "TableError",
    "normalize_descriptor",
    "parse_chord",
    "parse_chords",
]
