"""Static lookup tables consumed by the chord symbol parser.

This module holds the note spelling table, the modifier symbol table, the
modifier detail table and the interval-to-semitone table, plus the
``ChordTables`` container that bundles them as read-only mappings.

The tables are plain data. They are built once at import time into
``DEFAULT_TABLES`` and shared by every parse call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class TableError(ValueError):
    """Raised when the lookup tables are inconsistent."""


# ----------------------------
# Notes
# ----------------------------

# Spelling variant to canonical note name
NOTE_VARIANTS: dict[str, str] = {
    "A": "A",
    "A#": "A#",
    "A♯": "A#",
    "Bb": "Bb",
    "B♭": "Bb",
    "B": "B",
    "C": "C",
    "C#": "C#",
    "C♯": "C#",
    "Db": "Db",
    "D♭": "Db",
    "D": "D",
    "D#": "D#",
    "D♯": "D#",
    "Eb": "Eb",
    "E♭": "Eb",
    "E": "E",
    "F": "F",
    "F#": "F#",
    "F♯": "F#",
    "Gb": "Gb",
    "G♭": "Gb",
    "G": "G",
    "G#": "G#",
    "G♯": "G#",
    "Ab": "Ab",
    "A♭": "Ab",
}

# ----------------------------
# Modifier ids
# ----------------------------

MAJOR = "major"
MINOR = "minor"
DIMINISHED = "diminished"
DIMINISHED_7 = "diminished-7"
HALF_DIMINISHED = "half-diminished"
AUGMENTED = "augmented"
POWER = "power"

SUS = "sus"
SUS2 = "sus2"

MAJOR_6 = "major-6"
SIX_NINE = "six-nine"
DOMINANT_7 = "dominant-7"
MAJOR_7 = "major-7"
DOMINANT_9 = "dominant-9"
MAJOR_9 = "major-9"
DOMINANT_11 = "dominant-11"
MAJOR_11 = "major-11"
DOMINANT_13 = "dominant-13"
MAJOR_13 = "major-13"

FLAT_5 = "flat-5"
SHARP_5 = "sharp-5"
FLAT_9 = "flat-9"
SHARP_9 = "sharp-9"
SHARP_11 = "sharp-11"
FLAT_13 = "flat-13"

ADD_2 = "add-2"
ADD_4 = "add-4"
ADD_6 = "add-6"
ADD_9 = "add-9"
ADD_11 = "add-11"
ADD_13 = "add-13"
OMIT_3 = "omit-3"
OMIT_5 = "omit-5"

# Modifiers that rule out a major reading of the chord
NON_MAJOR_MODIFIERS: frozenset[str] = frozenset({MINOR, DIMINISHED, DIMINISHED_7, HALF_DIMINISHED})

# ----------------------------
# Modifier symbols
# ----------------------------

# Spellings as they appear once the descriptor is normalized
# (lowercase except for the major "M").
MODIFIER_SYMBOLS: dict[str, str] = {
    # Qualities
    "M": MAJOR,
    "ma": MAJOR,
    "maj": MAJOR,
    "Ma": MAJOR,
    "Maj": MAJOR,
    "major": MAJOR,
    "m": MINOR,
    "mi": MINOR,
    "min": MINOR,
    "minor": MINOR,
    "-": MINOR,
    "dim": DIMINISHED,
    "diminished": DIMINISHED,
    "°": DIMINISHED,
    "o": DIMINISHED,
    "dim7": DIMINISHED_7,
    "diminished7": DIMINISHED_7,
    "°7": DIMINISHED_7,
    "o7": DIMINISHED_7,
    "ø": HALF_DIMINISHED,
    "Ø": HALF_DIMINISHED,
    "ø7": HALF_DIMINISHED,
    "Ø7": HALF_DIMINISHED,
    "halfdim": HALF_DIMINISHED,
    "aug": AUGMENTED,
    "augmented": AUGMENTED,
    "+": AUGMENTED,
    "5": POWER,
    "power": POWER,
    # Suspensions
    "sus": SUS,
    "sus4": SUS,
    "suspended": SUS,
    "suspended4": SUS,
    "sus2": SUS2,
    "suspended2": SUS2,
    # Sixths and sevenths
    "6": MAJOR_6,
    "69": SIX_NINE,
    "6/9": SIX_NINE,
    "96": SIX_NINE,
    "9/6": SIX_NINE,
    "7": DOMINANT_7,
    "dom7": DOMINANT_7,
    "M7": MAJOR_7,
    "Ma7": MAJOR_7,
    "Maj7": MAJOR_7,
    "ma7": MAJOR_7,
    "maj7": MAJOR_7,
    "major7": MAJOR_7,
    "Δ": MAJOR_7,
    "Δ7": MAJOR_7,
    "j7": MAJOR_7,
    # Extensions
    "9": DOMINANT_9,
    "dom9": DOMINANT_9,
    "M9": MAJOR_9,
    "Ma9": MAJOR_9,
    "Maj9": MAJOR_9,
    "ma9": MAJOR_9,
    "maj9": MAJOR_9,
    "major9": MAJOR_9,
    "Δ9": MAJOR_9,
    "11": DOMINANT_11,
    "dom11": DOMINANT_11,
    "M11": MAJOR_11,
    "Ma11": MAJOR_11,
    "Maj11": MAJOR_11,
    "ma11": MAJOR_11,
    "maj11": MAJOR_11,
    "major11": MAJOR_11,
    "Δ11": MAJOR_11,
    "13": DOMINANT_13,
    "dom13": DOMINANT_13,
    "M13": MAJOR_13,
    "Ma13": MAJOR_13,
    "Maj13": MAJOR_13,
    "ma13": MAJOR_13,
    "maj13": MAJOR_13,
    "major13": MAJOR_13,
    "Δ13": MAJOR_13,
    # Alterations
    "b5": FLAT_5,
    "♭5": FLAT_5,
    "-5": FLAT_5,
    "#5": SHARP_5,
    "♯5": SHARP_5,
    "+5": SHARP_5,
    "b9": FLAT_9,
    "♭9": FLAT_9,
    "#9": SHARP_9,
    "♯9": SHARP_9,
    "+9": SHARP_9,
    "#11": SHARP_11,
    "♯11": SHARP_11,
    "+11": SHARP_11,
    "b13": FLAT_13,
    "♭13": FLAT_13,
    # Added and omitted degrees
    "add2": ADD_2,
    "add4": ADD_4,
    "add6": ADD_6,
    "add9": ADD_9,
    "add11": ADD_11,
    "add13": ADD_13,
    "omit3": OMIT_3,
    "no3": OMIT_3,
    "omit5": OMIT_5,
    "no5": OMIT_5,
}


@dataclass(frozen=True)
class ModifierDetail:
    """Intervals contributed by a modifier.

    Parameters
    ----------
    includes : tuple[str, ...]
        Intervals the modifier adds to the chord.
    omits : tuple[str, ...]
        Intervals the modifier removes from the chord.
    """

    includes: tuple[str, ...] = ()
    omits: tuple[str, ...] = ()


MODIFIER_DETAILS: dict[str, ModifierDetail] = {
    MAJOR: ModifierDetail(),
    MINOR: ModifierDetail(includes=("b3",)),
    DIMINISHED: ModifierDetail(includes=("b3", "b5")),
    DIMINISHED_7: ModifierDetail(includes=("b3", "b5", "bb7")),
    HALF_DIMINISHED: ModifierDetail(includes=("b3", "b5", "b7")),
    AUGMENTED: ModifierDetail(includes=("#5",)),
    POWER: ModifierDetail(includes=("5",), omits=("3",)),
    SUS: ModifierDetail(includes=("4",)),
    SUS2: ModifierDetail(includes=("2",)),
    MAJOR_6: ModifierDetail(includes=("6",)),
    SIX_NINE: ModifierDetail(includes=("6", "9")),
    DOMINANT_7: ModifierDetail(includes=("b7",)),
    MAJOR_7: ModifierDetail(includes=("7",)),
    DOMINANT_9: ModifierDetail(includes=("b7", "9")),
    MAJOR_9: ModifierDetail(includes=("7", "9")),
    DOMINANT_11: ModifierDetail(includes=("b7", "9", "11")),
    MAJOR_11: ModifierDetail(includes=("7", "9", "11")),
    DOMINANT_13: ModifierDetail(includes=("b7", "9", "11", "13")),
    MAJOR_13: ModifierDetail(includes=("7", "9", "11", "13")),
    FLAT_5: ModifierDetail(includes=("b5",)),
    SHARP_5: ModifierDetail(includes=("#5",)),
    FLAT_9: ModifierDetail(includes=("b9",)),
    SHARP_9: ModifierDetail(includes=("#9",)),
    SHARP_11: ModifierDetail(includes=("#11",)),
    FLAT_13: ModifierDetail(includes=("b13",)),
    ADD_2: ModifierDetail(includes=("2",)),
    ADD_4: ModifierDetail(includes=("4",)),
    ADD_6: ModifierDetail(includes=("6",)),
    ADD_9: ModifierDetail(includes=("9",)),
    ADD_11: ModifierDetail(includes=("11",)),
    ADD_13: ModifierDetail(includes=("13",)),
    OMIT_3: ModifierDetail(omits=("3", "b3")),
    OMIT_5: ModifierDetail(omits=("5",)),
}

# ----------------------------
# Intervals
# ----------------------------

# Interval name to semitones from root; compound intervals keep their octave
INTERVAL_SEMITONES: dict[str, int] = {
    "1": 0,
    "2": 2,
    "b3": 3,
    "3": 4,
    "4": 5,
    "b5": 6,
    "5": 7,
    "#5": 8,
    "b6": 8,
    "6": 9,
    "bb7": 9,
    "b7": 10,
    "7": 11,
    "b9": 13,
    "9": 14,
    "#9": 15,
    "11": 17,
    "#11": 18,
    "b13": 20,
    "13": 21,
}


def has_none_of(intervals: Iterable[str], candidates: Iterable[str]) -> bool:
    """Check that none of the candidate intervals is present.

    Examples
    --------
    >>> has_none_of(["1", "b3"], ["3", "b3"])
    False
    >>> has_none_of(["1", "4"], ["3", "b3"])
    True
    """
    present = set(intervals)
    return not any(candidate in present for candidate in candidates)


def _longest_first(spellings: Iterable[str]) -> tuple[str, ...]:
    # Stable: equal-length spellings keep table order
    return tuple(sorted(spellings, key=len, reverse=True))


# Hashed by identity: instances key the compiled pattern caches
@dataclass(frozen=True, eq=False)
class ChordTables:
    """Read-only bundle of the lookup tables used by the parser.

    Parameters
    ----------
    notes : Mapping[str, str]
        Note spelling variant to canonical note.
    symbols : Mapping[str, str]
        Modifier spelling to modifier id.
    details : Mapping[str, ModifierDetail]
        Modifier id to the intervals it includes and omits.
    semitones : Mapping[str, int]
        Interval to semitone offset from the root.

    Raises
    ------
    TableError
        If a symbol has no detail entry or a detail names an unknown interval.

    Examples
    --------
    >>> tables = ChordTables.from_dicts(NOTE_VARIANTS, MODIFIER_SYMBOLS, MODIFIER_DETAILS, INTERVAL_SEMITONES)
    >>> tables.note("D♭")
    'Db'
    >>> tables.modifier("maj7")
    'major-7'
    """

    notes: Mapping[str, str]
    symbols: Mapping[str, str]
    details: Mapping[str, ModifierDetail]
    semitones: Mapping[str, int]
    note_variants: tuple[str, ...] = field(init=False)
    symbol_variants: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        # Frozen dataclass: derived fields go through object.__setattr__
        object.__setattr__(self, "notes", MappingProxyType(dict(self.notes)))
        object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols)))
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))
        object.__setattr__(self, "semitones", MappingProxyType(dict(self.semitones)))
        object.__setattr__(self, "note_variants", _longest_first(self.notes))
        object.__setattr__(self, "symbol_variants", _longest_first(self.symbols))
        self.validate()

    @classmethod
    def from_dicts(
        cls,
        notes: Mapping[str, str],
        symbols: Mapping[str, str],
        details: Mapping[str, ModifierDetail],
        semitones: Mapping[str, int],
    ) -> ChordTables:
        """Build tables from plain mappings (copied, never aliased)."""
        return cls(notes=notes, symbols=symbols, details=details, semitones=semitones)

    def validate(self) -> None:
        """Check that every table lookup the parser performs can succeed.

        Raises
        ------
        TableError
            On the first inconsistency found.
        """
        if not self.notes:
            msg = "Note table is empty"
            raise TableError(msg)
        if "1" not in self.semitones:
            msg = "Interval table has no root interval '1'"
            raise TableError(msg)
        for spelling in self.notes:
            if not spelling:
                msg = "Note table contains an empty spelling"
                raise TableError(msg)
        for spelling, modifier_id in self.symbols.items():
            if not spelling:
                msg = f"Modifier table contains an empty spelling for {modifier_id!r}"
                raise TableError(msg)
            if modifier_id not in self.details:
                msg = f"Modifier {modifier_id!r} (symbol {spelling!r}) has no detail entry"
                raise TableError(msg)
        for modifier_id, detail in self.details.items():
            for interval in (*detail.includes, *detail.omits):
                if interval not in self.semitones:
                    msg = f"Modifier {modifier_id!r} uses unknown interval {interval!r}"
                    raise TableError(msg)

    def note(self, spelling: str) -> str:
        """Resolve a note spelling to its canonical note."""
        if spelling in self.notes:
            return self.notes[spelling]
        msg = f"Unknown note spelling: {spelling}"
        raise TableError(msg)

    def modifier(self, symbol: str) -> str:
        """Resolve a modifier spelling to its modifier id."""
        if symbol in self.symbols:
            return self.symbols[symbol]
        msg = f"Unknown modifier symbol: {symbol}"
        raise TableError(msg)

    def detail(self, modifier_id: str) -> ModifierDetail:
        """Return the include/omit intervals of a modifier id."""
        if modifier_id in self.details:
            return self.details[modifier_id]
        msg = f"No detail entry for modifier: {modifier_id}"
        raise TableError(msg)

    def semitone(self, interval: str) -> int:
        """Return the semitone offset of an interval."""
        if interval in self.semitones:
            return self.semitones[interval]
        msg = f"Unknown interval: {interval}"
        raise TableError(msg)

    def with_overrides(
        self,
        notes: Mapping[str, str] | None = None,
        symbols: Mapping[str, str] | None = None,
        details: Mapping[str, ModifierDetail] | None = None,
    ) -> ChordTables:
        """Return new tables extended with extra spellings or modifiers.

        The current instance is left untouched.

        Examples
        --------
        >>> custom = DEFAULT_TABLES.with_overrides(symbols={"mj7": "major-7"})
        >>> custom.modifier("mj7")
        'major-7'
        >>> "mj7" in DEFAULT_TABLES.symbols
        False
        """
        return ChordTables(
            notes={**self.notes, **(notes or {})},
            symbols={**self.symbols, **(symbols or {})},
            details={**self.details, **(details or {})},
            semitones=self.semitones,
        )


DEFAULT_TABLES = ChordTables.from_dicts(NOTE_VARIANTS, MODIFIER_SYMBOLS, MODIFIER_DETAILS, INTERVAL_SEMITONES)
