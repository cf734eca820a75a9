"""Chord data model for chord-symbol.

This module defines the immutable record returned by ``parse_chord``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Chord:
    """A parsed chord symbol.

    Parameters
    ----------
    input : str
        The chord symbol as given (e.g., "Cmaj7(add13)/E").
    root_note : str
        Canonical root note (e.g., "C", "F#", "Bb").
    bass_note : str | None
        Canonical bass note for slash chords, None otherwise.
    descriptor : str | None
        Raw text between root and bass (e.g., "maj7(add13)"), None if empty.
    parsable_descriptor : str | None
        The descriptor after normalization (e.g., "maj7 add13").
    modifiers : tuple[str, ...]
        Modifier ids in order of appearance in the descriptor.
    intervals : tuple[str, ...]
        Unique intervals, ascending by semitone.
    semitones : tuple[int, ...]
        Semitone offset of each interval, index-aligned with ``intervals``.

    Examples
    --------
    >>> from chord_symbol import parse_chord
    >>> chord = parse_chord("Cm7/Bb")
    >>> chord.root_note, chord.bass_note
    ('C', 'Bb')
    >>> chord.intervals
    ('1', 'b3', '5', 'b7')
    """

    input: str
    root_note: str
    bass_note: str | None = None
    descriptor: str | None = None
    parsable_descriptor: str | None = None
    modifiers: tuple[str, ...] = ()
    intervals: tuple[str, ...] = ()
    semitones: tuple[int, ...] = ()

    @property
    def is_slash_chord(self) -> bool:
        """Whether a bass note was given."""
        return self.bass_note is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict of the chord fields.

        Returns
        -------
        dict[str, Any]
            Field names in camelCase, tuples as lists, unset fields omitted.

        Examples
        --------
        >>> from chord_symbol import parse_chord
        >>> parse_chord("C")
        Chord(input='C', root_note='C', bass_note=None, descriptor=None, parsable_descriptor=None, modifiers=(), intervals=('1', '3', '5'), semitones=(0, 4, 7))
        >>> parse_chord("C").to_dict()["semitones"]
        [0, 4, 7]
        """
        result: dict[str, Any] = {
            "input": self.input,
            "rootNote": self.root_note,
        }
        if self.bass_note is not None:
            result["bassNote"] = self.bass_note
        if self.descriptor is not None:
            result["descriptor"] = self.descriptor
            result["parsableDescriptor"] = self.parsable_descriptor
        result["modifiers"] = list(self.modifiers)
        result["intervals"] = list(self.intervals)
        result["semitones"] = list(self.semitones)
        return result
