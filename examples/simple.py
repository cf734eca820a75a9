import sys

from chord_symbol import parse_chord

for symbol in ["Cmaj7", "Dm7b5/F", "G7(no5,add13)", "Bbsus2", "Cxyz"]:
    chord = parse_chord(symbol)
    if chord is None:
        sys.stdout.write(f"{symbol}: not a chord\n")
        continue

    # Intervals and semitones are index-aligned
    degrees = " ".join(f"{i}({s})" for i, s in zip(chord.intervals, chord.semitones))
    bass = f" over {chord.bass_note}" if chord.bass_note else ""
    sys.stdout.write(f"{symbol}: {chord.root_note}{bass} -> {degrees}\n")
