"""Tests for interval resolution rules."""

import pytest

from chord_symbol.resolver import (
    RULES,
    IntervalState,
    Resolution,
    add_fifth,
    add_third,
    drop_eleventh_for_thirteenth,
    drop_fifth_for_flat_thirteenth,
    has_major_intent,
    resolve_intervals,
    suspend_major_eleventh,
    suspend_minor,
)
from chord_symbol.tables import (
    DEFAULT_TABLES,
    DIMINISHED,
    DIMINISHED_7,
    DOMINANT_11,
    DOMINANT_13,
    DOMINANT_7,
    HALF_DIMINISHED,
    MAJOR_11,
    MAJOR_13,
    MINOR,
    SUS,
    SUS2,
    ChordTables,
    ModifierDetail,
    TableError,
)


class TestHasMajorIntent:
    """Major intent predicate."""

    def test_no_modifiers(self) -> None:
        assert has_major_intent(())

    def test_dominant(self) -> None:
        assert has_major_intent((DOMINANT_7, SUS))

    @pytest.mark.parametrize("modifier", [MINOR, DIMINISHED, DIMINISHED_7, HALF_DIMINISHED])
    def test_minor_or_diminished(self, modifier: str) -> None:
        assert not has_major_intent((DOMINANT_7, modifier))


class TestAddThird:
    """Rule 1: implied major third."""

    def test_adds_third(self) -> None:
        state = add_third(IntervalState(modifiers=()))
        assert "3" in state.included

    def test_keeps_minor_third(self) -> None:
        state = add_third(IntervalState(modifiers=(MINOR,), included=("1", "b3")))
        assert state.included == ("1", "b3")

    @pytest.mark.parametrize("modifier", [SUS, SUS2])
    def test_suspended(self, modifier: str) -> None:
        state = IntervalState(modifiers=(modifier,), included=("1", "4"))
        assert add_third(state) == state


class TestAddFifth:
    """Rule 2: implied perfect fifth."""

    def test_adds_fifth(self) -> None:
        assert "5" in add_fifth(IntervalState(modifiers=())).included

    @pytest.mark.parametrize("fifth", ["b5", "5", "#5", "b13"])
    def test_fifth_already_present(self, fifth: str) -> None:
        state = IntervalState(modifiers=(), included=("1", fifth))
        assert add_fifth(state) == state


class TestSuspendMajorEleventh:
    """Rule 3: eleventh chords with major intent."""

    @pytest.mark.parametrize("modifier", [MAJOR_11, DOMINANT_11])
    def test_major_eleventh(self, modifier: str) -> None:
        state = suspend_major_eleventh(IntervalState(modifiers=(modifier,), included=("1", "3", "11")))
        assert state.omitted == ("b3", "3", "11")
        assert state.included[-1] == "4"

    def test_minor_eleventh_untouched(self) -> None:
        state = IntervalState(modifiers=(MINOR, DOMINANT_11), included=("1", "b3", "11"))
        assert suspend_major_eleventh(state) == state


class TestDropFifthForFlatThirteenth:
    """Rule 4: b13 replaces the fifth."""

    def test_flat_thirteenth(self) -> None:
        state = drop_fifth_for_flat_thirteenth(IntervalState(modifiers=(), included=("1", "b13")))
        assert state.omitted == ("5",)

    def test_no_flat_thirteenth(self) -> None:
        state = IntervalState(modifiers=(), included=("1", "13"))
        assert drop_fifth_for_flat_thirteenth(state) == state


class TestDropEleventhForThirteenth:
    """Rule 5: thirteenth chords with major intent drop the 11."""

    @pytest.mark.parametrize("modifier", [DOMINANT_13, MAJOR_13])
    def test_major_thirteenth(self, modifier: str) -> None:
        state = drop_eleventh_for_thirteenth(IntervalState(modifiers=(modifier,)))
        assert state.omitted == ("11",)

    def test_minor_thirteenth_keeps_eleventh(self) -> None:
        state = IntervalState(modifiers=(MINOR, DOMINANT_13))
        assert drop_eleventh_for_thirteenth(state) == state


class TestSuspendMinor:
    """Rule 6: minor suspended chords."""

    def test_minor_sus(self) -> None:
        state = suspend_minor(IntervalState(modifiers=(MINOR, SUS), included=("1", "b3", "4")))
        assert state.omitted == ("b3",)
        assert "4" in state.included

    def test_minor_only(self) -> None:
        state = IntervalState(modifiers=(MINOR,), included=("1", "b3"))
        assert suspend_minor(state) == state

    def test_minor_sus2_untouched(self) -> None:
        state = IntervalState(modifiers=(MINOR, SUS2), included=("1", "b3", "2"))
        assert suspend_minor(state) == state


class TestRuleOrder:
    """The rules run in a fixed order."""

    def test_order(self) -> None:
        assert RULES == (
            add_third,
            add_fifth,
            suspend_major_eleventh,
            drop_fifth_for_flat_thirteenth,
            drop_eleventh_for_thirteenth,
            suspend_minor,
        )


class TestResolveIntervals:
    """Full resolution."""

    def test_bare_root(self) -> None:
        assert resolve_intervals((), (), (), DEFAULT_TABLES) == Resolution(
            intervals=("1", "3", "5"),
            semitones=(0, 4, 7),
        )

    def test_deduplicates(self) -> None:
        resolution = resolve_intervals(("add-9", "add-9"), ("9", "9"), (), DEFAULT_TABLES)
        assert resolution.intervals == ("1", "3", "5", "9")

    def test_sorted_by_semitone(self) -> None:
        resolution = resolve_intervals((DOMINANT_13,), ("b7", "9", "11", "13"), (), DEFAULT_TABLES)
        assert resolution.intervals == ("1", "3", "5", "b7", "9", "13")
        assert resolution.semitones == (0, 4, 7, 10, 14, 21)

    def test_omit_wins_over_include(self) -> None:
        resolution = resolve_intervals(("omit-5", "add-13"), ("13",), ("5",), DEFAULT_TABLES)
        assert "5" not in resolution.intervals
        assert "13" in resolution.intervals

    def test_flat_thirteenth_without_fifth(self) -> None:
        resolution = resolve_intervals((DOMINANT_7, "flat-13"), ("b7", "b13"), (), DEFAULT_TABLES)
        assert resolution.intervals == ("1", "3", "b7", "b13")

    def test_unknown_interval_is_a_table_defect(self) -> None:
        with pytest.raises(TableError, match="Unknown interval"):
            resolve_intervals(("weird",), ("b2",), (), DEFAULT_TABLES)

    def test_custom_semitones(self) -> None:
        tables = ChordTables.from_dicts(
            notes={"C": "C"},
            symbols={"m": MINOR},
            details={MINOR: ModifierDetail(includes=("b3",))},
            semitones={"1": 0, "b3": 3, "3": 4, "5": 7},
        )
        resolution = resolve_intervals((MINOR,), ("b3",), (), tables)
        assert resolution.semitones == (0, 3, 7)
