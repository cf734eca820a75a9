"""Tests for descriptor normalization."""

import pytest

from chord_symbol.normalizer import (
    add_disambiguators,
    add_missing_verbs,
    collapse_spaces,
    fold_case,
    normalize_descriptor,
    remove_spaces,
)
from chord_symbol.tables import MODIFIER_SYMBOLS


class TestFoldCase:
    """Case folding that keeps the major M."""

    def test_lowercases_letters(self) -> None:
        assert fold_case("SUS4") == "sus4"

    def test_keeps_major_m(self) -> None:
        assert fold_case("M7") == "M7"

    def test_keeps_minor_m(self) -> None:
        assert fold_case("m7") == "m7"

    def test_uppercase_maj(self) -> None:
        assert fold_case("MAJ7") == "Maj7"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("OMIT3", "omit3"),
            ("DIM7", "dim7"),
            ("AUGMENTED", "augmented"),
            ("Omit5", "omit5"),
        ],
    )
    def test_restores_words_with_m(self, raw: str, expected: str) -> None:
        assert fold_case(raw) == expected

    def test_restores_every_occurrence(self) -> None:
        assert fold_case("OMIT3OMIT5") == "omit3omit5"

    def test_leaves_symbols_alone(self) -> None:
        assert fold_case("Δ7ø°") == "Δ7ø°"


class TestRemoveSpaces:
    """Whitespace stripping."""

    def test_removes_spaces(self) -> None:
        assert remove_spaces(" m 7 ( add 9 ) ") == "m7(add9)"

    def test_removes_tabs(self) -> None:
        assert remove_spaces("m\t7") == "m7"


class TestAddDisambiguators:
    """Space insertion at ambiguous boundaries."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("dimadd9", "dim add9"),
            ("7dimadd9", "7dim add9"),
            ("madd9", "m add9"),
            ("Madd9", "M add9"),
            ("mino3", "mi no3"),
            ("mino5", "mi no5"),
            ("b96", "b9 6"),
            ("#96", "#9 6"),
            ("m9/6", "m 9/6"),
            ("m96", "m 96"),
            ("7b9#11", "7 b9 #11"),
            ("7no5add13", "7 no5 add13"),
            ("7omit3", "7 omit3"),
        ],
    )
    def test_inserts_space(self, raw: str, expected: str) -> None:
        assert add_disambiguators(raw) == expected

    @pytest.mark.parametrize("raw", ["m7", "maj7", "sus4", "minor", "69", "6/9", "add9", "(add9,11)"])
    def test_leaves_unambiguous_text(self, raw: str) -> None:
        assert add_disambiguators(raw) == raw


class TestAddMissingVerbs:
    """Verb propagation inside parentheses."""

    def test_propagates_add(self) -> None:
        assert add_missing_verbs("(add9,11,13)") == " add9 add11 add13 "

    def test_switches_verb(self) -> None:
        assert add_missing_verbs("(no5,add9,11)") == " no5 add9 add11 "

    def test_omit_verb(self) -> None:
        assert add_missing_verbs("(omit3,5)") == " omit3 omit5 "

    def test_no_verb(self) -> None:
        assert add_missing_verbs("7(b9,#11)") == "7 b9 #11 "

    def test_several_groups(self) -> None:
        assert add_missing_verbs("(add9)7(no5)") == " add9 7 no5 "

    def test_verb_does_not_leak_between_groups(self) -> None:
        assert add_missing_verbs("(add9)(11)") == " add9  11 "

    def test_unclosed_group_left_alone(self) -> None:
        assert add_missing_verbs("7(b9") == "7(b9"


class TestCollapseSpaces:
    """Whitespace canonicalization."""

    def test_collapses_and_trims(self) -> None:
        assert collapse_spaces("  m  add9 ") == "m add9"


class TestNormalizeDescriptor:
    """Full normalization pipeline."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("maj7", "maj7"),
            ("MAJ7", "Maj7"),
            ("m (add 9)", "m add9"),
            ("7(no5,add13)", "7 no5 add13"),
            ("7 (b9, #11)", "7 b9 #11"),
            ("m(add9,11)", "m add9 add11"),
            ("mi(no3)", "mi no3"),
            ("7b96", "7 b9 6"),
            ("(OMIT3,5)", "omit3 omit5"),
            ("", ""),
        ],
    )
    def test_normalizes(self, raw: str, expected: str) -> None:
        assert normalize_descriptor(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "maj7",
            "MAJ7",
            "m (add 9)",
            "m(add9,11,13)",
            "7(no5,add13)",
            "7 (b9, #11)",
            "mino3",
            "7b96",
            "m9/6",
            "dimadd9",
            "OMIT3",
            "AUGMENTED",
            "sus 4",
            "mi7b5",
            "xyz",
        ],
    )
    def test_idempotent(self, raw: str) -> None:
        once = normalize_descriptor(raw)
        assert normalize_descriptor(once) == once

    def test_bare_degrees_join_on_second_pass(self) -> None:
        """Degrees split out of a list lose their space when normalized again."""
        assert normalize_descriptor("7(9)") == "7 9"
        assert normalize_descriptor("7 9") == "79"
        # Here the joined degrees form a different symbol
        assert normalize_descriptor("6(9)") == "6 9"
        assert normalize_descriptor("6 9") == "69"

    @pytest.mark.parametrize("symbol", sorted(MODIFIER_SYMBOLS))
    def test_modifier_symbols_are_normalized(self, symbol: str) -> None:
        """Every table spelling must survive normalization unchanged."""
        assert normalize_descriptor(symbol) == symbol
