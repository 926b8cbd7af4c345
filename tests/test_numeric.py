"""Tests for refcheck.core.numeric and the alpha conversions built on it."""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from refcheck.core.numeric import is_numeric
from refcheck.formats.alpha import (
    NO_ALPHA,
    NTCR_LETTER_VALUES,
    SAFE_LETTER_VALUES,
    AlphaValue,
    ConstantAlphaValue,
    LetterTable,
)

# ---------------------------------------------------------------------------
# is_numeric
# ---------------------------------------------------------------------------


class TestIsNumeric:
    @pytest.mark.parametrize("text", [
        "0", "7", "-1.5", "1,000", "(42)", "$5", "1e3", " 7 ", "12-", ".5", "+3",
    ])
    def test_numbers(self, text: str) -> None:
        assert is_numeric(text)

    @pytest.mark.parametrize("text", [
        "", " ", "A", "k", "-", "+", ".", "$", "(", "(42", "1e", "/", "٣", "１",
    ])
    def test_non_numbers(self, text: str) -> None:
        assert not is_numeric(text)

    @given(st.characters())
    def test_single_character_numeric_iff_ascii_digit(self, ch: str) -> None:
        assert is_numeric(ch) == (ch in string.digits)


# ---------------------------------------------------------------------------
# Alpha conversions
# ---------------------------------------------------------------------------


class TestLetterTables:
    def test_safe_table_spans_alphabet(self) -> None:
        assert len(SAFE_LETTER_VALUES) == 26
        assert SAFE_LETTER_VALUES["A"] == 33
        assert SAFE_LETTER_VALUES["Z"] == 58

    def test_ntcr_table_excludes_letters_without_renumbering(self) -> None:
        assert len(NTCR_LETTER_VALUES) == 19
        for letter in "DFIOQUV":
            assert letter not in NTCR_LETTER_VALUES
        assert NTCR_LETTER_VALUES["E"] == 37
        assert NTCR_LETTER_VALUES["Z"] == 58


class TestLetterTable:
    def test_letter_times_weight(self) -> None:
        assert LetterTable(values=SAFE_LETTER_VALUES)("A", 9) == 297

    def test_case_insensitive(self) -> None:
        table = LetterTable(values=SAFE_LETTER_VALUES)
        assert table("a", 9) == table("A", 9)

    def test_digit_contributes_nothing(self) -> None:
        assert LetterTable(values=SAFE_LETTER_VALUES)("1", 9) == 0

    def test_unknown_character_contributes_nothing(self) -> None:
        assert LetterTable(values=SAFE_LETTER_VALUES)("_", 5) == 0
        assert LetterTable(values=NTCR_LETTER_VALUES)("D", 256) == 0

    def test_is_alpha_value(self) -> None:
        assert isinstance(LetterTable(values=SAFE_LETTER_VALUES), AlphaValue)


class TestConstantAndNone:
    def test_constant_ignores_weight(self) -> None:
        x41 = ConstantAlphaValue(value=41)
        assert x41("X", 1) == 41
        assert x41("X", 7) == 41

    def test_no_alpha(self) -> None:
        assert NO_ALPHA("K", 1) == 0
