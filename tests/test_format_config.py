"""Tests for refcheck.formats.config — FormatConfig, Delegation, EmbeddedDate."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from refcheck.formats.catalog import VAT11
from refcheck.formats.config import (
    CheckScheme,
    Delegation,
    EmbeddedDate,
    FormatConfig,
    compile_pattern,
)

_DIGITS4 = compile_pattern(r"\d{4}")


def _config(**overrides: Any) -> FormatConfig:
    fields: dict[str, Any] = {
        "name": "TEST",
        "pattern": _DIGITS4,
        "expected_length": 4,
        "scheme": CheckScheme.TABLE_LOOKUP,
        "weights": (0, 3, 2, 1),
        "check_alphabet": "0123456789X",
        "check_position": 0,
        "modulus": 11,
    }
    fields.update(overrides)
    return FormatConfig(**fields)


# ---------------------------------------------------------------------------
# CheckScheme
# ---------------------------------------------------------------------------


class TestCheckScheme:
    def test_widths(self) -> None:
        assert CheckScheme.TABLE_LOOKUP.width == 1
        assert CheckScheme.COMPLEMENT.width == 2
        assert CheckScheme.NONE.width == 0


# ---------------------------------------------------------------------------
# FormatConfig invariants
# ---------------------------------------------------------------------------


class TestFormatConfig:
    def test_valid_config(self) -> None:
        config = _config()
        assert config.is_length_gated
        assert config.has_checksum

    def test_structure_only_defaults(self) -> None:
        config = FormatConfig(name="PLAIN", pattern=_DIGITS4)
        assert not config.is_length_gated
        assert not config.has_checksum
        assert config.delegation is None
        assert config.embedded_date is None

    def test_frozen(self) -> None:
        config = _config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.modulus = 7  # type: ignore[misc]

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(TypeError, match="name"):
            _config(name="")

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(TypeError, match="expected_length"):
            _config(expected_length=-1)

    def test_zero_modulus_rejected(self) -> None:
        with pytest.raises(TypeError, match="modulus"):
            _config(modulus=0)

    def test_checksum_needs_weights(self) -> None:
        with pytest.raises(TypeError, match="weight"):
            _config(weights=())

    def test_alphabet_shorter_than_modulus_rejected(self) -> None:
        with pytest.raises(TypeError, match="check_alphabet"):
            _config(check_alphabet="0123456789")

    def test_complement_needs_no_alphabet(self) -> None:
        config = _config(
            scheme=CheckScheme.COMPLEMENT, check_alphabet="", modulus=97, check_position=2,
        )
        assert config.has_checksum

    def test_more_weights_than_length_rejected(self) -> None:
        with pytest.raises(TypeError, match="weights"):
            _config(weights=(1, 2, 3, 4, 5))

    def test_check_position_outside_length_rejected(self) -> None:
        with pytest.raises(TypeError, match="check_position"):
            _config(check_position=4)

    def test_complement_check_must_fit(self) -> None:
        with pytest.raises(TypeError, match="check_position"):
            _config(scheme=CheckScheme.COMPLEMENT, modulus=97, check_position=3)

    @pytest.mark.parametrize("modulus", [100, 101, 997])
    def test_complement_modulus_must_fit_two_digits(self, modulus: int) -> None:
        with pytest.raises(TypeError, match="complement"):
            _config(scheme=CheckScheme.COMPLEMENT, modulus=modulus, check_position=2)

    def test_complement_modulus_97_allowed(self) -> None:
        config = _config(scheme=CheckScheme.COMPLEMENT, modulus=97, check_position=2)
        assert config.modulus == 97

    def test_unbounded_format_skips_position_checks(self) -> None:
        config = _config(expected_length=0, check_position=10)
        assert not config.is_length_gated

    def test_structure_only_with_weights_rejected(self) -> None:
        with pytest.raises(TypeError, match="structure-only"):
            FormatConfig(name="PLAIN", pattern=_DIGITS4, weights=(1, 2))

    def test_structure_only_zero_weights_allowed(self) -> None:
        assert not FormatConfig(name="PLAIN", pattern=_DIGITS4, weights=(0, 0)).has_checksum

    def test_embedded_date_past_length_rejected(self) -> None:
        with pytest.raises(TypeError, match="embedded date"):
            FormatConfig(
                name="DATED", pattern=compile_pattern(r"\d{8}"), expected_length=8,
                embedded_date=EmbeddedDate(start=4),
            )

    def test_embedded_date_within_length(self) -> None:
        config = FormatConfig(
            name="DATED", pattern=compile_pattern(r"\d{8}"), expected_length=8,
            embedded_date=EmbeddedDate(start=2),
        )
        assert config.embedded_date is not None

    def test_patterns_are_ascii(self) -> None:
        assert _DIGITS4.fullmatch("١٢٣٤") is None


# ---------------------------------------------------------------------------
# Delegation
# ---------------------------------------------------------------------------


class TestDelegation:
    def test_reformat(self) -> None:
        rule = Delegation(slices=((2, 5), (5, 9), (9, 11)), targets=(VAT11,))
        assert rule.reformat("GB980780684/001") == "980 7806 84"

    def test_span(self) -> None:
        rule = Delegation(slices=((4, 7), (7, 11), (11, 13)), targets=(VAT11,))
        assert rule.span == 13

    def test_custom_separator(self) -> None:
        rule = Delegation(slices=((0, 2), (2, 4)), targets=(VAT11,), separator="-")
        assert rule.reformat("abcd") == "ab-cd"

    def test_requires_slices(self) -> None:
        with pytest.raises(TypeError, match="slice"):
            Delegation(slices=(), targets=(VAT11,))

    def test_requires_targets(self) -> None:
        with pytest.raises(TypeError, match="target"):
            Delegation(slices=((0, 1),), targets=())

    def test_rejects_empty_slice(self) -> None:
        with pytest.raises(TypeError, match="invalid slice"):
            Delegation(slices=((3, 3),), targets=(VAT11,))


# ---------------------------------------------------------------------------
# EmbeddedDate
# ---------------------------------------------------------------------------


class TestEmbeddedDate:
    def test_extract(self) -> None:
        assert EmbeddedDate(start=8).extract("AB000000010120NN") == "010120"

    def test_default_pivot(self) -> None:
        assert EmbeddedDate(start=0).two_digit_year_max == 2049

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(TypeError):
            EmbeddedDate(start=-1)

    def test_two_digit_pivot_rejected(self) -> None:
        with pytest.raises(TypeError):
            EmbeddedDate(start=0, two_digit_year_max=49)

    def test_three_digit_pivot_rejected(self) -> None:
        with pytest.raises(TypeError, match="4-digit"):
            EmbeddedDate(start=0, two_digit_year_max=999)

    def test_four_digit_pivot_allowed(self) -> None:
        assert EmbeddedDate(start=0, two_digit_year_max=1999).two_digit_year_max == 1999
