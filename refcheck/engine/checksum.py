"""Generic checksum engine.

validate(config, candidate) runs, in order: empty check, length gate,
structural pattern, weighted sum, expected check derivation, comparison.
Any failing step rejects; there is no partial result.

Each step is also exposed on its own so a caller can find out why a
candidate was rejected without the result type having to say so.
"""

from __future__ import annotations

import logging

from refcheck.core.errors import ValidationResult, reject
from refcheck.core.numeric import is_numeric
from refcheck.core.result import Ok
from refcheck.formats.config import CheckScheme, FormatConfig

logger = logging.getLogger(__name__)


def has_valid_length(config: FormatConfig, candidate: str) -> bool:
    """Length gate. Formats with expected_length 0 always pass."""
    return not config.is_length_gated or len(candidate) == config.expected_length


def matches_structure(config: FormatConfig, candidate: str) -> bool:
    """The whole candidate must match the structural pattern."""
    return config.pattern.fullmatch(candidate) is not None


def checksum_text(config: FormatConfig, candidate: str) -> str:
    """The candidate with the format's ignored characters removed."""
    if not config.ignored_characters:
        return candidate
    return candidate.translate({ord(ch): None for ch in config.ignored_characters})


def weighted_value(config: FormatConfig, text: str) -> int:
    """Weighted sum of the characters of `text`, plus the initial weight.

    Digits contribute digit * weight. Anything else goes through the
    format's alpha conversion, which applies the weight itself (or not).
    Positions with weight 0 are skipped.
    """
    total = 0
    for position, weight in enumerate(config.weights):
        if weight == 0:
            continue
        character = text[position]
        if is_numeric(character):
            total += int(character) * weight
        else:
            total += config.alpha_value(character, weight)
    return total + config.initial_weight


def expected_check(config: FormatConfig, value: int) -> str:
    """Check character(s) implied by a weighted value."""
    remainder = value % config.modulus  # non-negative for a positive modulus
    match config.scheme:
        case CheckScheme.TABLE_LOOKUP:
            return config.check_alphabet[remainder]
        case CheckScheme.COMPLEMENT:
            return f"{config.modulus - remainder:02d}"
        case CheckScheme.NONE:
            raise TypeError(f"{config.name} has no checksum")


def has_valid_check(config: FormatConfig, candidate: str) -> bool:
    """True if the check character(s) in `candidate` match its weighted value.

    Structure-only formats always pass. The comparison is case-insensitive.
    """
    if not config.has_checksum:
        return True
    text = checksum_text(config, candidate)
    end = config.check_position + config.scheme.width
    if len(text) < max(len(config.weights), end):
        return False
    actual = text[config.check_position:end].upper()
    return actual == expected_check(config, weighted_value(config, text))


def accepted_form(config: FormatConfig, candidate: str) -> str:
    """What an accepted candidate is returned as."""
    if config.is_length_gated:
        return candidate[:config.expected_length]
    return candidate


def validate(config: FormatConfig, candidate: str | None) -> ValidationResult:
    """Length, structure and checksum validation for one format.

    Returns Ok(accepted reference) or Err(Rejection). Never raises for
    any string or None input.
    """
    if not candidate:
        logger.debug("%s: empty reference", config.name)
        return reject(config.name, candidate)
    if not has_valid_length(config, candidate):
        logger.debug(
            "%s: length %d, expected %d", config.name, len(candidate), config.expected_length,
        )
        return reject(config.name, candidate)
    if not matches_structure(config, candidate):
        logger.debug("%s: %r does not match %s", config.name, candidate, config.pattern.pattern)
        return reject(config.name, candidate)
    if not has_valid_check(config, candidate):
        logger.debug("%s: check character mismatch in %r", config.name, candidate)
        return reject(config.name, candidate)
    return Ok(accepted_form(config, candidate))
