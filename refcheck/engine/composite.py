"""Composite validators and the format dispatcher.

check_reference runs the checksum engine and then whichever composite
steps the configuration is tagged with:

- delegation: cut the candidate into a differently shaped reference and
  require one of the target formats to accept it;
- embedded date: parse a DDMMYY date out of the candidate and require it
  to be strictly earlier than the injected clock.

Everything here is a pure function of (config, candidate, clock).
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time

from refcheck.core.errors import Rejection, ValidationResult, reject
from refcheck.core.result import Err, Ok
from refcheck.core.types import Clock, system_clock
from refcheck.engine.checksum import accepted_form, validate
from refcheck.formats.catalog import ReferenceType, format_for, get_format
from refcheck.formats.config import EmbeddedDate, FormatConfig

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Reformat-and-delegate
# ---------------------------------------------------------------------------


def delegate(config: FormatConfig, candidate: str, *, clock: Clock = system_clock) -> ValidationResult:
    """Accept `candidate` if any delegation target accepts its reformatted digits.

    Targets are tried in order and all of them are tried before rejecting.
    The accepted value is the original candidate, not the reformatted one.
    """
    rule = config.delegation
    if rule is None:
        raise TypeError(f"{config.name} has no delegation rule")
    if len(candidate) < rule.span:
        return reject(config.name, candidate)

    reformatted = rule.reformat(candidate)
    result: ValidationResult = reject(config.name, candidate)
    for target in rule.targets:
        result = result.or_else(
            lambda _, target=target: check_reference(target, reformatted, clock=clock)
        )
    if isinstance(result, Err):
        logger.debug(
            "%s: %r rejected by %s",
            config.name, reformatted, ", ".join(t.name for t in rule.targets),
        )
        return reject(config.name, candidate)
    return Ok(accepted_form(config, candidate))


# ---------------------------------------------------------------------------
# Embedded date
# ---------------------------------------------------------------------------


def parse_embedded_date(text: str, two_digit_year_max: int = 2049) -> Ok[date] | Err[str]:
    """Parse DDMMYY. Two-digit years fall in the century ending at two_digit_year_max."""
    if len(text) != EmbeddedDate.WIDTH or not (text.isascii() and text.isdigit()):
        return Err(f"Embedded date must be {EmbeddedDate.WIDTH} digits, got {text!r}")
    day, month, short_year = int(text[0:2]), int(text[2:4]), int(text[4:6])
    year = two_digit_year_max - two_digit_year_max % 100 + short_year
    if year > two_digit_year_max:
        year -= 100
    try:
        return Ok(date(year, month, day))
    except ValueError as e:
        return Err(f"Embedded date {text!r} is not a calendar date: {e}")


def is_before(day: date, now: datetime) -> bool:
    """True if midnight at the start of `day` is strictly earlier than `now`."""
    return datetime.combine(day, time(), tzinfo=now.tzinfo) < now


def date_gate(config: FormatConfig, candidate: str, *, clock: Clock = system_clock) -> ValidationResult:
    """Reject when the embedded date is unparseable or not in the past."""
    rule = config.embedded_date
    if rule is None:
        raise TypeError(f"{config.name} has no embedded date")

    parsed = parse_embedded_date(rule.extract(candidate), rule.two_digit_year_max)
    if isinstance(parsed, Err):
        logger.debug("%s: %s", config.name, parsed.error)
        return reject(config.name, candidate)
    now = clock()
    if not is_before(parsed.value, now):
        logger.debug("%s: embedded date %s is not before %s", config.name, parsed.value, now)
        return reject(config.name, candidate)
    return Ok(candidate)


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


def check_reference(
    config: FormatConfig | ReferenceType,
    candidate: str | None,
    *,
    clock: Clock = system_clock,
) -> ValidationResult:
    """Validate `candidate` against one format, composite steps included."""
    if isinstance(config, ReferenceType):
        config = format_for(config)
    fmt = config

    result = validate(fmt, candidate)
    if fmt.delegation is not None:
        result = result.bind(lambda accepted: delegate(fmt, accepted, clock=clock))
    if fmt.embedded_date is not None:
        result = result.bind(lambda accepted: date_gate(fmt, accepted, clock=clock))
    return result


def check_by_name(
    name: str,
    candidate: str | None,
    *,
    clock: Clock = system_clock,
) -> Ok[str] | Err[Rejection] | Err[str]:
    """Catalog lookup, then check_reference.

    An unknown format name is a caller error: Err[str], not a Rejection.
    """
    return get_format(name).bind(lambda fmt: check_reference(fmt, candidate, clock=clock))
