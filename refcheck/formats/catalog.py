"""Catalog of supported UK tax and contribution reference formats.

Constant data. Callers select a format by ReferenceType or by name.
Structural patterns are full-match patterns.
"""

from __future__ import annotations

from enum import Enum

from refcheck.core.result import Err, Ok, unwrap
from refcheck.core.types import FrozenMap
from refcheck.formats.alpha import (
    NTCR_LETTER_VALUES,
    SAFE_LETTER_VALUES,
    ConstantAlphaValue,
    LetterTable,
)
from refcheck.formats.config import (
    CheckScheme,
    Delegation,
    EmbeddedDate,
    FormatConfig,
    compile_pattern,
)


class ReferenceType(Enum):
    """Supported reference formats. Values are the catalog names."""

    COTAX = "COTAX"
    SA = "SA"
    PAYE = "PAYE"
    SAFE_CHARGE = "SAFE_CHARGE"
    SAFE_CAR = "SAFE_CAR"
    ITCP = "ITCP"
    CT = "CT"
    NTCR = "NTCR"
    SDLT = "SDLT"
    VAT11 = "VAT11"
    VAT1155 = "VAT1155"
    VAT16 = "VAT16"
    VAT1655 = "VAT1655"
    MOSS15 = "MOSS15"
    MOSS17 = "MOSS17"
    MOSS18 = "MOSS18"
    NICO = "NICO"
    NINO = "NINO"
    IHT = "IHT"
    UK_VAT = "UK_VAT"
    EXCISE_ID = "EXCISE_ID"


# ---------------------------------------------------------------------------
# Shared check alphabets and weights
# ---------------------------------------------------------------------------

MOD11_ALPHABET = "21987654321"
MOD23_ALPHABET = "ABCDEFGHXJKLMNYPQRSTZVW"
NTCR_ALPHABET = "ABCDEFGHJKLMNPQRSTVWXYZ"

_UTR_WEIGHTS = (0, 6, 7, 8, 9, 10, 5, 4, 3, 2)
_OFFICE_WEIGHTS = (9, 10, 11, 0, 0, 8, 7, 6, 5, 4, 3)
_SAFE_WEIGHTS = (0, 0, 9, 10, 11, 12, 13, 8, 7, 6, 5, 4, 3, 2)
_VAT_WEIGHTS = (8, 7, 6, 5, 4, 3, 2)

_SAFE_ALPHA = LetterTable(values=SAFE_LETTER_VALUES)

# ---------------------------------------------------------------------------
# Unique Taxpayer Reference family (mod 11)
# ---------------------------------------------------------------------------

COTAX = FormatConfig(
    name="COTAX",
    pattern=compile_pattern(r"\d{10}A001"),
    expected_length=14,
    scheme=CheckScheme.TABLE_LOOKUP,
    weights=_UTR_WEIGHTS,
    check_alphabet=MOD11_ALPHABET,
    check_position=0,
    modulus=11,
)

SA = FormatConfig(
    name="SA",
    pattern=compile_pattern(r"\d{10}[kK]"),
    expected_length=11,
    scheme=CheckScheme.TABLE_LOOKUP,
    weights=(*_UTR_WEIGHTS, 1),
    check_alphabet=MOD11_ALPHABET,
    check_position=0,
    modulus=11,
)

# ---------------------------------------------------------------------------
# Accounts office references (mod 23)
# ---------------------------------------------------------------------------

PAYE = FormatConfig(
    name="PAYE",
    pattern=compile_pattern(r"\d{3}[pP][a-zA-Z]\d{7}[0-9xX]"),
    expected_length=13,
    scheme=CheckScheme.TABLE_LOOKUP,
    weights=(9, 10, 11, 0, 0, 8, 7, 6, 5, 4, 3, 2, 1),
    check_alphabet=MOD23_ALPHABET,
    check_position=4,
    modulus=23,
    initial_weight=576,
    alpha_value=ConstantAlphaValue(value=41),
)

SAFE_CHARGE = FormatConfig(
    name="SAFE_CHARGE",
    pattern=compile_pattern(r"[xX][a-zA-Z]\w\d{11}"),
    expected_length=14,
    scheme=CheckScheme.TABLE_LOOKUP,
    weights=_SAFE_WEIGHTS,
    check_alphabet=MOD23_ALPHABET,
    check_position=1,
    modulus=23,
    alpha_value=_SAFE_ALPHA,
)

SAFE_CAR = FormatConfig(
    name="SAFE_CAR",
    pattern=compile_pattern(r"[xX][a-zA-Z]\w\d{12}"),
    expected_length=15,
    scheme=CheckScheme.TABLE_LOOKUP,
    weights=(*_SAFE_WEIGHTS, 1),
    check_alphabet=MOD23_ALPHABET,
    check_position=1,
    modulus=23,
    alpha_value=_SAFE_ALPHA,
)

ITCP = FormatConfig(
    name="ITCP",
    pattern=compile_pattern(r"\d{3}[fF][a-zA-Z]\d{6}"),
    expected_length=11,
    scheme=CheckScheme.TABLE_LOOKUP,
    weights=_OFFICE_WEIGHTS,
    check_alphabet=MOD23_ALPHABET,
    check_position=4,
    modulus=23,
    initial_weight=420,
)

CT = FormatConfig(
    name="CT",
    pattern=compile_pattern(r"\d{3}[cC][a-zA-Z]\d{6}"),
    expected_length=11,
    scheme=CheckScheme.TABLE_LOOKUP,
    weights=_OFFICE_WEIGHTS,
    check_alphabet=MOD23_ALPHABET,
    check_position=4,
    modulus=23,
    initial_weight=420,
)

NTCR = FormatConfig(
    name="NTCR",
    pattern=compile_pattern(
        r"[^dfioquvDFIOQUV0-9]{2}(?<!GB|gb|NK|nk|TN|tn|ZZ|zz)\d{12}[nN][a-zA-Z]"
    ),
    expected_length=16,
    scheme=CheckScheme.TABLE_LOOKUP,
    weights=(256, 128, 64, 32, 16, 8, 4, 2),
    check_alphabet=NTCR_ALPHABET,
    check_position=15,
    modulus=23,
    alpha_value=LetterTable(values=NTCR_LETTER_VALUES),
    embedded_date=EmbeddedDate(start=8),
)

SDLT = FormatConfig(
    name="SDLT",
    pattern=compile_pattern(r"\d{9}M[A-Z]"),
    expected_length=11,
    scheme=CheckScheme.TABLE_LOOKUP,
    weights=(6, 7, 8, 9, 10, 5, 4, 3, 2),
    check_alphabet=MOD23_ALPHABET,
    check_position=10,
    modulus=23,
)

# ---------------------------------------------------------------------------
# VAT registration numbers (mod 97, two-digit complement)
# ---------------------------------------------------------------------------

VAT11 = FormatConfig(
    name="VAT11",
    pattern=compile_pattern(r"\d{3} \d{4} \d{2}"),
    expected_length=11,
    scheme=CheckScheme.COMPLEMENT,
    weights=_VAT_WEIGHTS,
    check_position=7,
    modulus=97,
    ignored_characters=" ",
)

# Numbers issued from 2010 carry a +55 offset ("9755" scheme)
VAT1155 = FormatConfig(
    name="VAT1155",
    pattern=VAT11.pattern,
    expected_length=11,
    scheme=CheckScheme.COMPLEMENT,
    weights=_VAT_WEIGHTS,
    check_position=7,
    modulus=97,
    initial_weight=55,
    ignored_characters=" ",
)

# Branch-qualified layouts are 15 or 16 characters; the pattern gates length
VAT16 = FormatConfig(
    name="VAT16",
    pattern=compile_pattern(r"\d{3} \d{4} \d{2} \d{3,4}"),
    scheme=CheckScheme.COMPLEMENT,
    weights=_VAT_WEIGHTS,
    check_position=7,
    modulus=97,
    ignored_characters=" ",
)

# Offset 55 on purpose: the legacy table gave VAT1655 an offset of 0, which made
# it a duplicate of VAT16. Do not restore the 0.
VAT1655 = FormatConfig(
    name="VAT1655",
    pattern=VAT16.pattern,
    scheme=CheckScheme.COMPLEMENT,
    weights=_VAT_WEIGHTS,
    check_position=7,
    modulus=97,
    initial_weight=55,
    ignored_characters=" ",
)

# ---------------------------------------------------------------------------
# VAT Mini One Stop Shop references: checked through the embedded VAT number
# ---------------------------------------------------------------------------

MOSS15 = FormatConfig(
    name="MOSS15",
    pattern=compile_pattern(r"GB\d{9}/\d{3}"),
    expected_length=15,
    delegation=Delegation(slices=((2, 5), (5, 9), (9, 11)), targets=(VAT11, VAT1155)),
)

MOSS17 = FormatConfig(
    name="MOSS17",
    pattern=compile_pattern(r"[a-zA-Z ]{2}EU\d{9}/\d{3}"),
    expected_length=17,
    delegation=Delegation(slices=((4, 7), (7, 11), (11, 13)), targets=(VAT11, VAT1155)),
)

# Structure only on purpose: the legacy checksum put the check position on a
# letter, so no reference could ever pass. Do not restore it.
MOSS18 = FormatConfig(
    name="MOSS18",
    pattern=compile_pattern(r"[a-zA-Z ]{2}\d{12}/\d{3}"),
    expected_length=18,
)

# ---------------------------------------------------------------------------
# Structure-only formats (no published check algorithm)
# ---------------------------------------------------------------------------

NICO = FormatConfig(
    name="NICO",
    pattern=compile_pattern(r"\d{18}"),
    expected_length=18,
)

NINO = FormatConfig(
    name="NINO",
    pattern=compile_pattern(r"[a-zA-Z]{2}\d{6}[a-dA-D]"),
    expected_length=9,
)

IHT = FormatConfig(
    name="IHT",
    pattern=compile_pattern(r"(?:A|F|L|N|EN|ET|SS|ST)\d{6}/\d{2}[A-Z]"),
)

UK_VAT = FormatConfig(
    name="UK_VAT",
    pattern=compile_pattern(r"GB(?:GD|HA)\d{3}|GB\d{3} \d{4} \d{2}(?: \d{3})?"),
)

EXCISE_ID = FormatConfig(
    name="EXCISE_ID",
    pattern=compile_pattern(r"GBTC\d{9}"),
    expected_length=13,
)


ALL_FORMATS: tuple[FormatConfig, ...] = (
    COTAX, SA, PAYE, SAFE_CHARGE, SAFE_CAR, ITCP, CT, NTCR, SDLT,
    VAT11, VAT1155, VAT16, VAT1655, MOSS15, MOSS17, MOSS18,
    NICO, NINO, IHT, UK_VAT, EXCISE_ID,
)

CATALOG: FrozenMap[str, FormatConfig] = unwrap(
    FrozenMap.create((config.name, config) for config in ALL_FORMATS)
)


def format_for(reference_type: ReferenceType) -> FormatConfig:
    """Configuration for a ReferenceType. Total over the enum."""
    return CATALOG[reference_type.value]


def get_format(name: str) -> Ok[FormatConfig] | Err[str]:
    """Look up a configuration by name, case-insensitively."""
    config = CATALOG.get(name.strip().upper())
    if config is None:
        return Err(f"Unknown reference format: {name!r}")
    return Ok(config)
