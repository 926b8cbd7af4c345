"""refcheck.formats — format configuration model and catalog."""

from refcheck.formats.alpha import AlphaValue as AlphaValue
from refcheck.formats.alpha import ConstantAlphaValue as ConstantAlphaValue
from refcheck.formats.alpha import LetterTable as LetterTable
from refcheck.formats.alpha import NoAlphaValue as NoAlphaValue
from refcheck.formats.catalog import ALL_FORMATS as ALL_FORMATS
from refcheck.formats.catalog import CATALOG as CATALOG
from refcheck.formats.catalog import ReferenceType as ReferenceType
from refcheck.formats.catalog import format_for as format_for
from refcheck.formats.catalog import get_format as get_format
from refcheck.formats.config import CheckScheme as CheckScheme
from refcheck.formats.config import Delegation as Delegation
from refcheck.formats.config import EmbeddedDate as EmbeddedDate
from refcheck.formats.config import FormatConfig as FormatConfig
from refcheck.formats.config import compile_pattern as compile_pattern
