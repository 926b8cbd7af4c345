"""refcheck — UK tax and contribution reference validation."""

from refcheck.core.errors import Rejection as Rejection
from refcheck.core.errors import ValidationResult as ValidationResult
from refcheck.core.result import Err as Err
from refcheck.core.result import Ok as Ok
from refcheck.core.types import fixed_clock as fixed_clock
from refcheck.core.types import system_clock as system_clock
from refcheck.engine.composite import check_by_name as check_by_name
from refcheck.engine.composite import check_reference as check_reference
from refcheck.formats.catalog import ReferenceType as ReferenceType
from refcheck.formats.config import FormatConfig as FormatConfig
