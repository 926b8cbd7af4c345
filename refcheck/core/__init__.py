"""refcheck.core — result values, rejection, clock and numeric helpers."""

from refcheck.core.errors import Rejection as Rejection
from refcheck.core.errors import ValidationResult as ValidationResult
from refcheck.core.errors import reject as reject
from refcheck.core.numeric import is_numeric as is_numeric
from refcheck.core.result import Err as Err
from refcheck.core.result import Ok as Ok
from refcheck.core.result import Result as Result
from refcheck.core.result import unwrap as unwrap
from refcheck.core.types import Clock as Clock
from refcheck.core.types import FrozenMap as FrozenMap
from refcheck.core.types import fixed_clock as fixed_clock
from refcheck.core.types import system_clock as system_clock
