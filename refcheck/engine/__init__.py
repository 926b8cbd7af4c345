"""refcheck.engine — checksum engine and composite validators."""

from refcheck.engine.checksum import expected_check as expected_check
from refcheck.engine.checksum import has_valid_check as has_valid_check
from refcheck.engine.checksum import has_valid_length as has_valid_length
from refcheck.engine.checksum import matches_structure as matches_structure
from refcheck.engine.checksum import validate as validate
from refcheck.engine.checksum import weighted_value as weighted_value
from refcheck.engine.composite import check_by_name as check_by_name
from refcheck.engine.composite import check_reference as check_reference
from refcheck.engine.composite import date_gate as date_gate
from refcheck.engine.composite import delegate as delegate
from refcheck.engine.composite import parse_embedded_date as parse_embedded_date
