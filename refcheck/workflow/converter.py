"""Temporal DataConverter for refcheck workflow payloads.

The default JSON encoder flattens dataclasses with asdict and then cannot
encode the Enum members left inside (CheckStatus). Encoding here walks the
dataclass itself and writes Enum members as their value. Decoding is left
to Temporal's type-hint driven converter, which rebuilds the dataclasses,
enums, tuples and datetimes from the field annotations.
"""

from __future__ import annotations

import dataclasses
import json
from datetime import datetime
from enum import Enum
from typing import Any

from temporalio.converter import (
    CompositePayloadConverter,
    DataConverter,
    DefaultPayloadConverter,
    JSONPlainPayloadConverter,
)


def _to_json(obj: Any) -> Any:
    """Recursively convert workflow payload objects to JSON-compatible values."""
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            field.name: _to_json(getattr(obj, field.name))
            for field in dataclasses.fields(obj)
        }
    if isinstance(obj, (tuple, list)):
        return [_to_json(x) for x in obj]
    return obj


class RefcheckJSONEncoder(json.JSONEncoder):
    """JSON encoder using _to_json for dataclass and Enum support."""

    def default(self, o: Any) -> Any:
        result = _to_json(o)
        if result is not o:
            return result
        return super().default(o)


class RefcheckPayloadConverter(CompositePayloadConverter):
    """Default payload converters with the JSON one swapped for ours."""

    def __init__(self) -> None:
        super().__init__(
            *(
                c
                for c in DefaultPayloadConverter.default_encoding_payload_converters
                if not isinstance(c, JSONPlainPayloadConverter)
            ),
            JSONPlainPayloadConverter(encoder=RefcheckJSONEncoder),
        )


REFCHECK_DATA_CONVERTER = DataConverter(
    payload_converter_class=RefcheckPayloadConverter,
)
