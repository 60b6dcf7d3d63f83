"""
Request payload validation shared by every product handler.

Fields are checked one at a time in a fixed order (name, price, description,
category, inStock) and checking stops at the first violation, so a response
always names exactly one problem. Each field's rule is a pydantic strict type
wrapped in a ``TypeAdapter``; nothing is coerced (``"10"`` is not a price and
``1`` is not a boolean).
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Dict, Optional, Tuple, Union

from pydantic import (
    AfterValidator,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    StringConstraints,
    TypeAdapter,
)
from pydantic import ValidationError as PydanticValidationError


class ErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_VALUE = "invalid_value"


ERROR_TITLES = {
    ErrorKind.MISSING_FIELD: "Missing required field",
    ErrorKind.TYPE_MISMATCH: "Invalid field type",
    ErrorKind.INVALID_VALUE: "Invalid field value",
}


def _must_be_positive(value: Union[int, float]) -> Union[int, float]:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("must be a finite number")
    if not value > 0:
        raise ValueError("must be positive")
    return value


Name = Annotated[StrictStr, StringConstraints(min_length=1)]
Price = Annotated[Union[StrictInt, StrictFloat], AfterValidator(_must_be_positive)]

# (field, adapter, message on a bad value); order is the reporting order
FIELD_RULES: Tuple[Tuple[str, TypeAdapter, str], ...] = (
    ("name", TypeAdapter(Name), "name must be a non-empty string"),
    ("price", TypeAdapter(Price), "price must be a positive number"),
    ("description", TypeAdapter(Optional[StrictStr]), "description must be a string"),
    ("category", TypeAdapter(Optional[StrictStr]), "category must be a string"),
    ("inStock", TypeAdapter(StrictBool), "inStock must be a boolean"),
)

REQUIRED_ON_CREATE = ("name", "price")

# pydantic error types that mean "right shape, wrong value"
_VALUE_ERROR_TYPES = {"value_error", "string_too_short"}


@dataclass
class FieldError:
    kind: ErrorKind
    field: Optional[str]
    message: str

    @property
    def title(self) -> str:
        return ERROR_TITLES[self.kind]


@dataclass
class ValidationResult:
    payload: Optional[Dict[str, Any]] = None
    error: Optional[FieldError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _check_fields(payload: Any, required: Tuple[str, ...]) -> ValidationResult:
    if not isinstance(payload, dict):
        return ValidationResult(error=FieldError(
            ErrorKind.TYPE_MISMATCH, None, "Request body must be a JSON object"
        ))

    normalized: Dict[str, Any] = {}
    for field, adapter, bad_value_message in FIELD_RULES:
        if field not in payload:
            if field in required:
                return ValidationResult(error=FieldError(
                    ErrorKind.MISSING_FIELD, field, f"{field} is required"
                ))
            continue

        value = payload[field]
        try:
            adapter.validate_python(value)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            kind = ErrorKind.INVALID_VALUE if first["type"] in _VALUE_ERROR_TYPES else ErrorKind.TYPE_MISMATCH
            return ValidationResult(error=FieldError(kind, field, bad_value_message))
        normalized[field] = value

    return ValidationResult(payload=normalized)


def validate_create(payload: Any) -> ValidationResult:
    """Check a create payload; ``name`` and ``price`` are required."""
    result = _check_fields(payload, REQUIRED_ON_CREATE)
    if result.ok:
        result.payload.setdefault("inStock", True)
    return result


def validate_update(payload: Any) -> ValidationResult:
    """Check a partial update; absent fields are fine, present ones must be valid."""
    return _check_fields(payload, ())


def describe_request_error(error: Dict[str, Any]) -> FieldError:
    """Translate one FastAPI ``RequestValidationError`` entry into a FieldError.

    These only arise before a handler runs, when the body is missing, is not
    valid JSON, or is not a JSON object.
    """
    if error.get("type") == "json_invalid":
        return FieldError(ErrorKind.TYPE_MISMATCH, None, "Request body is not valid JSON")
    if error.get("type") == "missing":
        return FieldError(ErrorKind.MISSING_FIELD, None, "Request body is required")
    return FieldError(ErrorKind.TYPE_MISMATCH, None, "Request body must be a JSON object")
