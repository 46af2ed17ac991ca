from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class ErrorKind(str, Enum):
    FIELD_REQUIRED = "FieldRequired"
    INVALID_POSTAL_FORMAT = "InvalidPostalFormat"


@dataclass(frozen=True)
class FieldError:
    """
    One field error: a kind tag plus the data needed to render it.
    The rules layer never builds display text.
    """
    kind: ErrorKind
    sample_formats: Tuple[str, ...] = ()


@dataclass(slots=True)
class ValidationResult:
    """
    Project standard for rule outputs.

    - field_errors: field name -> FieldError. A missing key means the field is valid.
    - At most one error per field; the first one recorded wins.
    - ok: True when there are no field errors. If False, the caller must not save.
    """
    field_errors: Dict[str, FieldError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.field_errors

    def has_error(self, field_name: str) -> bool:
        return field_name in self.field_errors

    def add_field_error(self, field_name: str, error: FieldError) -> None:
        if field_name and field_name not in self.field_errors:
            self.field_errors[field_name] = error

    def kinds(self) -> Dict[str, ErrorKind]:
        """field name -> error kind, without interpolation data."""
        return {name: err.kind for name, err in self.field_errors.items()}


from .address_rules import (
    AddressInput,
    FieldShape,
    is_state_constrained_country,
    resolve,
    state_field_shape,
    validate_address,
)
