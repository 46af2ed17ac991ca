from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from . import ErrorKind, FieldError, ValidationResult
from home_address.core.canonical import clean_text, country_code_key, is_present, matches_pattern
from home_address.core.countries import (
    COUNTRY_RULES,
    DEFAULT_RULE,
    GENERIC_POSTAL_PATTERN,
    CountryPostalRule,
)

logger = logging.getLogger(__name__)


# Checked for presence in this order; state is skipped when the enumeration check already flagged it.
REQUIRED_FIELDS = [
    "address_line1",
    "city",
    "country",
    "state",
]

FIELD_LABELS = {
    "address_line1": "Address line 1",
    "address_line2": "Address line 2",
    "city": "City",
    "state": "State / Province",
    "postal_code": "Zip / Postcode",
    "country": "Country",
}

_REQUIRED = FieldError(ErrorKind.FIELD_REQUIRED)


class FieldShape(str, Enum):
    """How the state field is entered for a country."""
    CONSTRAINED = "constrained"
    FREE_TEXT = "free_text"


@dataclass(frozen=True)
class AddressInput:
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AddressInput":
        """Build from form values; missing or None values become ""."""
        def _s(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(
            address_line1=_s("address_line1"),
            address_line2=_s("address_line2"),
            city=_s("city"),
            state=_s("state"),
            postal_code=_s("postal_code"),
            country=_s("country"),
        )


def resolve(country: object, *, table: Mapping[str, CountryPostalRule] = COUNTRY_RULES) -> CountryPostalRule:
    """
    Rule for a country code. Empty or unknown codes get DEFAULT_RULE
    (generic postal pattern, free-text state).
    """
    code = country_code_key(country)
    if not code:
        return DEFAULT_RULE
    return table.get(code, DEFAULT_RULE)


def is_state_constrained_country(
    country: object, *, table: Mapping[str, CountryPostalRule] = COUNTRY_RULES
) -> bool:
    return resolve(country, table=table).is_state_constrained


def state_field_shape(country: object, *, table: Mapping[str, CountryPostalRule] = COUNTRY_RULES) -> FieldShape:
    if is_state_constrained_country(country, table=table):
        return FieldShape.CONSTRAINED
    return FieldShape.FREE_TEXT


def _check_postal_code(
    r: ValidationResult,
    value: str,
    rule: CountryPostalRule,
    generic_pattern: re.Pattern[str],
) -> None:
    if not rule.has_postal_system:
        return

    pattern = rule.pattern if rule.pattern is not None else generic_pattern

    # Emptiness is reported before format mismatch.
    if not is_present(value):
        r.add_field_error("postal_code", _REQUIRED)
        return

    if not matches_pattern(value, pattern):
        r.add_field_error(
            "postal_code",
            FieldError(ErrorKind.INVALID_POSTAL_FORMAT, sample_formats=rule.sample_formats),
        )


def validate_address(
    address: AddressInput,
    *,
    table: Mapping[str, CountryPostalRule] = COUNTRY_RULES,
    generic_pattern: re.Pattern[str] = GENERIC_POSTAL_PATTERN,
) -> ValidationResult:
    """
    Address validation:
    - State must be in the country's enumeration when the country is state-constrained.
    - Address line 1, City, Country and State must not be empty (whitespace counts as empty).
    - Postal code must match the country pattern, or the generic pattern when the
      country has none. Empty postal code is reported as required, not as a format error.
    - Countries without a postal system skip the postal code checks.

    Never raises for bad input; every problem is a field error.
    """
    r = ValidationResult()
    rule = resolve(address.country, table=table)

    if rule.is_state_constrained and clean_text(address.state) not in rule.state_codes:
        r.add_field_error("state", _REQUIRED)

    for field_name in REQUIRED_FIELDS:
        if r.has_error(field_name):
            continue
        if not is_present(getattr(address, field_name)):
            r.add_field_error(field_name, _REQUIRED)

    _check_postal_code(r, address.postal_code, rule, generic_pattern)

    if not r.ok:
        logger.debug(
            "Address validation failed for country=%r: %s",
            address.country,
            ", ".join(f"{name}={kind.value}" for name, kind in sorted(r.kinds().items())),
        )

    return r
