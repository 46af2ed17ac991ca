"""English display text for rule outputs (rules layer returns kinds only)."""
from __future__ import annotations

from typing import Dict

from home_address.core.rules import ErrorKind, FieldError, ValidationResult, resolve
from home_address.core.rules.address_rules import FIELD_LABELS


def error_message(field_name: str, error: FieldError) -> str:
    label = FIELD_LABELS.get(field_name, field_name)

    if error.kind is ErrorKind.INVALID_POSTAL_FORMAT:
        if error.sample_formats:
            return f"Incorrect zip code format. Acceptable format: {', '.join(error.sample_formats)}"
        return "Incorrect zip code format."

    return f"{label} is required."


def field_messages(result: ValidationResult) -> Dict[str, str]:
    """field name -> display message, in form order."""
    order = list(FIELD_LABELS)
    names = sorted(result.field_errors, key=lambda n: order.index(n) if n in order else len(order))
    return {name: error_message(name, result.field_errors[name]) for name in names}


def zip_format_hint(country: str) -> str:
    """Hint shown under the postal code input, e.g. "e.g. 12345, 12345-1234"."""
    samples = resolve(country).sample_formats
    if not samples:
        return ""
    return f"e.g. {', '.join(samples)}"
