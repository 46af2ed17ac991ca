"""
Country reference data for the home address form.

Loaded once at import time and exposed as read-only mappings:
- COUNTRY_NAMES: ISO code -> English display name (country picker list)
- US_STATES: state code -> name (state picker list)
- COUNTRY_RULES: ISO code -> CountryPostalRule
- GENERIC_POSTAL_PATTERN: fallback for countries without a configured pattern
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

from home_address.core.canonical import country_code_key, lookup_key


DEFAULT_COUNTRY = "US"

# Up to 10 word/space/dash chars, not starting with space or dash, ending with a word char.
GENERIC_POSTAL_PATTERN: re.Pattern[str] = re.compile(r"(?:(?![\s-])[\w -]{0,9}\w)?", re.ASCII)


@dataclass(frozen=True)
class CountryPostalRule:
    """
    Validation behavior for one country.

    - pattern: country-specific postal code pattern; None means the generic pattern applies.
    - sample_formats: example postal codes, only used to build messages.
    - is_state_constrained: state must be one of state_codes instead of free text.
    - has_postal_system: False only for countries explicitly marked as having no postal codes.
    """
    pattern: Optional[re.Pattern[str]] = None
    sample_formats: Tuple[str, ...] = ()
    is_state_constrained: bool = False
    state_codes: FrozenSet[str] = field(default_factory=frozenset)
    has_postal_system: bool = True


DEFAULT_RULE = CountryPostalRule()

NO_POSTAL_SYSTEM = CountryPostalRule(has_postal_system=False)


_COUNTRY_NAMES: Dict[str, str] = {
    "AE": "United Arab Emirates",
    "AG": "Antigua and Barbuda",
    "AR": "Argentina",
    "AT": "Austria",
    "AU": "Australia",
    "BE": "Belgium",
    "BR": "Brazil",
    "BS": "Bahamas",
    "CA": "Canada",
    "CH": "Switzerland",
    "CI": "Côte d'Ivoire",
    "CN": "China",
    "CZ": "Czechia",
    "DE": "Germany",
    "DK": "Denmark",
    "ES": "Spain",
    "FI": "Finland",
    "FJ": "Fiji",
    "FR": "France",
    "GB": "United Kingdom",
    "GR": "Greece",
    "HK": "Hong Kong",
    "IE": "Ireland",
    "IL": "Israel",
    "IN": "India",
    "IT": "Italy",
    "JP": "Japan",
    "KR": "South Korea",
    "MX": "Mexico",
    "NG": "Nigeria",
    "NL": "Netherlands",
    "NO": "Norway",
    "NZ": "New Zealand",
    "PH": "Philippines",
    "PL": "Poland",
    "PT": "Portugal",
    "QA": "Qatar",
    "RO": "Romania",
    "SE": "Sweden",
    "SG": "Singapore",
    "TR": "Türkiye",
    "UA": "Ukraine",
    "US": "United States",
    "ZA": "South Africa",
    "ZW": "Zimbabwe",
}

_US_STATES: Dict[str, str] = {
    "AK": "Alaska",
    "AL": "Alabama",
    "AR": "Arkansas",
    "AS": "American Samoa",
    "AZ": "Arizona",
    "CA": "California",
    "CO": "Colorado",
    "CT": "Connecticut",
    "DC": "District Of Columbia",
    "DE": "Delaware",
    "FL": "Florida",
    "FM": "Federated States Of Micronesia",
    "GA": "Georgia",
    "GU": "Guam",
    "HI": "Hawaii",
    "IA": "Iowa",
    "ID": "Idaho",
    "IL": "Illinois",
    "IN": "Indiana",
    "KS": "Kansas",
    "KY": "Kentucky",
    "LA": "Louisiana",
    "MA": "Massachusetts",
    "MD": "Maryland",
    "ME": "Maine",
    "MH": "Marshall Islands",
    "MI": "Michigan",
    "MN": "Minnesota",
    "MO": "Missouri",
    "MP": "Northern Mariana Islands",
    "MS": "Mississippi",
    "MT": "Montana",
    "NC": "North Carolina",
    "ND": "North Dakota",
    "NE": "Nebraska",
    "NH": "New Hampshire",
    "NJ": "New Jersey",
    "NM": "New Mexico",
    "NV": "Nevada",
    "NY": "New York",
    "OH": "Ohio",
    "OK": "Oklahoma",
    "OR": "Oregon",
    "PA": "Pennsylvania",
    "PR": "Puerto Rico",
    "PW": "Palau",
    "RI": "Rhode Island",
    "SC": "South Carolina",
    "SD": "South Dakota",
    "TN": "Tennessee",
    "TX": "Texas",
    "UT": "Utah",
    "VA": "Virginia",
    "VI": "Virgin Islands",
    "VT": "Vermont",
    "WA": "Washington",
    "WI": "Wisconsin",
    "WV": "West Virginia",
    "WY": "Wyoming",
}

COUNTRY_NAMES: Mapping[str, str] = MappingProxyType(_COUNTRY_NAMES)
US_STATES: Mapping[str, str] = MappingProxyType(_US_STATES)


def _rule(pattern: str, samples: str, *, ignore_case: bool = False) -> CountryPostalRule:
    flags = re.ASCII | (re.IGNORECASE if ignore_case else 0)
    return CountryPostalRule(
        pattern=re.compile(pattern, flags),
        sample_formats=tuple(s.strip() for s in samples.split(",") if s.strip()),
    )


_COUNTRY_RULES: Dict[str, CountryPostalRule] = {
    "AR": _rule(r"[A-Z]?\d{4}(?:[A-Z]{3})?", "A4400XXX, 4400", ignore_case=True),
    "AT": _rule(r"\d{4}", "1010, 8010, 6020"),
    "AU": _rule(r"\d{4}", "7181, 7735, 9169"),
    "BE": _rule(r"\d{4}", "1000, 2000, 9000"),
    "BR": _rule(r"\d{5}-?\d{3}", "18240-230, 81770-920, 11111-111"),
    "CA": _rule(
        r"[ABCEGHJ-NPRSTVXY]\d[ABCEGHJ-NPRSTV-Z] ?\d[ABCEGHJ-NPRSTV-Z]\d",
        "K1A 0B1, B2R 4P9, L4B 4V3",
        ignore_case=True,
    ),
    "CH": _rule(r"\d{4}", "6370, 7401, 1006"),
    "CN": _rule(r"\d{6}", "100000, 200000, 510000"),
    "CZ": _rule(r"\d{3} ?\d{2}", "100 00, 251 66, 530 87"),
    "DE": _rule(r"\d{5}", "33185, 37248, 42285"),
    "DK": _rule(r"\d{4}", "1050, 8000, 9990"),
    "ES": _rule(r"\d{5}", "03315, 00413, 23179"),
    "FI": _rule(r"\d{5}", "00100, 33100, 96300"),
    "FR": _rule(r"\d{2} ?\d{3}", "33380, 61250, 32911"),
    "GB": _rule(
        r"[A-Z]{1,2}[0-9R][0-9A-Z]? ?[0-9][ABD-HJLNP-UW-Z]{2}",
        "LA102UX, BL2F8FX, BD1S9LU, WR4G 6LH",
        ignore_case=True,
    ),
    "GR": _rule(r"\d{3} ?\d{2}", "151 24, 151 10, 101 88"),
    "IE": _rule(r"(?:[AC-FHKNPRTV-Y]\d{2}|D6W) ?[0-9AC-FHKNPRTV-Y]{4}", "D02 X285, D6W 1234", ignore_case=True),
    "IL": _rule(r"\d{5}(?:\d{2})?", "26691, 7963906"),
    "IN": _rule(r"\d{6}", "110011, 110001, 400001"),
    "IT": _rule(r"\d{5}", "31701, 99191, 54190"),
    "JP": _rule(r"\d{3}-?\d{4}", "135-8620, 1358620"),
    "KR": _rule(r"\d{5}", "03051, 11962"),
    "MX": _rule(r"\d{5}", "34113, 59959, 82249"),
    "NL": _rule(r"\d{4} ?(?!SA|SD|SS)[A-Z]{2}", "6998 VY, 8390 MK, 4199 RR", ignore_case=True),
    "NO": _rule(r"\d{4}", "0150, 5003, 9019"),
    "PH": _rule(r"\d{4}", "1000, 6000"),
    "PL": _rule(r"\d{2}-\d{3}", "63-825, 33-263, 89-076"),
    "PT": _rule(r"\d{4}(?:-\d{3})?", "1000-001, 4000"),
    "RO": _rule(r"\d{6}", "010011, 300001"),
    "SE": _rule(r"\d{3} ?\d{2}", "113 51, 511 00, 117 23"),
    "SG": _rule(r"\d{6}", "018956, 238859"),
    "TR": _rule(r"\d{5}", "34000, 06100"),
    "UA": _rule(r"\d{5}", "01001, 65000"),
    "US": CountryPostalRule(
        pattern=re.compile(r"\d{5}(?:[- ]\d{4})?", re.ASCII),
        sample_formats=("12345", "12345-1234", "12345 1234"),
        is_state_constrained=True,
        state_codes=frozenset(_US_STATES),
    ),
    "ZA": _rule(r"\d{4}", "0001, 8001"),
    # No postal code system.
    "AE": NO_POSTAL_SYSTEM,
    "AG": NO_POSTAL_SYSTEM,
    "BS": NO_POSTAL_SYSTEM,
    "FJ": NO_POSTAL_SYSTEM,
    "HK": NO_POSTAL_SYSTEM,
    "QA": NO_POSTAL_SYSTEM,
    "ZW": NO_POSTAL_SYSTEM,
}

COUNTRY_RULES: Mapping[str, CountryPostalRule] = MappingProxyType(_COUNTRY_RULES)

_NAME_TO_CODE: Mapping[str, str] = MappingProxyType(
    {lookup_key(name): code for code, name in _COUNTRY_NAMES.items()}
)


def country_iso(value: object) -> str:
    """
    Resolve a stored country value to its ISO code.

    Accepts an ISO code in any case ("us") or a display name ("United States",
    "Cote d'Ivoire"). Returns "" when the value is empty or not recognized.
    """
    code = country_code_key(value)
    if not code:
        return ""
    if code in COUNTRY_NAMES:
        return code
    return _NAME_TO_CODE.get(lookup_key(value), "")


def country_choices() -> Tuple[Tuple[str, str], ...]:
    """(code, name) pairs sorted by display name."""
    return tuple(sorted(COUNTRY_NAMES.items(), key=lambda kv: lookup_key(kv[1])))


def state_choices(states: Mapping[str, str] = US_STATES) -> Tuple[Tuple[str, str], ...]:
    """(code, name) pairs sorted by display name."""
    return tuple(sorted(states.items(), key=lambda kv: kv[1]))
