# src/erfpacht/services/validation.py

from typing import Any

from erfpacht.domain.household import HouseholdInput

# Fields that are truly required to compute anything
REQUIRED_CORE_FIELDS = [
    "ground_value",
]

# Keys used by the web wizard's saved state -> our field names
LEGACY_KEYS = {
    "contractType": "contract_type",
    "herzieningsjaar": "revision_year",
    "looptijd": "term_type",
    "einddatum": "end_year",
    "grondwaarde": "ground_value",
    "wozWaarde": "assessed_value",
    "uitgiftejaar": "issue_year",
    "huidigeCanon": "current_canon",
    "beheerkosten": "management_fee",
    "isEigenWoning": "occupied",
    "marginaleTariefgroep": "marginal_tax_rate",
    "financierenMetLening": "finance_with_loan",
    "leningRente": "loan_interest_rate",
    "leningLooptijd": "loan_term_years",
    "selectedYear": "selected_year",
    "customCanonRate": "custom_canon_rate",
    "afkoopBedrag": "buyout_amount",
    "afkoopBeheerkosten": "buyout_keeps_management_fee",
    "blootEigendomMogelijk": "land_purchase_possible",
    "extraBouwMogelijkheden": "land_surcharge",
}

LEGACY_VALUES = {
    "term_type": {"eeuwigdurend": "perpetual", "aflopend": "fixed_term"},
    "land_purchase_possible": {"ja": "yes", "nee": "no"},
}

NUMERIC_FIELDS = [
    "ground_value",
    "management_fee",
]

OPTIONAL_NUMERIC_FIELDS = [
    "assessed_value",
    "current_canon",
    "buyout_amount",
    "land_surcharge",
]


def _to_num(val: Any, field_name: str) -> float:
    """
    Coerce values like:
      - 250000
      - "250000"
      - "€ 250000"
      - "3.3%"
    into float.
    """
    if val is None:
        raise ValueError(f"Missing required numeric field: {field_name}")
    if isinstance(val, bool):
        raise ValueError(f"Invalid type for {field_name}: {type(val)}")
    if isinstance(val, (int, float)):
        return float(val)
    if isinstance(val, str):
        s = val.strip().replace("€", "").replace(" ", "").replace("_", "")
        if s.endswith("%"):
            # strip '%' but leave normalization decision to the model
            s = s[:-1]
        try:
            return float(s)
        except ValueError:
            raise ValueError(f"Invalid number for {field_name}: {val!r}") from None
    raise ValueError(f"Invalid type for {field_name}: {type(val)}")


def _to_num_optional(val: Any, field_name: str) -> float | None:
    """Like _to_num, but missing, blank and zero mean "not given"."""
    if val is None or (isinstance(val, str) and not val.strip()):
        return None
    f = _to_num(val, field_name)
    return f or None


def validate_and_prepare_payload(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize an incoming household payload.

    Responsibilities:
      - Translate keys saved by the web wizard.
      - Ensure the core fields exist.
      - Coerce numeric strings; percent handling is left to HouseholdInput.
    """
    cleaned: dict[str, Any] = {}
    for key, value in raw.items():
        name = LEGACY_KEYS.get(key, key)
        mapping = LEGACY_VALUES.get(name)
        if mapping and isinstance(value, str):
            value = mapping.get(value, value)
        cleaned[name] = value

    for field in REQUIRED_CORE_FIELDS:
        if field not in cleaned:
            raise ValueError(f"Missing required field: {field}")

    for field in NUMERIC_FIELDS:
        if field in cleaned:
            cleaned[field] = _to_num(cleaned[field], field)

    for field in OPTIONAL_NUMERIC_FIELDS:
        if field in cleaned:
            cleaned[field] = _to_num_optional(cleaned[field], field)

    return cleaned


def parse_household(raw: dict[str, Any]) -> HouseholdInput:
    return HouseholdInput(**validate_and_prepare_payload(raw))
