from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from erfpacht.domain.tariffs import DEFAULTS

ContractType = Literal["AB1986", "AB2024", "unknown"]
TermType = Literal["perpetual", "fixed_term", "unknown"]
YesNoUnknown = Literal["yes", "no", "unknown"]


class HouseholdInput(BaseModel):
    """
    Everything the wizard collects about a leasehold and its holder.

    Optional overrides left as None fall back to tariff tables or app config
    when the comparison is built.
    """
    model_config = ConfigDict(extra="ignore")

    # Step A: contract
    contract_type: ContractType = "AB1986"
    revision_year: int | None = None
    term_type: TermType = "perpetual"
    end_year: int | None = None

    # Step B: values
    ground_value: float = Field(default=100_000.0, ge=0, description="Ground value in EUR")
    assessed_value: float | None = Field(default=None, ge=0, description="WOZ value in EUR")
    issue_year: int | None = None

    # Step C: current payments
    current_canon: float | None = Field(default=None, ge=0, description="Canon on the current bill")
    management_fee: float = Field(default=DEFAULTS.management_fee, ge=0)

    # Step D: tax & financing
    occupied: bool = Field(default=True, description="Primary residence; gates deductibility")
    marginal_tax_rate: float = Field(default=DEFAULTS.marginal_tax_rate, description="0.37 means 37%")
    finance_with_loan: bool = False
    loan_interest_rate: float = DEFAULTS.loan_interest_rate
    loan_term_years: int = Field(default=DEFAULTS.loan_term_years, gt=0)

    # Rate selection
    selected_year: int = Field(default_factory=lambda: date.today().year)
    custom_canon_rate: float | None = None

    # Buyout scenario
    buyout_amount: float | None = Field(default=None, ge=0, description="None = estimate from ground value")
    buyout_keeps_management_fee: bool = False

    # Land purchase scenario
    land_purchase_possible: YesNoUnknown = "unknown"
    land_surcharge: float | None = Field(default=None, ge=0, description="Extra for building rights")

    # Projection overrides
    horizon_years: int | None = Field(default=None, ge=0)
    discount_rate: float | None = None

    @field_validator(
        "marginal_tax_rate",
        "loan_interest_rate",
        "custom_canon_rate",
        "discount_rate",
        mode="before",
    )
    @classmethod
    def _to_fraction(cls, v: Any) -> Any:
        if v is None:
            return v
        is_percent = False
        if isinstance(v, str):
            v = v.strip()
            is_percent = v.endswith("%")
            v = v.rstrip("%").strip()
            if not v:
                return None
        try:
            f = float(v)
        except (TypeError, ValueError) as err:
            raise ValueError("rate must be numeric or percent-like") from err
        # "0.8%" is always a percentage; a bare 37 means 37%
        if is_percent or f > 1.0:
            f = f / 100.0
        if f < 0:
            raise ValueError("rate must be non-negative")
        return f

    @property
    def regime(self) -> str:
        """Contract regime used for rate lookup; unknown contracts are treated as AB1986."""
        return "AB1986" if self.contract_type == "unknown" else self.contract_type
