"""Estimate input models.

Acquisition terms, financing terms, scenario drivers and the property
context supplied by the property record provider. All currency values are
plain numbers in one unit; all percentages are in percent units (55 = 55%).
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple

from pydantic import BaseModel, Field, field_validator


class Scenario(str, Enum):
    """Forward-looking projection variant."""

    CONSERVATIVE = "conservative"
    FAVORABLE = "favorable"


class ManagementPlan(str, Enum):
    """Property management plan tier."""

    BASIC = "5% Basic"
    PREMIUM = "7% Premium"


# Fraction of purchase price (one-off fee) and of gross rent (monthly fee)
MANAGEMENT_FEE_RATES: dict[ManagementPlan, float] = {
    ManagementPlan.BASIC: 0.05,
    ManagementPlan.PREMIUM: 0.07,
}


class FinancingType(str, Enum):
    """Kind of mortgage product. Informational; drives form presets only."""

    FIRST_HOME = "Primera vivienda"
    SECOND_HOME = "Segunda vivienda"
    INVESTMENT = "Inversión"


class FinancingPreset(NamedTuple):
    loan_to_value_pct: float
    loan_term_years: int


FINANCING_PRESETS: dict[FinancingType, FinancingPreset] = {
    FinancingType.FIRST_HOME: FinancingPreset(95.0, 30),
    FinancingType.SECOND_HOME: FinancingPreset(65.0, 20),
    FinancingType.INVESTMENT: FinancingPreset(55.0, 15),
}

# Keys of the property record provider's payload
PROPERTY_RECORD_FIELDS: dict[str, str] = {
    "purchase_price": "precio_venta",
    "monthly_rent": "importe_alquiler",
    "community_fees_monthly": "gastos_comunidad",
    "annual_property_tax": "ibi_anual",
    "region_identifier": "provincia",
    "full_address": "full_address",
    "bedroom_count": "habitaciones",
    "renovation_cost": "renovation_cost",
}


class AcquisitionParameters(BaseModel):
    """Purchase terms and expected rent."""

    purchase_price: float = Field(default=0.0, ge=0, description="Purchase price")
    closing_costs: float = Field(default=1500.0, ge=0, description="Closing costs")
    monthly_rent: float = Field(default=500.0, ge=0, description="Expected monthly rent")
    management_plan: ManagementPlan = Field(
        default=ManagementPlan.BASIC, description="Property management plan tier"
    )

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @property
    def management_rate(self) -> float:
        """Management fee as a fraction for the selected plan."""
        return MANAGEMENT_FEE_RATES[self.management_plan]

    @classmethod
    def from_property_record(
        cls, record: Mapping[str, Any], **overrides: Any
    ) -> AcquisitionParameters:
        """Build defaults from a property record; overrides win over the record."""
        data: dict[str, Any] = {}
        for field in ("purchase_price", "monthly_rent"):
            value = record.get(PROPERTY_RECORD_FIELDS[field])
            if value:
                data[field] = value
        data.update(overrides)
        return cls.model_validate(data)


class FinancingParameters(BaseModel):
    """Mortgage terms."""

    financing_type: FinancingType = Field(default=FinancingType.INVESTMENT)
    loan_to_value_pct: float = Field(default=55.0, ge=0, le=100, description="Loan to value %")
    # Not used by the yield formulas; feeds the informational monthly payment
    loan_term_years: int = Field(default=15, ge=0, description="Loan term in years")
    interest_rate_pct: float = Field(default=3.5, ge=0, description="Annual interest rate %")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @classmethod
    def for_type(
        cls, financing_type: FinancingType, interest_rate_pct: float = 3.5
    ) -> FinancingParameters:
        """Financing parameters preset for a financing type."""
        preset = FINANCING_PRESETS[financing_type]
        return cls(
            financing_type=financing_type,
            loan_to_value_pct=preset.loan_to_value_pct,
            loan_term_years=preset.loan_term_years,
            interest_rate_pct=interest_rate_pct,
        )


class ScenarioDrivers(BaseModel):
    """Rental variation and occupancy for both scenarios.

    The rental variation also drives the scenario sale price.
    """

    rental_variation_conservative_pct: float = Field(default=0.0)
    rental_variation_favorable_pct: float = Field(default=5.0)
    occupancy_rate_conservative_pct: float = Field(default=90.0, ge=0, le=100)
    occupancy_rate_favorable_pct: float = Field(default=95.0, ge=0, le=100)

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    def rental_variation(self, scenario: Scenario) -> float:
        return getattr(self, f"rental_variation_{Scenario(scenario).value}_pct")

    def occupancy_rate(self, scenario: Scenario) -> float:
        return getattr(self, f"occupancy_rate_{Scenario(scenario).value}_pct")


class PropertyContext(BaseModel):
    """Property facts supplied by the property record provider."""

    community_fees_monthly: float = Field(default=0.0, ge=0, description="Monthly community fees")
    annual_property_tax: float = Field(default=0.0, ge=0, description="Annual IBI")
    region_identifier: str | None = Field(None, description="Province code or name")
    full_address: str | None = Field(None, description="Postal address")
    bedroom_count: int | None = Field(None, description="Number of bedrooms")
    renovation_cost: float | None = Field(None, ge=0, description="Renovation budget estimate")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @field_validator("community_fees_monthly", "annual_property_tax", mode="before")
    @classmethod
    def missing_as_zero(cls, v: Any) -> Any:
        """Missing recurring costs count as zero."""
        return 0.0 if v is None else v

    @classmethod
    def from_property_record(cls, record: Mapping[str, Any]) -> PropertyContext:
        """Map a property record payload onto the context fields."""
        data = {
            field: record.get(key)
            for field, key in PROPERTY_RECORD_FIELDS.items()
            if field in cls.model_fields
        }
        return cls.model_validate(data)
