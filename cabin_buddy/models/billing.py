"""Pydantic models for stay billing configuration and results."""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BillingMethod(str, Enum):
    """Pricing methods an organization can bill stays with."""

    PER_PERSON_PER_DAY = "per-person-per-day"
    PER_PERSON_PER_WEEK = "per-person-per-week"
    FLAT_RATE_PER_DAY = "flat-rate-per-day"
    FLAT_RATE_PER_WEEK = "flat-rate-per-week"
    FLAT_RATE_PER_SEASON = "flat-rate-per-season"

    @classmethod
    def normalize(cls, method: Optional[str]) -> Optional["BillingMethod"]:
        """Resolve a stored method string to a BillingMethod.

        Stored configs use kebab-case or snake_case and "night" or "day"
        interchangeably, e.g. "per_person_per_night" is "per-person-per-day".

        Args:
            method: Method string as stored on the billing config

        Returns:
            Matching BillingMethod, or None if the string is unknown
        """
        if not method:
            return None
        normalized = method.lower().replace("_", "-").replace("night", "day")
        try:
            return cls(normalized)
        except ValueError:
            return None


def _coerce_date(v):
    """Reduce datetimes and ISO timestamps to calendar dates."""
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, str) and len(v) > 10:  # Full ISO timestamp
        return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
    if v == "":
        return None
    return v


class BillingConfig(BaseModel):
    """Pricing policy for a stay.

    Every field is optional so incomplete configs can still be run through
    validation; calculation assumes a config that validated cleanly.
    """

    method: Optional[str] = Field(
        None,
        description="Billing method, e.g. 'per-person-per-day'",
    )
    amount: Optional[float] = Field(None, description="Unit price, must be > 0")
    tax_rate: Optional[float] = Field(
        None,
        alias="taxRate",
        description="Tax percentage applied to the subtotal (0-100)",
    )
    cleaning_fee: Optional[float] = Field(None, alias="cleaningFee")
    pet_fee: Optional[float] = Field(None, alias="petFee")
    damage_deposit: Optional[float] = Field(
        None,
        alias="damageDeposit",
        description="Refundable hold, added after tax",
    )
    late_fee_amount: Optional[float] = Field(None, alias="lateFeeAmount")
    late_fee_days: Optional[int] = Field(None, alias="lateFeeDays")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class StayDetails(BaseModel):
    """Facts of one reservation needed to price it."""

    guests: int = Field(description="Number of guests")
    nights: int = Field(description="Number of nights")
    weeks: Optional[int] = Field(
        None,
        description="Billable weeks; derived as ceil(nights / 7) when absent",
    )
    check_in_date: date = Field(alias="checkInDate")
    check_out_date: date = Field(alias="checkOutDate")
    season_start_date: Optional[date] = Field(None, alias="seasonStartDate")
    season_end_date: Optional[date] = Field(None, alias="seasonEndDate")

    @field_validator(
        "check_in_date",
        "check_out_date",
        "season_start_date",
        "season_end_date",
        mode="before",
    )
    @classmethod
    def parse_dates(cls, v):
        """Accept datetimes and timestamps as calendar dates."""
        return _coerce_date(v)

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class BillingBreakdown(BaseModel):
    """Computed cost of a stay.

    subtotal = base + cleaning + pet fee (damage deposit excluded)
    total = subtotal + tax + damage deposit
    """

    base_amount: float = Field(alias="baseAmount")
    cleaning_fee: float = Field(alias="cleaningFee")
    pet_fee: float = Field(alias="petFee")
    damage_deposit: float = Field(alias="damageDeposit")
    subtotal: float
    tax: float
    total: float
    details: str = Field(description="Human-readable formula for receipts")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class DayCost(BaseModel):
    """Cost of a single occupied day."""

    date: str
    guests: int
    cost: float

    model_config = ConfigDict(frozen=True)


class OccupancyBillingBreakdown(BillingBreakdown):
    """Breakdown computed from actual per-day guest counts."""

    day_breakdown: list[DayCost] = Field(default_factory=list, alias="dayBreakdown")


class ValidationResult(BaseModel):
    """Outcome of validating a billing config."""

    is_valid: bool = Field(alias="isValid")
    errors: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
