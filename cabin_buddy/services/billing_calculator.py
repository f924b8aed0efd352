"""Stay billing calculation under the organization's pricing method.

Calculation flow:
1. Base amount from the billing method and stay counts
2. Subtotal = base + cleaning fee + pet fee
3. Tax = subtotal × tax rate / 100
4. Total = subtotal + tax + damage deposit (deposit is a refundable hold, never taxed)

Amounts are plain floats and are not rounded here; rounding happens only
when formatting for display.
"""

import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping

from structlog import get_logger

from cabin_buddy.models.billing import (
    BillingBreakdown,
    BillingConfig,
    BillingMethod,
    DayCost,
    OccupancyBillingBreakdown,
    StayDetails,
    ValidationResult,
)
from cabin_buddy.utils.dates import calculate_nights

logger = get_logger(__name__)

DAYS_PER_WEEK = 7
CENT = Decimal("0.01")


class BillingCalculationError(ValueError):
    """Raised when a stay cannot be priced with the given config."""

    pass


def _format_number(value: float) -> str:
    """Render a number the way the web client interpolates it (600, not 600.0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class BillingCalculator:
    """Prices stays. Stateless; every method is a static function of its inputs."""

    @staticmethod
    def _to_config(config: BillingConfig | Mapping[str, Any]) -> BillingConfig:
        if isinstance(config, BillingConfig):
            return config
        return BillingConfig(**config)

    @staticmethod
    def _to_stay(stay: StayDetails | Mapping[str, Any]) -> StayDetails:
        if isinstance(stay, StayDetails):
            return stay
        return StayDetails(**stay)

    @staticmethod
    def _billable_weeks(stay: StayDetails) -> int:
        """Explicit weeks, or nights rounded up to whole weeks."""
        if stay.weeks is not None:
            return stay.weeks
        return math.ceil(stay.nights / DAYS_PER_WEEK)

    @staticmethod
    def _resolve_method(config: BillingConfig) -> BillingMethod:
        method = BillingMethod.normalize(config.method)
        if method is None:
            raise BillingCalculationError(f"Unknown billing method: {config.method}")
        return method

    @staticmethod
    def _calculate_base_amount(
        config: BillingConfig,
        stay: StayDetails,
        method: BillingMethod,
    ) -> float:
        amount = config.amount or 0

        if method is BillingMethod.PER_PERSON_PER_DAY:
            return stay.guests * stay.nights * amount

        if method is BillingMethod.PER_PERSON_PER_WEEK:
            return stay.guests * BillingCalculator._billable_weeks(stay) * amount

        if method is BillingMethod.FLAT_RATE_PER_DAY:
            return stay.nights * amount

        if method is BillingMethod.FLAT_RATE_PER_WEEK:
            return BillingCalculator._billable_weeks(stay) * amount

        # Flat rate per season: whole stay must sit inside the season
        if stay.season_start_date is None or stay.season_end_date is None:
            raise BillingCalculationError("Season dates required for seasonal billing")
        if (
            stay.check_in_date < stay.season_start_date
            or stay.check_out_date > stay.season_end_date
        ):
            raise BillingCalculationError(
                "Stay dates fall outside of season billing period"
            )
        return amount

    @staticmethod
    def _generate_details(
        config: BillingConfig,
        stay: StayDetails,
        method: BillingMethod,
        base_amount: float,
    ) -> str:
        rate = _format_number(config.amount or 0)
        base = _format_number(base_amount)

        if method is BillingMethod.PER_PERSON_PER_DAY:
            return (
                f"{stay.guests} guests × {stay.nights} nights × "
                f"${rate}/person/day = ${base}"
            )
        if method is BillingMethod.PER_PERSON_PER_WEEK:
            weeks = BillingCalculator._billable_weeks(stay)
            return f"{stay.guests} guests × {weeks} weeks × ${rate}/person/week = ${base}"
        if method is BillingMethod.FLAT_RATE_PER_DAY:
            return f"{stay.nights} nights × ${rate}/day = ${base}"
        if method is BillingMethod.FLAT_RATE_PER_WEEK:
            weeks = BillingCalculator._billable_weeks(stay)
            return f"{weeks} weeks × ${rate}/week = ${base}"
        return (
            f"Flat seasonal rate ({stay.season_start_date.isoformat()} to "
            f"{stay.season_end_date.isoformat()}) = ${base}"
        )

    @staticmethod
    def _apply_fees(config: BillingConfig, base_amount: float) -> dict[str, float]:
        """Add fees, tax and deposit on top of a base amount."""
        cleaning_fee = config.cleaning_fee or 0
        pet_fee = config.pet_fee or 0
        damage_deposit = config.damage_deposit or 0

        subtotal = base_amount + cleaning_fee + pet_fee
        tax = (subtotal * config.tax_rate) / 100 if config.tax_rate else 0
        total = subtotal + tax + damage_deposit

        return {
            "base_amount": base_amount,
            "cleaning_fee": cleaning_fee,
            "pet_fee": pet_fee,
            "damage_deposit": damage_deposit,
            "subtotal": subtotal,
            "tax": tax,
            "total": total,
        }

    @staticmethod
    def calculate_stay_billing(
        config: BillingConfig | Mapping[str, Any],
        stay: StayDetails | Mapping[str, Any],
    ) -> BillingBreakdown:
        """Compute the cost breakdown of a stay.

        Args:
            config: Billing config (model or dict with camelCase/snake_case keys)
            stay: Stay details (model or dict)

        Returns:
            BillingBreakdown with amounts and a details formula string

        Raises:
            BillingCalculationError: Unknown method, missing season dates, or a
                stay that is not fully inside the season
        """
        config = BillingCalculator._to_config(config)
        stay = BillingCalculator._to_stay(stay)

        method = BillingCalculator._resolve_method(config)
        base_amount = BillingCalculator._calculate_base_amount(config, stay, method)
        amounts = BillingCalculator._apply_fees(config, base_amount)
        details = BillingCalculator._generate_details(config, stay, method, base_amount)

        logger.debug(
            "Stay billing calculated",
            method=method.value,
            guests=stay.guests,
            nights=stay.nights,
            total=amounts["total"],
        )

        return BillingBreakdown(**amounts, details=details)

    @staticmethod
    def calculate_from_daily_occupancy(
        config: BillingConfig | Mapping[str, Any],
        daily_occupancy: Mapping[str, int],
        check_in_date: date | str,
        check_out_date: date | str,
    ) -> OccupancyBillingBreakdown:
        """Bill a stay from the guest count actually recorded for each day.

        Weekly rates are pro-rated to a seventh per day. Flat rates only
        charge days with at least one guest. With no daily data, falls back
        to calculate_stay_billing for the nights between the dates.

        Args:
            config: Billing config
            daily_occupancy: Guest count keyed by day (ISO date keys sort in order)
            check_in_date: First day of the stay
            check_out_date: Checkout day (not billed)

        Returns:
            OccupancyBillingBreakdown with one DayCost per recorded day
        """
        config = BillingCalculator._to_config(config)
        days = sorted(daily_occupancy)

        if not days:
            nights = calculate_nights(check_in_date, check_out_date)
            fallback = BillingCalculator.calculate_stay_billing(
                config,
                StayDetails(
                    guests=0,
                    nights=nights,
                    check_in_date=check_in_date,
                    check_out_date=check_out_date,
                ),
            )
            return OccupancyBillingBreakdown(**fallback.model_dump(), day_breakdown=[])

        method = BillingMethod.normalize(config.method)
        amount = config.amount or 0

        day_breakdown: list[DayCost] = []
        base_amount = 0.0

        for day_key in days:
            guests = daily_occupancy[day_key] or 0

            if method is BillingMethod.PER_PERSON_PER_DAY:
                day_cost = guests * amount
            elif method is BillingMethod.PER_PERSON_PER_WEEK:
                day_cost = (guests * amount) / DAYS_PER_WEEK
            elif method is BillingMethod.FLAT_RATE_PER_DAY:
                day_cost = amount if guests > 0 else 0
            elif method is BillingMethod.FLAT_RATE_PER_WEEK:
                day_cost = amount / DAYS_PER_WEEK if guests > 0 else 0
            else:
                day_cost = 0

            base_amount += day_cost
            day_breakdown.append(DayCost(date=day_key, guests=guests, cost=day_cost))

            logger.debug(
                "Daily occupancy cost",
                day=day_key,
                guests=guests,
                cost=day_cost,
                running_base_amount=base_amount,
            )

        if method is None or method is BillingMethod.FLAT_RATE_PER_SEASON:
            logger.warning(
                "Billing method has no daily rate, days billed at zero",
                method=config.method,
            )

        amounts = BillingCalculator._apply_fees(config, base_amount)

        return OccupancyBillingBreakdown(
            **amounts,
            details=f"Calculated from {len(days)} days of actual occupancy",
            day_breakdown=day_breakdown,
        )

    @staticmethod
    def validate_billing_config(
        config: BillingConfig | Mapping[str, Any],
    ) -> ValidationResult:
        """Collect every problem with a billing config.

        Does not stop at the first problem; all violations are reported.

        Args:
            config: Billing config to check

        Returns:
            ValidationResult with is_valid and the list of error messages
        """
        config = BillingCalculator._to_config(config)
        errors: list[str] = []

        if not config.method:
            errors.append("Billing method is required")

        if not config.amount or config.amount <= 0:
            errors.append("Billing amount must be greater than 0")

        if config.tax_rate is not None and (config.tax_rate < 0 or config.tax_rate > 100):
            errors.append("Tax rate must be between 0 and 100")

        return ValidationResult(is_valid=not errors, errors=errors)

    @staticmethod
    def format_currency(amount: float) -> str:
        """Format an amount as US dollars, e.g. 1234.5 -> '$1,234.50'."""
        cents = Decimal(str(abs(amount))).quantize(CENT, rounding=ROUND_HALF_UP)
        sign = "-" if amount < 0 and cents else ""
        return f"{sign}${cents:,.2f}"
