"""Closed-form house price model for the Indian market."""

from __future__ import annotations

import math
from typing import Optional

from .base import PropertyDescription, RandomSource, ValuationResult
from .random_source import SystemRandomSource
from ..core.utils import current_calendar_year

# Coefficients (amounts in INR)
BASE_PRICE = 5_000_000           # 50 lakhs
BEDROOM_VALUE = 1_000_000        # 10 lakhs per bedroom
BATHROOM_VALUE = 500_000         # 5 lakhs per bathroom
FLOOR_VALUE = 300_000            # 3 lakhs per floor
SQFT_VALUE = 3_000               # per square foot
AGE_DEPRECIATION_PER_YEAR = 50_000
ANNUAL_APPRECIATION_RATE = 0.05
MINIMUM_PRICE = 2_000_000        # 20 lakhs
ROUNDING_UNIT = 100_000          # 1 lakh
RANDOM_FACTOR_MIN = 0.95
RANDOM_FACTOR_MAX = 1.05
DEFAULT_FUTURE_YEARS = 5

LOCATION_MULTIPLIERS = {
    "urban": 1.5,
    "suburban": 1.0,
    "rural": 0.7,
}
NEUTRAL_MULTIPLIER = 1.0


def location_multiplier(location: str) -> float:
    """Unknown locations never fail; they are priced as suburban."""
    return LOCATION_MULTIPLIERS.get(location, NEUTRAL_MULTIPLIER)


def round_to_unit(value: float, unit: int = ROUNDING_UNIT) -> int:
    """Round half-up to the nearest multiple of `unit`."""
    return int(math.floor(value / unit + 0.5)) * unit


def base_price(prop: PropertyDescription, current_year: Optional[int] = None) -> float:
    """
    Price before perturbation, clamping and rounding: weighted feature sum,
    location multiplier, then linear age depreciation. May be negative for
    very old, small houses.
    """
    year = current_year or current_calendar_year()

    price = float(BASE_PRICE)
    price += prop.bedrooms * BEDROOM_VALUE
    price += prop.bathrooms * BATHROOM_VALUE
    price += prop.floors * FLOOR_VALUE
    price += prop.square_feet * SQFT_VALUE

    price *= location_multiplier(prop.location)

    age_in_years = year - prop.year_built
    price -= age_in_years * AGE_DEPRECIATION_PER_YEAR
    return price


def random_factor(source: RandomSource) -> float:
    return RANDOM_FACTOR_MIN + source.next() * (RANDOM_FACTOR_MAX - RANDOM_FACTOR_MIN)


def project_future_price(current_price: int, future_years: int) -> int:
    growth = math.pow(1 + ANNUAL_APPRECIATION_RATE, future_years)
    return round_to_unit(current_price * growth)


def estimate(
    prop: PropertyDescription,
    random_source: Optional[RandomSource] = None,
    current_year: Optional[int] = None,
) -> ValuationResult:
    """
    Estimate the current and projected price of a property.

    Numeric bounds are a precondition (see PropertyDescription.validate) and
    are not re-checked here. The only non-determinism is the +/-5% factor
    drawn from `random_source`; pass FixedRandomSource.neutral() to pin it
    at exactly 1.0.
    """
    source = random_source or SystemRandomSource()

    price = base_price(prop, current_year)
    price *= random_factor(source)
    price = max(price, MINIMUM_PRICE)
    current_price = round_to_unit(price)

    # Compounds from the rounded current price, not the raw one
    future_years = prop.future_years or DEFAULT_FUTURE_YEARS
    future_price = project_future_price(current_price, future_years)

    return ValuationResult(
        current_price=current_price,
        future_price=future_price,
        future_years=future_years,
    )


class FormulaModel:
    """
    Binds a randomness provider to the formula so the service can hold one
    model instance, the same way it would hold any other pricing backend.
    """
    def __init__(self, random_source: Optional[RandomSource] = None):
        self.random_source = random_source or SystemRandomSource()

    def predict(self, prop: PropertyDescription, current_year: Optional[int] = None) -> ValuationResult:
        return estimate(prop, random_source=self.random_source, current_year=current_year)
