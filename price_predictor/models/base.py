from typing import Protocol, Optional
from dataclasses import dataclass

from ..core.utils import current_calendar_year

# ----- Domain bounds (what the form accepts) -----

BEDROOMS_RANGE = (1, 10)
BATHROOMS_RANGE = (1, 10)
FLOORS_RANGE = (1, 5)
MIN_YEAR_BUILT = 1900
SQUARE_FEET_RANGE = (500, 10_000)
FUTURE_YEARS_RANGE = (1, 100)
LOCATIONS = ("urban", "suburban", "rural")


class InvalidInputError(ValueError):
    """Raised when a property description falls outside the accepted domain."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


# ----- Data shapes (thin & explicit) -----

@dataclass(frozen=True)
class PropertyDescription:
    bedrooms: int
    bathrooms: float          # half-steps allowed, e.g. 2.5
    floors: int
    year_built: int
    square_feet: float
    location: str             # urban | suburban | rural
    future_years: Optional[int] = None  # 0/None -> engine default

    def validate(self, current_year: Optional[int] = None) -> "PropertyDescription":
        """
        Check every field against the form's domain and raise InvalidInputError
        on the first violation. Returns self so callers can chain.
        """
        year = current_year or current_calendar_year()
        _check_range("bedrooms", self.bedrooms, BEDROOMS_RANGE,
                     "Must have at least 1 bedroom", "Maximum 10 bedrooms")
        _check_range("bathrooms", self.bathrooms, BATHROOMS_RANGE,
                     "Must have at least 1 bathroom", "Maximum 10 bathrooms")
        if (self.bathrooms * 2) != int(self.bathrooms * 2):
            raise InvalidInputError("bathrooms", "Bathrooms must be in steps of 0.5")
        _check_range("floors", self.floors, FLOORS_RANGE,
                     "Must have at least 1 floor", "Maximum 5 floors")
        _check_range("yearBuilt", self.year_built, (MIN_YEAR_BUILT, year),
                     "Year must be after 1900", "Year cannot be in the future")
        _check_range("squareFeet", self.square_feet, SQUARE_FEET_RANGE,
                     "Minimum 500 sq ft", "Maximum 10,000 sq ft")
        if self.location not in LOCATIONS:
            raise InvalidInputError("location", "Please select a location")
        # 0/None is tolerated: the engine substitutes its default horizon
        if self.future_years:
            _check_range("futureYears", self.future_years, FUTURE_YEARS_RANGE,
                         "Minimum 1 year", "Maximum 100 years")
        return self


def _check_range(field: str, value, bounds, too_low: str, too_high: str) -> None:
    low, high = bounds
    # Written as a containment test so NaN fails it too
    if not (low <= value <= high):
        raise InvalidInputError(field, too_high if value > high else too_low)


@dataclass(frozen=True)
class ValuationResult:
    current_price: int
    future_price: int
    future_years: int

    def to_dict(self) -> dict:
        return {
            "currentPrice": self.current_price,
            "futurePrice": self.future_price,
            "futureYears": self.future_years,
        }


# ----- Protocols (interfaces) -----

class RandomSource(Protocol):
    def next(self) -> float:
        """Return a float in [0, 1)."""
        ...
