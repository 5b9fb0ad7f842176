from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.utils import current_calendar_year
from .models.base import LOCATIONS, MIN_YEAR_BUILT, PropertyDescription


class PredictionRequest(BaseModel):
    """House details as submitted by the form. Defaults mirror the form's."""
    model_config = ConfigDict(populate_by_name=True)

    bedrooms: int = Field(3, ge=1, le=10)
    bathrooms: float = Field(2, ge=1, le=10, allow_inf_nan=False)
    floors: int = Field(1, ge=1, le=5)
    year_built: int = Field(2000, alias="yearBuilt", ge=MIN_YEAR_BUILT)
    square_feet: float = Field(1500, alias="squareFeet", ge=500, le=10_000, allow_inf_nan=False)
    location: str = Field(min_length=1)
    # 0 is let through on purpose: the engine treats it as "use default horizon"
    future_years: int | None = Field(5, alias="futureYears", ge=0, le=100)

    @field_validator("bathrooms")
    @classmethod
    def half_steps(cls, v: float) -> float:
        if (v * 2) != int(v * 2):
            raise ValueError("Bathrooms must be in steps of 0.5")
        return v

    @field_validator("year_built")
    @classmethod
    def not_in_future(cls, v: int) -> int:
        if v > current_calendar_year():
            raise ValueError("Year cannot be in the future")
        return v

    @field_validator("location")
    @classmethod
    def known_location(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in LOCATIONS:
            raise ValueError("Please select a location")
        return v

    def to_property(self) -> PropertyDescription:
        return PropertyDescription(
            bedrooms=self.bedrooms,
            bathrooms=self.bathrooms,
            floors=self.floors,
            year_built=self.year_built,
            square_feet=self.square_feet,
            location=self.location,
            future_years=self.future_years,
        )


class PredictionResponse(BaseModel):
    currentPrice: int = Field(ge=0)
    futurePrice: int = Field(ge=0)
    futureYears: int = Field(ge=1)
    currency: str = "INR"
    formattedCurrentPrice: str
    formattedFuturePrice: str
    disclaimer: str


class FormField(BaseModel):
    name: str
    label: str
    widget: str                       # number | select | slider
    min: float | None = None
    max: float | None = None
    step: float | None = None
    default: float | str | None = None
    placeholder: str | None = None
    description: str | None = None
    options: list[str] | None = None


class FormResponse(BaseModel):
    title: str
    description: str
    fields: list[FormField]


class LocationInfo(BaseModel):
    key: str
    label: str
    multiplier: float
