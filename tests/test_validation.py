from dataclasses import replace

import pytest
from pydantic import ValidationError

from price_predictor.core.utils import current_calendar_year
from price_predictor.models.base import InvalidInputError
from price_predictor.schemas import PredictionRequest


@pytest.mark.parametrize("field,value,message", [
    ("bedrooms", 0, "Must have at least 1 bedroom"),
    ("bedrooms", 11, "Maximum 10 bedrooms"),
    ("bathrooms", 1.25, "Bathrooms must be in steps of 0.5"),
    ("floors", 6, "Maximum 5 floors"),
    ("year_built", 1899, "Year must be after 1900"),
    ("year_built", 2031, "Year cannot be in the future"),
    ("square_feet", 499, "Minimum 500 sq ft"),
    ("square_feet", 10_001, "Maximum 10,000 sq ft"),
    ("location", "coastal", "Please select a location"),
    ("future_years", 101, "Maximum 100 years"),
])
def test_property_validate_rejects(sample_property, field, value, message):
    prop = replace(sample_property, **{field: value})
    with pytest.raises(InvalidInputError) as err:
        prop.validate(current_year=2030)
    assert err.value.message == message


def test_property_validate_allows_missing_horizon(sample_property):
    prop = replace(sample_property, future_years=0)
    assert prop.validate(current_year=2030) is prop


def test_request_defaults_and_aliases():
    req = PredictionRequest.model_validate({"location": " Urban "})
    assert req.location == "urban"
    assert (req.bedrooms, req.bathrooms, req.floors) == (3, 2, 1)
    assert req.year_built == 2000
    assert req.square_feet == 1500
    assert req.future_years == 5
    prop = req.to_property()
    assert prop.location == "urban"
    assert prop.future_years == 5


def test_request_rejects_unknown_location():
    with pytest.raises(ValidationError):
        PredictionRequest.model_validate({"location": "moon"})


def test_request_rejects_future_year():
    with pytest.raises(ValidationError):
        PredictionRequest.model_validate({"location": "rural", "yearBuilt": 9999})


def test_request_accepts_half_bathrooms():
    req = PredictionRequest.model_validate({"location": "rural", "bathrooms": 2.5})
    assert req.bathrooms == 2.5


@pytest.mark.parametrize("field,value,message", [
    ("bathrooms", float("nan"), "Must have at least 1 bathroom"),
    ("bathrooms", float("inf"), "Maximum 10 bathrooms"),
    ("bathrooms", float("-inf"), "Must have at least 1 bathroom"),
    ("square_feet", float("nan"), "Minimum 500 sq ft"),
    ("square_feet", float("inf"), "Maximum 10,000 sq ft"),
])
def test_property_validate_rejects_non_finite(sample_property, field, value, message):
    prop = replace(sample_property, **{field: value})
    with pytest.raises(InvalidInputError) as err:
        prop.validate(current_year=2030)
    assert err.value.message == message


@pytest.mark.parametrize("field,value", [
    ("bedrooms", 1),
    ("bedrooms", 10),
    ("bathrooms", 1),
    ("bathrooms", 10),
    ("floors", 5),
    ("year_built", 1900),
    ("year_built", 2030),
    ("square_feet", 500),
    ("square_feet", 10_000),
    ("future_years", 1),
    ("future_years", 100),
])
def test_property_validate_accepts_boundaries(sample_property, field, value):
    prop = replace(sample_property, **{field: value})
    assert prop.validate(current_year=2030) is prop


@pytest.mark.parametrize("alias,value", [
    ("bathrooms", 10),
    ("squareFeet", 10_000),
    ("floors", 5),
    ("futureYears", 100),
])
def test_request_accepts_upper_bounds(alias, value):
    req = PredictionRequest.model_validate({"location": "urban", alias: value})
    assert req.model_dump(by_alias=True)[alias] == value


def test_request_accepts_current_year():
    year = current_calendar_year()
    req = PredictionRequest.model_validate({"location": "urban", "yearBuilt": year})
    assert req.year_built == year
    assert req.to_property().validate() is not None


@pytest.mark.parametrize("alias", ["bathrooms", "squareFeet"])
@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_request_rejects_non_finite(alias, value):
    with pytest.raises(ValidationError):
        PredictionRequest.model_validate({"location": "urban", alias: value})
