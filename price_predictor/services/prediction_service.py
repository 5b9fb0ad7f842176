from ..core.config import settings
from ..core.logging import get_logger
from ..core.metrics import record_prediction
from ..core.utils import current_calendar_year, format_indian_price
from ..models.base import (
    BATHROOMS_RANGE,
    BEDROOMS_RANGE,
    FLOORS_RANGE,
    FUTURE_YEARS_RANGE,
    LOCATIONS,
    MIN_YEAR_BUILT,
    SQUARE_FEET_RANGE,
    InvalidInputError,
    PropertyDescription,
)
from ..models.formula_model import DEFAULT_FUTURE_YEARS, FormulaModel, location_multiplier
from ..models.random_source import random_source

log = get_logger("prediction")

DISCLAIMER = (
    "This estimate is based on a simplified pricing model and is not a "
    "financial appraisal."
)


class PredictionService:
    """
    Orchestrates:
      form fields → domain validation → formula model → formatted response
    The model itself trusts its input, so validation happens here.
    """
    def __init__(self, model: FormulaModel | None = None):
        self.model = model or FormulaModel(random_source())

    def predict(self, prop: PropertyDescription, current_year: int | None = None) -> dict:
        try:
            prop.validate(current_year)
        except InvalidInputError as exc:
            log.warning("rejected property", extra={"fields": {"field": exc.field, "reason": exc.message}})
            raise

        result = self.model.predict(prop, current_year=current_year)
        record_prediction(prop.location, result.current_price)
        log.info(
            "prediction computed",
            extra={"fields": {
                "location": prop.location,
                "current_price": result.current_price,
                "future_price": result.future_price,
                "future_years": result.future_years,
            }},
        )

        payload = result.to_dict()
        payload.update({
            "currency": settings.DEFAULT_CURRENCY,
            "formattedCurrentPrice": format_indian_price(result.current_price, settings.CURRENCY_SYMBOL),
            "formattedFuturePrice": format_indian_price(result.future_price, settings.CURRENCY_SYMBOL),
            "disclaimer": DISCLAIMER,
        })
        return payload

    @staticmethod
    def locations() -> list[dict]:
        return [
            {"key": key, "label": key.capitalize(), "multiplier": location_multiplier(key)}
            for key in LOCATIONS
        ]

    @staticmethod
    def form_definition() -> dict:
        """Everything a client needs to render the house details form."""
        fields = [
            {"name": "bedrooms", "label": "Bedrooms", "widget": "number",
             "min": BEDROOMS_RANGE[0], "max": BEDROOMS_RANGE[1], "step": 1,
             "default": 3, "placeholder": "3"},
            {"name": "bathrooms", "label": "Bathrooms", "widget": "number",
             "min": BATHROOMS_RANGE[0], "max": BATHROOMS_RANGE[1], "step": 0.5,
             "default": 2, "placeholder": "2"},
            {"name": "floors", "label": "Floors", "widget": "number",
             "min": FLOORS_RANGE[0], "max": FLOORS_RANGE[1], "step": 1,
             "default": 1, "placeholder": "1"},
            {"name": "yearBuilt", "label": "Year Built", "widget": "number",
             "min": MIN_YEAR_BUILT, "max": current_calendar_year(), "step": 1,
             "default": 2000, "placeholder": "2000"},
            {"name": "squareFeet", "label": "Square Feet", "widget": "number",
             "min": SQUARE_FEET_RANGE[0], "max": SQUARE_FEET_RANGE[1], "step": 1,
             "default": 1500, "placeholder": "1500"},
            {"name": "location", "label": "Location", "widget": "select",
             "placeholder": "Select location", "options": list(LOCATIONS)},
            {"name": "futureYears", "label": "Future Prediction (Years)", "widget": "slider",
             "min": FUTURE_YEARS_RANGE[0], "max": FUTURE_YEARS_RANGE[1], "step": 1,
             "default": DEFAULT_FUTURE_YEARS,
             "description": "Adjust to predict property value from 1 to 100 years in the future"},
        ]
        return {
            "title": "Indian House Price Predictor",
            "description": "Enter your house details to get an estimated price in INR and future value prediction",
            "fields": fields,
        }
