import asyncio
from typing import Annotated
from functools import lru_cache

from fastapi import APIRouter, Depends, Query

from ..schemas import FormResponse, LocationInfo, PredictionRequest, PredictionResponse
from ..services.prediction_service import PredictionService
from ..core.config import settings
from ..core.security import require_api_key, rate_limit

router = APIRouter()

@lru_cache(maxsize=1)
def service_dep() -> PredictionService:
    # One instance so a seeded random stream advances across requests
    return PredictionService()

async def _cosmetic_delay() -> None:
    if settings.PREDICTION_DELAY_SECONDS > 0:
        await asyncio.sleep(settings.PREDICTION_DELAY_SECONDS)

@router.post("/predict", response_model=PredictionResponse)
async def post_predict(
    body: PredictionRequest,
    _auth = Depends(require_api_key),     # API key guard
    _lim  = Depends(rate_limit),          # Rate limiting
    svc: PredictionService = Depends(service_dep),
):
    await _cosmetic_delay()
    return svc.predict(body.to_property())

@router.get("/predict", response_model=PredictionResponse)
async def get_predict(
    params: Annotated[PredictionRequest, Query()],
    _auth = Depends(require_api_key),
    _lim  = Depends(rate_limit),
    svc: PredictionService = Depends(service_dep),
):
    await _cosmetic_delay()
    return svc.predict(params.to_property())

@router.get("/form", response_model=FormResponse)
def get_form(svc: PredictionService = Depends(service_dep)):
    return svc.form_definition()

@router.get("/locations", response_model=list[LocationInfo])
def get_locations(svc: PredictionService = Depends(service_dep)):
    return svc.locations()
