from fastapi import APIRouter

from freshcart.domain.schemas import WeightOut
from freshcart.domain.weights import WEIGHT_OPTIONS

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/weights", response_model=list[WeightOut])
def list_weights():
    return WEIGHT_OPTIONS
