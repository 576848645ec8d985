# freshcart/api/routers/enquiries.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from freshcart.data.database import get_db
from freshcart.domain.schemas import (
    ContactIn,
    ProductSuggestionIn,
    ProductSuggestionOut,
    SocietyRequestIn,
    SocietyRequestOut,
)
from freshcart.services.enquiry_service import EnquiryService

router = APIRouter(tags=["enquiries"])


def get_service(db: Session = Depends(get_db)) -> EnquiryService:
    return EnquiryService(db)


@router.post("/contact")
def submit_contact(payload: ContactIn, svc: EnquiryService = Depends(get_service)):
    submission = svc.submit_contact(payload.model_dump())
    return {"success": True, "id": submission.id}


@router.post("/product-suggestions", response_model=ProductSuggestionOut, status_code=201)
def suggest_product(payload: ProductSuggestionIn, svc: EnquiryService = Depends(get_service)):
    return svc.suggest_product(payload.model_dump())


@router.post("/society-requests", response_model=SocietyRequestOut, status_code=201)
def request_society(payload: SocietyRequestIn, svc: EnquiryService = Depends(get_service)):
    return svc.request_society(payload.model_dump())
