from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from freshcart.data.database import get_db
from freshcart.domain.schemas import UserCreate, UserRead, ShippingProfile
from freshcart.services.errors import NotFoundError
from freshcart.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserRead)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.create_user(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{user_id}/shipping", response_model=UserRead)
def update_shipping(user_id: str, payload: ShippingProfile, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.update_shipping(user_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
