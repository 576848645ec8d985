# freshcart/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from freshcart.api.deps import get_cart_repo
from freshcart.data.database import get_db
from freshcart.domain.schemas import CartItemIn, CartItemUpdate, CartOut
from freshcart.repos.cart_repo import CartRepo
from freshcart.services.cart_service import CartService
from freshcart.services.catalog_service import CatalogService
from freshcart.services.errors import NotFoundError

router = APIRouter(prefix="/carts", tags=["carts"])


def get_service(
    db: Session = Depends(get_db),
    cart_repo: CartRepo = Depends(get_cart_repo),
) -> CartService:
    return CartService(cart_repo=cart_repo, catalog=CatalogService(db))


@router.get("/{session_id}", response_model=CartOut)
def get_cart(session_id: str, svc: CartService = Depends(get_service)):
    return svc.get_cart(session_id)


@router.post("/{session_id}/items", response_model=CartOut)
def add_item(session_id: str, payload: CartItemIn, svc: CartService = Depends(get_service)):
    try:
        return svc.add_product(session_id, payload.product_id, payload.weight_kg)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/{session_id}/items/{composite_id}", response_model=CartOut)
def update_item(
    session_id: str,
    composite_id: str,
    payload: CartItemUpdate,
    svc: CartService = Depends(get_service),
):
    try:
        return svc.update_item(
            session_id,
            composite_id,
            quantity=payload.quantity,
            weight_kg=payload.weight_kg,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{session_id}/items/{composite_id}", response_model=CartOut)
def remove_item(session_id: str, composite_id: str, svc: CartService = Depends(get_service)):
    return svc.remove_item(session_id, composite_id)


@router.delete("/{session_id}", response_model=CartOut)
def clear_cart(session_id: str, svc: CartService = Depends(get_service)):
    return svc.clear(session_id)
