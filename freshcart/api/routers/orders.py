# freshcart/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from freshcart.api.deps import get_cart_repo, get_order_store
from freshcart.data.database import get_db
from freshcart.domain.schemas import CheckoutIn, OrderOut
from freshcart.repos.cart_repo import CartRepo
from freshcart.repos.storage import OrderStore
from freshcart.services.errors import NotFoundError
from freshcart.services.order_service import OrderService
from freshcart.services.user_service import UserService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(
    store: OrderStore = Depends(get_order_store),
    cart_repo: CartRepo = Depends(get_cart_repo),
) -> OrderService:
    return OrderService(store, cart_repo=cart_repo)


@router.post("/", response_model=OrderOut, status_code=201)
def create_order(
    payload: CheckoutIn,
    user_id: str = Query(...),
    db: Session = Depends(get_db),
    svc: OrderService = Depends(get_service),
):
    """
    Tworzy zamowienie z koszyka sesji.
    Koszyk czyszczony dopiero po udanym zapisie.
    """
    try:
        UserService(db).get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        return svc.place_order(
            user_id=user_id,
            session_id=payload.session_id,
            shipping=payload.shipping,
            payment_method=payload.payment_method,
            notes=payload.notes,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/my-orders", response_model=List[OrderOut])
def my_orders(user_id: str = Query(...), svc: OrderService = Depends(get_service)):
    return svc.get_orders_for_user(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: str, user_id: str = Query(...), svc: OrderService = Depends(get_service)):
    try:
        return svc.get_order(order_id, user_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
