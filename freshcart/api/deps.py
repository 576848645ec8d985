# freshcart/api/deps.py
from functools import lru_cache

from fastapi import Depends, HTTPException, Query
from sqlalchemy.orm import Session

from freshcart.data.database import get_db
from freshcart.repos.cart_repo import CartRepo, RedisCartRepo
from freshcart.repos.order_repo import OrderRepo
from freshcart.repos.payment_repo import PaymentRepo
from freshcart.repos.storage import OrderStore, PaymentStore
from freshcart.services.gateway_client import GatewayClient, build_gateway_client
from freshcart.services.user_service import UserService


@lru_cache
def get_cart_repo() -> CartRepo:
    return RedisCartRepo()


@lru_cache
def get_gateway() -> GatewayClient:
    return build_gateway_client()


def get_order_store(db: Session = Depends(get_db)) -> OrderStore:
    return OrderRepo(db)


def get_payment_store(db: Session = Depends(get_db)) -> PaymentStore:
    return PaymentRepo(db)


def require_admin(admin_id: str = Query(...), db: Session = Depends(get_db)) -> str:
    if not UserService(db).is_admin(admin_id):
        raise HTTPException(status_code=403, detail="Admin access required")
    return admin_id
