# freshcart/api/routers/admin.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from freshcart.api.deps import get_gateway, get_order_store, get_payment_store, require_admin
from freshcart.data.database import get_db
from freshcart.domain.schemas import (
    AnalyticsOut,
    CategoryIn,
    CategoryOut,
    CategoryUpdate,
    ContactOut,
    OrderOut,
    PaymentOut,
    PaymentStatusUpdate,
    ProductIn,
    ProductOut,
    ProductSuggestionOut,
    ProductUpdate,
    RoleUpdate,
    SocietyRequestOut,
    StatusUpdate,
    SuggestionNotesUpdate,
    SuggestionStatusUpdate,
    UserRead,
)
from freshcart.repos.storage import OrderStore, PaymentStore
from freshcart.services.analytics_service import AnalyticsService
from freshcart.services.catalog_service import CatalogService
from freshcart.services.enquiry_service import EnquiryService
from freshcart.services.errors import NotFoundError
from freshcart.services.gateway_client import GatewayClient
from freshcart.services.order_service import OrderService
from freshcart.services.payment_service import PaymentService
from freshcart.services.user_service import UserService

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/check")
def check_admin():
    return {"is_admin": True}


# ---- products ----

@router.post("/products", response_model=ProductOut, status_code=201)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    try:
        return CatalogService(db).create_product(payload.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/products/{product_id}", response_model=ProductOut)
def update_product(product_id: str, payload: ProductUpdate, db: Session = Depends(get_db)):
    try:
        return CatalogService(db).update_product(product_id, payload.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/products/{product_id}")
def delete_product(product_id: str, db: Session = Depends(get_db)):
    try:
        CatalogService(db).delete_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True}


# ---- categories ----

@router.post("/categories", response_model=CategoryOut, status_code=201)
def create_category(payload: CategoryIn, db: Session = Depends(get_db)):
    try:
        return CatalogService(db).create_category(payload.name, payload.description)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/categories/{category_id}", response_model=CategoryOut)
def update_category(category_id: str, payload: CategoryUpdate, db: Session = Depends(get_db)):
    try:
        return CatalogService(db).update_category(category_id, payload.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/categories/{category_id}")
def delete_category(category_id: str, db: Session = Depends(get_db)):
    try:
        CatalogService(db).delete_category(category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True}


# ---- orders ----

@router.get("/orders", response_model=List[OrderOut])
def list_orders(store: OrderStore = Depends(get_order_store)):
    return OrderService(store).list_orders()


@router.put("/orders/{order_id}/status", response_model=OrderOut)
def update_order_status(
    order_id: str,
    payload: StatusUpdate,
    store: OrderStore = Depends(get_order_store),
):
    try:
        return OrderService(store).update_status(order_id, payload.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/orders/{order_id}/payment-status", response_model=OrderOut)
def update_order_payment_status(
    order_id: str,
    payload: PaymentStatusUpdate,
    store: OrderStore = Depends(get_order_store),
):
    try:
        return OrderService(store).update_payment_status(order_id, payload.payment_status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/orders/{order_id}/refund", response_model=PaymentOut)
def refund_order(
    order_id: str,
    orders: OrderStore = Depends(get_order_store),
    payments: PaymentStore = Depends(get_payment_store),
    gateway: GatewayClient = Depends(get_gateway),
):
    try:
        return PaymentService(orders, payments, gateway).refund(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ---- users ----

@router.get("/users", response_model=List[UserRead])
def list_users(db: Session = Depends(get_db)):
    return UserService(db).list_users()


@router.put("/users/{user_id}/role", response_model=UserRead)
def update_user_role(user_id: str, payload: RoleUpdate, db: Session = Depends(get_db)):
    try:
        return UserService(db).set_role(user_id, payload.role)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ---- enquiries ----

@router.get("/contact/submissions", response_model=List[ContactOut])
def list_contact_submissions(db: Session = Depends(get_db)):
    return EnquiryService(db).list_contact_submissions()


@router.get("/product-suggestions", response_model=List[ProductSuggestionOut])
def list_product_suggestions(db: Session = Depends(get_db)):
    return EnquiryService(db).list_suggestions()


@router.put("/product-suggestions/{suggestion_id}/status", response_model=ProductSuggestionOut)
def update_suggestion_status(suggestion_id: str, payload: SuggestionStatusUpdate, db: Session = Depends(get_db)):
    try:
        return EnquiryService(db).update_suggestion_status(suggestion_id, payload.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/product-suggestions/{suggestion_id}/notes", response_model=ProductSuggestionOut)
def update_suggestion_notes(suggestion_id: str, payload: SuggestionNotesUpdate, db: Session = Depends(get_db)):
    try:
        return EnquiryService(db).update_suggestion_notes(suggestion_id, payload.admin_notes)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/product-suggestions/{suggestion_id}")
def delete_suggestion(suggestion_id: str, db: Session = Depends(get_db)):
    try:
        EnquiryService(db).delete_suggestion(suggestion_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True}


@router.get("/society-requests", response_model=List[SocietyRequestOut])
def list_society_requests(db: Session = Depends(get_db)):
    return EnquiryService(db).list_society_requests()


@router.delete("/society-requests/{request_id}")
def delete_society_request(request_id: str, db: Session = Depends(get_db)):
    try:
        EnquiryService(db).delete_society_request(request_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True}


# ---- analytics ----

@router.get("/analytics", response_model=AnalyticsOut)
def analytics(db: Session = Depends(get_db), store: OrderStore = Depends(get_order_store)):
    return AnalyticsService(db, store).summary()
