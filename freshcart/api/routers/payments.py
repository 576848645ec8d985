# freshcart/api/routers/payments.py
from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request

from freshcart.api.deps import get_gateway, get_order_store, get_payment_store
from freshcart.domain.schemas import PaymentInitIn, PaymentInitOut, PaymentVerifyIn
from freshcart.repos.storage import OrderStore, PaymentStore
from freshcart.services.errors import GatewayError, NotFoundError
from freshcart.services.gateway_client import GatewayClient
from freshcart.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["payments"])


def get_service(
    orders: OrderStore = Depends(get_order_store),
    payments: PaymentStore = Depends(get_payment_store),
    gateway: GatewayClient = Depends(get_gateway),
) -> PaymentService:
    return PaymentService(orders, payments, gateway)


@router.post("/create-order", response_model=PaymentInitOut)
def create_payment_order(
    payload: PaymentInitIn,
    user_id: str = Query(...),
    svc: PaymentService = Depends(get_service),
):
    try:
        return svc.initiate(payload.order_id, user_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except GatewayError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/verify")
def verify_payment(payload: PaymentVerifyIn, svc: PaymentService = Depends(get_service)):
    verified = svc.confirm(
        order_id=payload.order_id,
        gateway_order_id=payload.razorpay_order_id,
        gateway_payment_id=payload.razorpay_payment_id,
        signature=payload.razorpay_signature,
    )
    if not verified:
        raise HTTPException(status_code=400, detail="Payment could not be verified")
    return {"success": True, "order_id": payload.order_id}


@router.post("/webhook")
async def payment_webhook(
    request: Request,
    x_razorpay_signature: str = Header(""),
    svc: PaymentService = Depends(get_service),
):
    # podpis liczony z surowego body, nie z przeparsowanego JSONa
    raw_body = await request.body()
    try:
        accepted = svc.handle_webhook(raw_body, x_razorpay_signature)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not accepted:
        raise HTTPException(status_code=400, detail="Invalid webhook signature")
    return {"status": "ok"}
