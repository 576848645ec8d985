# freshcart/repos/payment_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from freshcart.data.models._columns import utcnow
from freshcart.data.models.payment import PaymentModel
from freshcart.domain.enums import PaymentStatus
from freshcart.repos.storage import PaymentStore


class PaymentRepo(PaymentStore):
    def __init__(self, db: Session):
        self.db = db

    def create_payment(self, payment: PaymentModel) -> PaymentModel:
        self.db.add(payment)
        self.db.commit()
        self.db.refresh(payment)
        return payment

    def update_payment(self, payment_id: str, **fields) -> PaymentModel | None:
        payment = self.db.get(PaymentModel, payment_id)
        if payment:
            for key, value in fields.items():
                setattr(payment, key, value)
            payment.updated_at = utcnow()
            self.db.commit()
            self.db.refresh(payment)
        return payment

    def get_payment_by_order_id(self, order_id: str) -> PaymentModel | None:
        stmt = (
            select(PaymentModel)
            .where(PaymentModel.order_id == order_id)
            .order_by(PaymentModel.created_at.desc())
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_captured_payment(self, order_id: str) -> PaymentModel | None:
        stmt = (
            select(PaymentModel)
            .where(PaymentModel.order_id == order_id, PaymentModel.status == PaymentStatus.CAPTURED.value)
            .order_by(PaymentModel.created_at.desc())
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_payment_by_gateway_order_id(self, gateway_order_id: str) -> PaymentModel | None:
        stmt = select(PaymentModel).where(PaymentModel.gateway_order_id == gateway_order_id)
        return self.db.execute(stmt).scalar_one_or_none()
