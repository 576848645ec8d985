from sqlalchemy import Column, ForeignKey, String, Text, DateTime, Numeric

from freshcart.data.database import Base
from freshcart.data.models._columns import new_id, utcnow


class PaymentModel(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)

    gateway_order_id = Column(String(100), nullable=True, unique=True)
    gateway_payment_id = Column(String(100), nullable=True)
    gateway_signature = Column(Text, nullable=True)

    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(10), nullable=False, default="INR")
    status = Column(String(20), nullable=False, default="created")  # created, authorized, captured, failed, refunded
    payment_method = Column(String(50), nullable=True)
    payment_details = Column(Text, nullable=True)  # surowy JSON z bramki

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
