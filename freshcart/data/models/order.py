from sqlalchemy import Column, ForeignKey, String, Text, DateTime, Numeric
from sqlalchemy.orm import relationship

from freshcart.data.database import Base
from freshcart.data.models._columns import new_id, utcnow


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    total = Column(Numeric(10, 2), nullable=False)
    delivery_fee = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(String(50), nullable=False, default="pending")  # pending, confirmed, shipped, delivered, cancelled
    payment_status = Column(String(50), nullable=False, default="pending_payment")

    shipping_name = Column(Text, nullable=False)
    shipping_email = Column(Text, nullable=False)
    shipping_phone = Column(Text, nullable=False)
    shipping_address = Column(Text, nullable=False)  # nazwa osiedla
    shipping_flat_number = Column(Text, nullable=False)
    payment_method = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )
