from sqlalchemy import Column, Integer, ForeignKey, String, Text, Numeric
from sqlalchemy.orm import relationship

from freshcart.data.database import Base
from freshcart.data.models._columns import new_id


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    # brak FK do products - linia zamowienia to snapshot, produkt moze zniknac
    product_id = Column(String(36), nullable=False)
    product_name = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    weight_kg = Column(Numeric(6, 3), nullable=False)
    unit_price_per_kg = Column(Numeric(10, 2), nullable=False)

    order = relationship("OrderModel", back_populates="items")
