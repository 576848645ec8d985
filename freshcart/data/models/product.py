from sqlalchemy import Column, Integer, ForeignKey, String, Text, DateTime, Numeric

from freshcart.data.database import Base
from freshcart.data.models._columns import new_id, utcnow


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False)  # cena za kg
    category_id = Column(String(36), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    category = Column(String(100), nullable=False)
    image_url = Column(Text, nullable=False, default="")
    in_stock = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
