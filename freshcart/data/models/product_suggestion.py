from sqlalchemy import Column, String, Text, DateTime

from freshcart.data.database import Base
from freshcart.data.models._columns import new_id, utcnow


class ProductSuggestionModel(Base):
    __tablename__ = "product_suggestions"

    id = Column(String(36), primary_key=True, default=new_id)
    suggested_product_name = Column(String(200), nullable=False)
    product_description = Column(Text, nullable=True)
    suggested_category = Column(String(100), nullable=True)
    user_email = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default="pending")  # pending, reviewed, implemented, rejected
    admin_notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
