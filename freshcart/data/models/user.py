from sqlalchemy import Column, String, Text, DateTime

from freshcart.data.database import Base
from freshcart.data.models._columns import new_id, utcnow


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=True)
    name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, default="user")  # user, admin

    # zapisane dane do wysylki
    shipping_name = Column(Text, nullable=True)
    shipping_phone = Column(Text, nullable=True)
    shipping_address = Column(Text, nullable=True)  # nazwa osiedla
    shipping_flat_number = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
