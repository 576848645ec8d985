from sqlalchemy import Column, String, Text, DateTime

from freshcart.data.database import Base
from freshcart.data.models._columns import new_id, utcnow


class ContactSubmissionModel(Base):
    __tablename__ = "contact_submissions"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(20), nullable=True)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
