from sqlalchemy import Column, String, DateTime

from freshcart.data.database import Base
from freshcart.data.models._columns import new_id, utcnow


class SocietyRequestModel(Base):
    """Prosba o dowoz do osiedla, ktorego jeszcze nie obslugujemy."""

    __tablename__ = "society_requests"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    society_name = Column(String(200), nullable=False)
    phone = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
