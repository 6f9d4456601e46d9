# ticketgate/ticket/models.py
import uuid

from sqlalchemy import Column, DateTime, String, Uuid, func
from ticketgate.core.database import Base

TAX_ID_MAX_LENGTH = 20
NAME_MAX_LENGTH = 100


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    tax_id = Column(String(TAX_ID_MAX_LENGTH), nullable=False)
    first_name = Column(String(NAME_MAX_LENGTH), nullable=False)
    last_name = Column(String(NAME_MAX_LENGTH), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
