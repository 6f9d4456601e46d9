# ticketgate/ticket/schemas.py
import uuid
from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from ticketgate.ticket.models import NAME_MAX_LENGTH, TAX_ID_MAX_LENGTH


class TicketRequest(BaseModel):
    # Presence is checked by the service so a missing field maps to a 400
    tax_id: str | None = Field(
        default=None,
        max_length=TAX_ID_MAX_LENGTH,
        validation_alias=AliasChoices("taxId", "vatin"),
    )
    first_name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH, validation_alias="firstName")
    last_name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH, validation_alias="lastName")


class TicketIssuedOut(BaseModel):
    message: str = "Ticket created"
    ticket_url: str = Field(serialization_alias="ticketUrl")
    qr_code: str = Field(serialization_alias="qrCode")


class TicketOut(BaseModel):
    id: uuid.UUID
    tax_id: str = Field(serialization_alias="taxId")
    first_name: str = Field(serialization_alias="firstName")
    last_name: str = Field(serialization_alias="lastName")
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}
