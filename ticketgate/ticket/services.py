# ticketgate/ticket/services.py
import logging
import uuid
from dataclasses import dataclass

from qrcode.exceptions import DataOverflowError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ticketgate.core.errors import CapReached, InternalFailure, NotFound, ValidationError
from ticketgate.ticket import store
from ticketgate.ticket.models import NAME_MAX_LENGTH, TAX_ID_MAX_LENGTH, Ticket
from ticketgate.ticket.qr import to_data_url

logger = logging.getLogger(__name__)

DEFAULT_CAP = 3


@dataclass(frozen=True)
class IssuedTicket:
    id: uuid.UUID
    url: str
    qr_code: str


@dataclass(frozen=True)
class TicketStats:
    total_count: int


def validate_identity(tax_id: str | None, first_name: str | None, last_name: str | None) -> None:
    if not all(v and v.strip() for v in (tax_id, first_name, last_name)):
        raise ValidationError()
    if len(tax_id) > TAX_ID_MAX_LENGTH:
        raise ValidationError(f"taxId must be at most {TAX_ID_MAX_LENGTH} characters")
    if len(first_name) > NAME_MAX_LENGTH or len(last_name) > NAME_MAX_LENGTH:
        raise ValidationError(f"firstName and lastName must be at most {NAME_MAX_LENGTH} characters")


def ticket_url(base_url: str, ticket_id: uuid.UUID) -> str:
    return f"{base_url.rstrip('/')}/ticket/{ticket_id}"


def issue_ticket(
    db: Session,
    tax_id: str | None,
    first_name: str | None,
    last_name: str | None,
    base_url: str,
    cap: int = DEFAULT_CAP,
) -> IssuedTicket:
    validate_identity(tax_id, first_name, last_name)

    try:
        ticket_id = store.insert_ticket_under_cap(db, tax_id, first_name, last_name, cap)
    except SQLAlchemyError as exc:
        logger.exception("Error creating ticket for tax id %s", tax_id)
        raise InternalFailure() from exc
    if ticket_id is None:
        logger.info("Ticket cap of %d reached for tax id %s", cap, tax_id)
        raise CapReached(cap)

    url = ticket_url(base_url, ticket_id)
    try:
        qr_code = to_data_url(url)
    except (DataOverflowError, OSError, ValueError) as exc:
        logger.exception("Error encoding QR code for ticket %s", ticket_id)
        raise InternalFailure() from exc

    logger.info("Issued ticket %s for tax id %s", ticket_id, tax_id)
    return IssuedTicket(id=ticket_id, url=url, qr_code=qr_code)


def lookup_ticket(db: Session, ticket_id: str) -> Ticket:
    try:
        key = uuid.UUID(ticket_id)
    except ValueError as exc:
        raise NotFound() from exc
    ticket = store.get_ticket(db, key)
    if ticket is None:
        raise NotFound()
    return ticket


def count_for_identity(db: Session, tax_id: str) -> int:
    return store.count_by_tax_id(db, tax_id)


def ticket_stats(db: Session) -> TicketStats:
    return TicketStats(total_count=store.total_count(db))
