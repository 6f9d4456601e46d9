# ticketgate/ticket/store.py
import uuid

from sqlalchemy import String, Uuid, func, insert, literal, select
from sqlalchemy.orm import Session
from ticketgate.ticket.models import Ticket


def count_by_tax_id(db: Session, tax_id: str) -> int:
    return db.query(func.count(Ticket.id)).filter(Ticket.tax_id == tax_id).scalar() or 0


def total_count(db: Session) -> int:
    return db.query(func.count(Ticket.id)).scalar() or 0


def get_ticket(db: Session, ticket_id: uuid.UUID) -> Ticket | None:
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()


def insert_ticket(db: Session, tax_id: str, first_name: str, last_name: str) -> uuid.UUID:
    db_ticket = Ticket(tax_id=tax_id, first_name=first_name, last_name=last_name)
    db.add(db_ticket)
    db.commit()
    db.refresh(db_ticket)
    return db_ticket.id


def insert_ticket_under_cap(
    db: Session, tax_id: str, first_name: str, last_name: str, cap: int
) -> uuid.UUID | None:
    """Insert a ticket only if ``tax_id`` holds fewer than ``cap`` tickets.

    The count and the insert run as one ``INSERT ... SELECT ... WHERE`` statement.
    On PostgreSQL a transaction-scoped advisory lock on the tax id serializes
    concurrent issuances for the same identity, so two requests can't both see
    ``cap - 1`` and both write. SQLite holds a database-wide write lock for the
    statement, which gives the same guarantee.

    Returns the new ticket id, or ``None`` if the cap was reached and nothing
    was written.
    """
    ticket_id = uuid.uuid4()

    if db.get_bind().dialect.name == "postgresql":
        db.execute(select(func.pg_advisory_xact_lock(func.hashtext(tax_id))))

    held = (
        select(func.count(Ticket.id))
        .where(Ticket.tax_id == tax_id)
        .correlate(None)
        .scalar_subquery()
    )
    source = select(
        literal(ticket_id, Uuid),
        literal(tax_id, String),
        literal(first_name, String),
        literal(last_name, String),
    ).where(held < cap)
    stmt = insert(Ticket).from_select(["id", "tax_id", "first_name", "last_name"], source)

    result = db.execute(stmt)
    db.commit()
    if result.rowcount == 0:
        return None
    return ticket_id
